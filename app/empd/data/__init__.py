"""Bundled data files for empd."""
