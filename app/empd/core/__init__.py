"""Core configuration for empd: XDG paths and the console theme."""
