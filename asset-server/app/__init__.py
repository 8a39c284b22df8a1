"""WebGL build asset server."""

__version__ = "0.1.0"
