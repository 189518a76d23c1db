"""In-memory HTTP message service."""

__version__ = "1.0.0"
