"""A small Redis-compatible key-value server with append-only persistence."""

__version__ = "1.0.3"