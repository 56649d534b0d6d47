"""A JSON-backed login system and small threading demonstrations."""

__version__ = "0.1.0"