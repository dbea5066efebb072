"""Password-based AES file encryption with a pure-Python AES implementation."""

__version__ = "1.0.0"