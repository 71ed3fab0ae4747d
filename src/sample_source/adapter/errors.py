from __future__ import annotations


class DecodeError(ValueError):
    """Raised when a JSON-encoded configuration value cannot be decoded."""


class EncodeError(ValueError):
    """Raised when a configuration value cannot be encoded to JSON."""
