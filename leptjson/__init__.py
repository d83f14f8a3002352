"""Strict JSON parsing and serialization with a mutable value tree."""

__version__ = "0.1.0"
__all__ = ["errors", "value", "parser", "stringify"]