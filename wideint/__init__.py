"""Radix formatting and stream-style parsing of 128-bit integers."""

__version__ = "0.1.0"
__all__ = ["formatting", "stream"]