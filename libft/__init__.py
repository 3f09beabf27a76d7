"""Utilities for ASCII characters, number conversions, byte buffers, a linked list, strings, line reading and printf-style formatting."""

__version__ = "0.1.0"