"""Utility library: lenient JSON values, parser, emitter and visitor, a B+ tree map and debug formatting."""

__version__ = "0.1.0"