"""Utilities for XPM images, X11 colour names, line reading, printf-style formatting, strings, bytes and linked lists."""

__version__ = "0.1.0"