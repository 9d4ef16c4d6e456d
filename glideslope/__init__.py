"""Glide slope calculator -- approach geometry and side-view projection."""

__version__ = "0.1.0"
