"""Zhihu answer writer backend."""

__version__ = "0.1.0"
