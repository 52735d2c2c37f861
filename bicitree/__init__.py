"""Bicycle-sharing network simulator over a binary tree of stations."""

__version__ = "0.1.0"