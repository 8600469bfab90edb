"""Manage a list of described map points: add, edit and delete them."""

__version__ = "0.1.0"