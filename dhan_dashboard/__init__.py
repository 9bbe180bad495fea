"""Dhan Dashboard - portfolio snapshot and equity series backend."""

__version__ = "1.0.0"
