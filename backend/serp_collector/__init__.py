"""Search results page collector service."""

__version__ = "1.0.0"
