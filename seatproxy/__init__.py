"""Copilot seat proxy."""

__version__ = "0.1.0"
