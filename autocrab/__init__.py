"""Guarded file, shell, web and headless-browser tools, and UI element tree types."""

__version__ = "0.1.0"