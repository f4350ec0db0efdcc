"""selectorkit: immutable CSS selector builder and small object helpers."""

__version__ = "0.1.0"
