"""Pixel-display demos on an in-memory frame buffer: seven-segment clock, BDF text and snake."""

__version__ = "0.1.0"
__all__ = ["__version__"]