"""Read, write, view and paint SLImage (.slmg) raster images."""

__version__ = "0.1.0"
__all__ = ["cli", "display", "editor", "image"]