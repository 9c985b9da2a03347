"""Model layer -- public type re-exports."""

from objtasks.model.shapes import Circle, Rectangle

__all__ = ["Rectangle", "Circle"]
