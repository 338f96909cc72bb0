"""Layout and styling primitives for an HTML rendering host: CSS values, boxes, fonts and URL resolution."""

__version__ = "0.1.0"
__all__ = ["__version__"]