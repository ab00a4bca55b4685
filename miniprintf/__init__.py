"""A small printf-style formatter for integers and strings, with extra conversions."""

__version__ = "0.1.0"
__all__ = ["numbers", "printf", "render", "simple", "spec", "text"]