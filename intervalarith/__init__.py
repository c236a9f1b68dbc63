"""Proper and directed interval arithmetic on multiple-precision reals, with series-based elementary functions and input-form state."""

__version__ = "0.1.0"
__all__ = ["core", "arithmetic", "elementary", "gui"]