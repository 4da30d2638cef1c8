"""A small 2D simulation of round objects bouncing around a gridded world."""

__version__ = "0.1.0"
__all__ = ["__version__"]