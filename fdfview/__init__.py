"""Load .fdf height maps and show their grid points in a window."""

__version__ = "0.1.0"
__all__ = ["__version__"]