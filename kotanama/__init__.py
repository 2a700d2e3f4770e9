"""Console directory of cities and the names registered in each, kept in memory."""

__version__ = "1.0.0"
__all__ = ["__version__"]