"""In-memory database with bitmap indexes and chainable AND/OR/AND-NOT queries."""

__version__ = "0.1.0"
__all__ = ["__version__"]