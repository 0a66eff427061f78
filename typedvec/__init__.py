"""Fixed-width typed numeric vectors with arithmetic, statistics, search and normalization."""

__version__ = "0.1.0"

__all__ = ["vector", "arithmetic", "statistics", "search", "normalize"]