"""Multi-threaded matrix multiplication benchmark with selectable loop orders."""

__version__ = "0.1.0"
__all__ = ["matrix", "multiply", "cli"]