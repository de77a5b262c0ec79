"""Grace hash join over a simulated paged disk and memory buffer."""

__version__ = "0.1.0"
__all__ = ["__version__"]