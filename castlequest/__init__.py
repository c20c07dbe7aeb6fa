"""A single-player console text adventure set in a nine-room castle."""

__version__ = "0.1.0"
__all__ = ["__version__"]