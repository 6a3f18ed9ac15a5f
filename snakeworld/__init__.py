"""A terminal snake game built on a small entity-component-system world."""

__version__ = "0.1.0"
__all__ = ["__version__"]