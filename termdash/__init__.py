"""termdash - terminal dashboard shell."""

__version__ = "0.1.0"
