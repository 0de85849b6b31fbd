"""Console analyzers for integer lists, pairs of lists, and lines of text."""

__version__ = "0.1.0"