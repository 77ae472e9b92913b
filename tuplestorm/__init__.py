"""Tuples, hashing, grouping, topologies and components for a word-ranking stream pipeline."""

__version__ = "0.1.0"
__all__ = ["__version__"]