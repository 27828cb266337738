"""Algorithms and data structures for competitive programming: number theory, trees, flows, strings and graphs."""

__version__ = "0.1.0"