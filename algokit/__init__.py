"""Algorithms and data structures: flows, matchings, bitmask transforms, splay trees, sequences and NTT."""

__version__ = "0.1.0"