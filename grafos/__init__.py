"""Directed graphs as adjacency lists and matrices, with searches, paths, cycles and graph operations."""

__version__ = "0.1.0"