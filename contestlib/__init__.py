"""Algorithms and data structures: range trees, sieves, graphs, AVL trees and string search."""

__version__ = "0.1.0"