"""Graphs, hash tables, binary search trees and sorting, with log and city-route tools."""

__version__ = "0.1.0"