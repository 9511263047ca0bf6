"""Solvers for fifteen competitive programming problems, with a shared Fenwick tree."""

__version__ = "0.1.0"