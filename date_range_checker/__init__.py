"""Audit directories of date-ranged files for uncovered calendar days."""

__version__ = "0.1.0"
