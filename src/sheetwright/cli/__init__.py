"""Sheetwright command-line interface."""
