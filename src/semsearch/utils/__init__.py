"""Shared utilities (logging, data files)."""
