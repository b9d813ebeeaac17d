"""Utilities for pagecss."""
