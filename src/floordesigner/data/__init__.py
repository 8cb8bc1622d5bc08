"""Packaged template data."""
