"""Marker CLI commands."""
