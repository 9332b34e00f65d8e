"""Vent - personal append-only log."""
