"""Presentation layer: platform entry points."""
