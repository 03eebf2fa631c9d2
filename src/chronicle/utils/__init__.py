"""Utility helpers shared across Chronicle modules."""
