"""Utility helpers for the code execution gateway."""
