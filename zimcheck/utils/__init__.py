"""Utility helpers for zimcheck."""
