"""Utility helpers for org-outline."""
