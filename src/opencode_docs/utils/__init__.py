"""Utility helpers for opencode_docs."""
