"""Pygments-backed highlighting."""
