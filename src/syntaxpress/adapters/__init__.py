"""Adapters binding the renderer to third-party engines and markup formats."""
