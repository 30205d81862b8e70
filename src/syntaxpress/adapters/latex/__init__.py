"""LaTeX markup output."""
