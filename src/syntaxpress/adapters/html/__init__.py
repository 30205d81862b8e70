"""HTML markup output."""
