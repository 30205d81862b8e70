"""Core data model, configuration and diagnostics."""
