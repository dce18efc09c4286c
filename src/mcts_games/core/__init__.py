"""Core game definitions."""
