"""Core sprite and action types."""
