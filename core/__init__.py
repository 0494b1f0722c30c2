"""Core utilities shared across the narration runtime."""
