"""Configuration layer: discovery, models, settings, and logging."""
