"""Infrastructure layer: file discovery and class-name extraction."""
