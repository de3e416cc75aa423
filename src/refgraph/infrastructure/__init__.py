"""Infrastructure layer: reading graph sources from disk."""
