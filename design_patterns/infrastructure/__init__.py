"""Infrastructure layer - technical implementations of domain ports."""
