"""Domain layer - business concepts with no infrastructure dependencies."""
