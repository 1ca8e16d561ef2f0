"""Domain layer: user profiles and shared domain utilities."""
