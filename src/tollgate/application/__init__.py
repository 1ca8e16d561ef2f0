"""Application layer: authentication use cases and request guards."""
