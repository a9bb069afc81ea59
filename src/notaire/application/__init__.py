"""Application layer: use cases."""
