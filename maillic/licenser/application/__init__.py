"""Application layer: validation use cases."""
