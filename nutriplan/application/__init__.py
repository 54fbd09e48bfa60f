"""Application layer: use cases built on the nutrition target domain."""
