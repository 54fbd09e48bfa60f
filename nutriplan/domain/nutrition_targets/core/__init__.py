"""Core model of the nutrition target domain."""
