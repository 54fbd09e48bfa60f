"""Profile metric commands."""
