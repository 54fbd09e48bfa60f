"""Orchestrators for profile metric calculation."""
