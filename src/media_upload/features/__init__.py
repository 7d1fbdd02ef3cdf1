"""Service features."""
