"""Collection pipeline."""
