"""Utility packages for recsort."""
