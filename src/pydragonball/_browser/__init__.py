"""Internal helpers for the catalog browser."""
