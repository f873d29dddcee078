"""Endpoint modules for the Dragon Ball API (internal)."""
