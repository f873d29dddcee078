"""State/store layer.

This package is the single source of truth for what the catalog browser
currently shows: which tab and page are active, which items are loaded and
whether a detail view is open.
"""
