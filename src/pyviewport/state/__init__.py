"""State layer.

This package is the single source of truth for how selection updates from
geolocation, primary selection, transaction resolution and map clicks are
merged into one viewport.
"""
