"""Fetching and walking Figma document trees."""
