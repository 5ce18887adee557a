"""Output formatters for field dictionaries and text layers."""
