"""FigDict - infer data dictionaries from Figma text layers."""

__version__ = "0.1.0"
