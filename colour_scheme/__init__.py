"""colour-scheme: harmonious colour groupings and palettes from one base colour."""

__version__ = '0.1.0'
