"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the renderers to drawing backends:
- Raster images (Pillow)
- Vector documents (ReportLab PDF and SVG)
- In-memory command recording (tests)
"""
