"""
Interactive Size-Map Generator for Responsive Ad Slots

Prompts for desktop, tablet and mobile slot sizes, validates them against the
WidthxHeight format and prints the size map JSON consumed by the slot renderer.
"""

__version__ = "0.1.0"
