"""
Rendering of skyline coordinates into drawable documents.
"""

from .drawable import DrawableElement, format_number, to_svg
from .svg_renderer import SilhouetteRenderer

__all__ = ['DrawableElement', 'format_number', 'to_svg', 'SilhouetteRenderer']
