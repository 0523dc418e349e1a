"""
Box Layout - cascade resolution and block/inline box layout in Python.
"""

# Package information
__version__ = "0.1.0"
__author__ = "Box Layout Team"
__description__ = "Style cascade and block/inline box layout for document trees"

from box_layout.dom import Node, Element, Text, elem, text
from box_layout.css import Stylesheet, Rule, SimpleSelector, Declaration, Keyword, Length, Unit
from box_layout.style import StyledNode, style_tree
from box_layout.layout import (
    Dimensions, Rect, EdgeSizes, LayoutBox, BoxType,
    LayoutError, InvalidRootBox, StyleNodeUnavailable,
    build_layout_tree, layout_tree
)
from box_layout.engine import LayoutEngine

__all__ = [
    'Node', 'Element', 'Text', 'elem', 'text',
    'Stylesheet', 'Rule', 'SimpleSelector', 'Declaration', 'Keyword', 'Length', 'Unit',
    'StyledNode', 'style_tree',
    'Dimensions', 'Rect', 'EdgeSizes', 'LayoutBox', 'BoxType',
    'LayoutError', 'InvalidRootBox', 'StyleNodeUnavailable',
    'build_layout_tree', 'layout_tree',
    'LayoutEngine',
]
