"""
Layout engine.
This package builds the box tree and computes block-flow geometry.
"""

from .box_metrics import Rect, EdgeSizes, Dimensions
from .errors import LayoutError, InvalidRootBox, StyleNodeUnavailable
from .layout import BoxType, LayoutBox, build_layout_tree, layout_tree

__all__ = [
    'Rect', 'EdgeSizes', 'Dimensions',
    'LayoutError', 'InvalidRootBox', 'StyleNodeUnavailable',
    'BoxType', 'LayoutBox', 'build_layout_tree', 'layout_tree'
]
