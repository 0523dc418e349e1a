"""
Document tree for the layout engine.
This package provides the immutable element/text nodes the style resolver reads.
"""

from .node import Node, NodeType, Element, Text, elem, text

__all__ = [
    'Node', 'NodeType', 'Element', 'Text', 'elem', 'text'
]
