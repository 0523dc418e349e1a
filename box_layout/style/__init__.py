"""
Style resolver for the layout engine.
This package turns a document tree and a style sheet into a styled tree.
"""

from .cascade import (
    StyledNode, Display, PropertyMap, INHERITED_PROPERTIES,
    style_tree, matches, match_rule, matching_rules, specified_values
)

__all__ = [
    'StyledNode', 'Display', 'PropertyMap', 'INHERITED_PROPERTIES',
    'style_tree', 'matches', 'match_rule', 'matching_rules', 'specified_values'
]
