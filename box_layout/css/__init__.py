"""
CSS model for the layout engine.
This package provides values, selectors, rules and style sheets.
"""

from .values import Value, Keyword, Length, Unit, AUTO, ZERO, px, parse_value
from .selector import SimpleSelector, Declaration, Rule, Stylesheet, Specificity

__all__ = [
    'Value', 'Keyword', 'Length', 'Unit', 'AUTO', 'ZERO', 'px', 'parse_value',
    'SimpleSelector', 'Declaration', 'Rule', 'Stylesheet', 'Specificity'
]
