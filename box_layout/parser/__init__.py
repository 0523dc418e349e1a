"""
Parser adapters.
This package converts markup and style sheet text into the layout engine's input model.
"""

from .html_parser import HTMLParser, style_blocks
from .css_parser import CSSParser, parse_selector

__all__ = ['HTMLParser', 'CSSParser', 'style_blocks', 'parse_selector']
