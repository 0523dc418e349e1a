"""
Layout engine facade.

This module ties the parser adapters, the style resolver and the layout
stage together into one pipeline.
"""

import logging
from typing import List, Optional

from box_layout.css import Stylesheet
from box_layout.dom import Node
from box_layout.layout import Dimensions, LayoutBox, Rect, layout_tree
from box_layout.parser import CSSParser, HTMLParser, style_blocks
from box_layout.style import StyledNode, style_tree
from box_layout.utils.config import Config
from box_layout.utils.logging import PerformanceLogger

logger = logging.getLogger(__name__)

class LayoutEngine:
    """
    Runs markup and style sheets through cascade and layout.

    The engine keeps only configuration; every call builds fresh trees.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the layout engine.

        Args:
            config: Configuration, or None for the defaults
        """
        self.config = config or Config()
        self.html_parser = HTMLParser()
        self.css_parser = CSSParser()
        self.perf = PerformanceLogger(logger, "LayoutEngine")

        logger.debug("Layout Engine initialized")

    def viewport(self, width: Optional[float] = None, height: Optional[float] = None) -> Dimensions:
        """
        Get the initial containing block.

        Args:
            width: Viewport width override
            height: Viewport height override

        Returns:
            Dimensions with the viewport as content rectangle at the origin
        """
        if width is None:
            width = self.config.get('viewport.width', 800)
        if height is None:
            height = self.config.get('viewport.height', 600)

        return Dimensions(content=Rect(0.0, 0.0, float(width), float(height)))

    def parse_stylesheet(self, css_texts: List[str]) -> Stylesheet:
        """Parse style sheet texts and concatenate their rules in order."""
        stylesheet = Stylesheet()
        for css_text in css_texts:
            stylesheet = stylesheet + self.css_parser.parse(css_text)
        return stylesheet

    def style(self, document: Node, stylesheet: Stylesheet) -> StyledNode:
        self.perf.start("style")
        styled = style_tree(document, stylesheet)
        self.perf.end("style")
        return styled

    def layout(self, styled: StyledNode, containing_block: Optional[Dimensions] = None) -> LayoutBox:
        """
        Lay out a styled tree.

        Args:
            styled: Root of the styled tree
            containing_block: Initial containing block, or None for the configured viewport

        Returns:
            Root layout box

        Raises:
            LayoutError: If the styled tree cannot produce a root box
        """
        if containing_block is None:
            containing_block = self.viewport()

        self.perf.start("layout")
        root_box = layout_tree(styled, containing_block)
        self.perf.end("layout")
        return root_box

    def render(self, html_content: str, css_texts: Optional[List[str]] = None,
               width: Optional[float] = None, height: Optional[float] = None,
               full_document: bool = False, use_style_elements: bool = True) -> LayoutBox:
        """
        Parse, style and lay out a page.

        Args:
            html_content: Markup to lay out
            css_texts: Style sheet texts, applied after any ``<style>`` blocks
            width: Viewport width override
            height: Viewport height override
            full_document: Parse the markup as a whole HTML5 document
            use_style_elements: Include ``<style>`` element contents in the cascade

        Returns:
            Root layout box

        Raises:
            LayoutError: If the document cannot produce a root box
        """
        document = self.html_parser.parse(html_content, full_document=full_document)

        sheets = style_blocks(document) if use_style_elements else []
        sheets.extend(css_texts or [])
        stylesheet = self.parse_stylesheet(sheets)
        logger.info(f"Laying out document with {len(stylesheet)} style rules")

        styled = self.style(document, stylesheet)
        return self.layout(styled, self.viewport(width, height))
