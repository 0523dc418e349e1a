"""
HTML parser adapter.
This module turns markup into the layout engine's document tree using BeautifulSoup.
"""

import logging
from typing import Dict, List, Union

from bs4 import BeautifulSoup, Tag, NavigableString
from bs4.element import PreformattedString

from ..dom import Node, Element, elem, text

logger = logging.getLogger(__name__)

class HTMLParser:
    """HTML parser using BeautifulSoup, with html5lib for whole documents."""

    def __init__(self):
        """Initialize the HTML parser."""
        logger.debug("HTML parser initialized")

    def parse(self, html_content: Union[str, bytes], full_document: bool = False) -> Node:
        """
        Parse markup into a document tree.

        Fragments are parsed as written. A single top-level node becomes the
        root; several are wrapped in an ``html`` element. Whole documents go
        through html5lib, which always yields an ``html`` root.

        Args:
            html_content: Markup to parse
            full_document: Parse with html5lib's HTML5 tree construction

        Returns:
            Root node of the document tree
        """
        if isinstance(html_content, bytes):
            html_content = html_content.decode('utf-8', errors='replace')

        # Unicode BOM appears as \ufeff when incorrectly decoded
        if html_content.startswith('\ufeff'):
            logger.debug("Removing BOM marker from the beginning of HTML content")
            html_content = html_content[1:]

        if full_document:
            soup = BeautifulSoup(html_content, 'html5lib')
        else:
            soup = BeautifulSoup(html_content, 'html.parser')

        nodes = self._convert_children(soup)
        if len(nodes) == 1:
            return nodes[0]
        return elem('html', {}, nodes)

    def _convert_children(self, tag: Tag) -> List[Node]:
        nodes = []
        for child in tag.children:
            if isinstance(child, Tag):
                nodes.append(self._convert_element(child))
            elif isinstance(child, PreformattedString):
                # Comments, doctypes, CDATA and processing instructions
                continue
            elif isinstance(child, NavigableString):
                data = str(child)
                if data.strip():
                    nodes.append(text(data))
        return nodes

    def _convert_element(self, tag: Tag) -> Element:
        return elem(tag.name, self._convert_attributes(tag), self._convert_children(tag))

    def _convert_attributes(self, tag: Tag) -> Dict[str, str]:
        attributes = {}
        for name, value in tag.attrs.items():
            # Multi-valued attributes such as class come back as lists
            if isinstance(value, (list, tuple)):
                value = ' '.join(value)
            attributes[name] = value
        return attributes


def style_blocks(root: Node) -> List[str]:
    """
    Collect the text of every ``<style>`` element in a document tree.

    Args:
        root: Root of the document tree

    Returns:
        Style sheet texts in document order
    """
    blocks = []
    for node in root.iter_tree():
        if isinstance(node, Element) and node.tag_name == 'style':
            blocks.append(''.join(child.data for child in node.children if child.is_text))
    return blocks
