"""
CSS parser adapter.
This module turns style sheet text into cascade rules using cssutils.
"""

import logging
import re
from typing import List, Optional

import cssutils

from ..css import Declaration, Rule, SimpleSelector, Stylesheet, parse_value

logger = logging.getLogger(__name__)

# Suppress cssutils warning logs
cssutils.log.setLevel(logging.CRITICAL)

# Optional tag (or *) followed by any run of #id / .class parts
SIMPLE_SELECTOR_PATTERN = re.compile(r'^(\*|[a-zA-Z][a-zA-Z0-9_-]*)?((?:[#.][a-zA-Z0-9_-]+)*)$')
SELECTOR_PART_PATTERN = re.compile(r'([#.])([a-zA-Z0-9_-]+)')

class CSSParser:
    """
    CSS parser for the layout engine.

    Only style rules whose selectors are single compound selectors (tag, id,
    classes) are kept; other selectors are dropped with a warning.
    """

    def __init__(self):
        """Initialize the CSS parser."""
        logger.debug("CSS Parser initialized")

    def parse(self, css_content: str) -> Stylesheet:
        """
        Parse CSS content into a style sheet.

        Args:
            css_content: CSS content to parse

        Returns:
            Parsed style sheet, in source order
        """
        sheet = cssutils.parseString(css_content)

        rules = []
        for rule in sheet:
            if rule.type != rule.STYLE_RULE:
                logger.debug(f"Skipping unsupported CSS rule type {rule.typeString}")
                continue

            parsed = self._convert_rule(rule)
            if parsed is not None:
                rules.append(parsed)

        logger.debug(f"Parsed {len(rules)} style rules")
        return Stylesheet(rules)

    def _convert_rule(self, rule) -> Optional[Rule]:
        selectors = []
        for selector in rule.selectorList:
            simple = parse_selector(selector.selectorText)
            if simple is None:
                logger.warning(f"Unsupported selector ignored: {selector.selectorText}")
                continue
            selectors.append(simple)

        if not selectors:
            return None

        declarations = [Declaration(prop.name, parse_value(prop.value)) for prop in rule.style]
        return Rule(selectors, declarations)


def parse_selector(selector_text: str) -> Optional[SimpleSelector]:
    """
    Parse a single compound selector.

    Args:
        selector_text: Selector text (e.g., 'div.note#main')

    Returns:
        The selector, or None for combinators, pseudo-classes, attribute
        selectors or more than one id
    """
    match = SIMPLE_SELECTOR_PATTERN.match(selector_text.strip())
    if not match:
        return None

    tag_name, rest = match.groups()
    if tag_name == '*':
        tag_name = None

    ids: List[str] = []
    classes: List[str] = []
    for kind, name in SELECTOR_PART_PATTERN.findall(rest):
        if kind == '#':
            ids.append(name)
        else:
            classes.append(name)

    if len(ids) > 1:
        return None

    return SimpleSelector(tag_name, ids[0] if ids else None, classes)
