"""
Style resolution.
This module runs the cascade over a document tree and produces the styled tree.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..dom import Node, Element
from ..css import Rule, SimpleSelector, Stylesheet, Specificity, Value, Keyword

logger = logging.getLogger(__name__)

PropertyMap = Dict[str, Value]
MatchedRule = Tuple[Specificity, Rule]

# Properties copied from the parent when the element does not declare them
INHERITED_PROPERTIES = ('color', 'font-family')

class Display(Enum):
    """CSS display property values understood by box-tree construction."""
    INLINE = "inline"
    BLOCK = "block"
    NONE = "none"


class StyledNode:
    """
    A document node paired with its resolved property map.

    The node reference is not owned; the styled tree mirrors the document
    tree one to one, text nodes included.
    """

    def __init__(self, node: Node, specified_values: PropertyMap, children: List['StyledNode']):
        self.node = node
        self._specified_values = dict(specified_values)
        self.children = tuple(children)

    @property
    def specified_values(self) -> PropertyMap:
        """Get a copy of the resolved property map."""
        return dict(self._specified_values)

    def value(self, name: str) -> Optional[Value]:
        """
        Get the resolved value of a property.

        Args:
            name: Property name

        Returns:
            The value, or None if the property is not set
        """
        return self._specified_values.get(name)

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        """
        Get a property value, falling back to a shorthand and then a default.

        Args:
            name: Longhand property name (e.g., 'margin-left')
            fallback_name: Shorthand property name (e.g., 'margin')
            default: Value used when neither is set

        Returns:
            The resolved value
        """
        value = self.value(name)
        if value is None:
            value = self.value(fallback_name)
        if value is None:
            value = default
        return value

    def display(self) -> Display:
        """Get the display type, defaulting to inline."""
        value = self.value('display')
        if isinstance(value, Keyword):
            if value.keyword == 'block':
                return Display.BLOCK
            if value.keyword == 'none':
                return Display.NONE
        return Display.INLINE

    def __repr__(self):
        return f"StyledNode({self.node!r}, {self._specified_values!r})"


def style_tree(root: Node, stylesheet: Stylesheet,
               parent_style: Optional[PropertyMap] = None) -> StyledNode:
    """
    Resolve styles for a document tree.

    Args:
        root: Root of the (sub)tree to style
        stylesheet: Rules to apply
        parent_style: Resolved map of the parent, or None at the document root

    Returns:
        The styled tree rooted at ``root``
    """
    if isinstance(root, Element):
        current_style = specified_values(root, stylesheet, parent_style)
    else:
        current_style = dict(parent_style) if parent_style else {}

    children = [style_tree(child, stylesheet, current_style) for child in root.children]

    return StyledNode(root, current_style, children)


def matches(element: Element, selector: SimpleSelector) -> bool:
    """Check if a selector matches an element."""
    return selector.matches(element)


def match_rule(element: Element, rule: Rule) -> Optional[MatchedRule]:
    """
    Match a rule against an element.

    Args:
        element: The element to check
        rule: The rule to match

    Returns:
        (specificity of the best matching selector, rule), or None if no selector matches
    """
    specificity = rule.best_match(element)
    if specificity is None:
        return None
    return specificity, rule


def matching_rules(element: Element, stylesheet: Stylesheet) -> List[MatchedRule]:
    """Get every rule matching an element, in sheet order."""
    matched = []
    for rule in stylesheet.rules:
        match = match_rule(element, rule)
        if match is not None:
            matched.append(match)
    return matched


def specified_values(element: Element, stylesheet: Stylesheet,
                     parent_style: Optional[PropertyMap] = None) -> PropertyMap:
    """
    Compute the resolved property map of an element.

    Matching rules are applied in ascending specificity; equal specificities
    keep sheet order, so later rules win ties. Inheritable properties missing
    from the result are copied from the parent.

    Args:
        element: The element to resolve
        stylesheet: Rules to apply
        parent_style: Resolved map of the parent element

    Returns:
        Property name to value mapping
    """
    values: PropertyMap = {}
    rules = matching_rules(element, stylesheet)

    # sorted() is stable: ties keep document order
    rules = sorted(rules, key=lambda match: match[0])
    for _, rule in rules:
        for declaration in rule.declarations:
            values[declaration.name] = declaration.value

    if parent_style:
        for prop in INHERITED_PROPERTIES:
            if prop not in values and prop in parent_style:
                values[prop] = parent_style[prop]

    logger.debug(f"<{element.tag_name}> matched {len(rules)} rules, {len(values)} properties")

    return values
