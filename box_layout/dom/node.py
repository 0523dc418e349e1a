"""
Node implementation for the document tree.
This module implements the read-only element/text tree consumed by the style resolver.
"""

from enum import IntEnum
from typing import Dict, List, Optional, Set, Iterator

class NodeType(IntEnum):
    """Node types, numbered as in the DOM."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3


class Node:
    """
    Base node of the document tree.

    Nodes are built once by a parser adapter (or the ``elem``/``text``
    helpers) and never mutated afterwards.
    """

    def __init__(self, node_type: NodeType, children: Optional[List['Node']] = None):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
            children: Ordered child nodes
        """
        self.node_type = node_type
        self._children = tuple(children or ())

    @property
    def children(self) -> List['Node']:
        """Get the ordered child nodes."""
        return list(self._children)

    @property
    def is_element(self) -> bool:
        return self.node_type == NodeType.ELEMENT_NODE

    @property
    def is_text(self) -> bool:
        return self.node_type == NodeType.TEXT_NODE

    def iter_tree(self) -> Iterator['Node']:
        """
        Iterate over this node and all of its descendants in document order.

        Yields:
            Each node of the subtree, parents before children
        """
        yield self
        for child in self._children:
            yield from child.iter_tree()


class Text(Node):
    """Text node holding a run of character data."""

    def __init__(self, data: str):
        super().__init__(NodeType.TEXT_NODE)

        # Ensure data is not None
        if data is None:
            data = ""
        self.data = data

    def __repr__(self):
        return f"Text({self.data!r})"


class Element(Node):
    """
    Element node of the document tree.

    Holds a lowercase tag name, a string attribute map and ordered children.
    """

    def __init__(self, tag_name: str, attributes: Optional[Dict[str, str]] = None,
                 children: Optional[List[Node]] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            attributes: Attribute name to value mapping
            children: Ordered child nodes
        """
        super().__init__(NodeType.ELEMENT_NODE, children)

        self.tag_name = tag_name.lower()
        self._attributes: Dict[str, str] = dict(attributes or {})

    @property
    def attributes(self) -> Dict[str, str]:
        """Get a copy of the attribute map."""
        return dict(self._attributes)

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get an attribute value.

        Args:
            name: Attribute name

        Returns:
            The attribute value or None if it is not set
        """
        return self._attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    @property
    def id(self) -> Optional[str]:
        """Get the ID of the element, or None when it has no id attribute."""
        return self._attributes.get('id')

    @property
    def classes(self) -> Set[str]:
        """Get the set of classes applied to this element."""
        class_attr = self._attributes.get('class') or ""
        return {cls for cls in class_attr.split() if cls}

    def __repr__(self):
        return f"Element({self.tag_name!r}, {self._attributes!r}, {len(self._children)} children)"


def text(data: str) -> Text:
    """Create a text node."""
    return Text(data)


def elem(tag_name: str, attributes: Optional[Dict[str, str]] = None,
         children: Optional[List[Node]] = None) -> Element:
    """
    Create an element node.

    Args:
        tag_name: Tag name of the element
        attributes: Attribute map
        children: Ordered child nodes

    Returns:
        The new element
    """
    return Element(tag_name, attributes, children)
