"""
Block layout implementation.
This module builds the box tree from a styled tree and computes box geometry.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from ..css import AUTO, ZERO, Length, Unit
from ..css.values import length_or_none
from ..dom import Element, Text
from ..style import StyledNode, Display
from .box_metrics import Dimensions
from .errors import InvalidRootBox, StyleNodeUnavailable

logger = logging.getLogger(__name__)

class BoxType(Enum):
    """Kinds of layout boxes."""
    BLOCK_NODE = "block"
    INLINE_NODE = "inline"
    ANONYMOUS_BLOCK = "anonymous"


class LayoutBox:
    """
    Layout box for a styled node.

    Anonymous block boxes wrap runs of inline children under a block parent
    and have no style node.
    """

    def __init__(self, box_type: BoxType, style_node: Optional[StyledNode] = None):
        """
        Initialize a layout box.

        Args:
            box_type: The kind of box
            style_node: The styled node this box was generated for (None for anonymous boxes)
        """
        self.box_type = box_type
        self._style_node = style_node
        self.dimensions = Dimensions()
        self.children: List['LayoutBox'] = []

    @property
    def style_node(self) -> StyledNode:
        """
        Get the styled node that generated this box.

        Raises:
            StyleNodeUnavailable: If this is an anonymous block box
        """
        if self.box_type == BoxType.ANONYMOUS_BLOCK:
            raise StyleNodeUnavailable()
        return self._style_node

    def get_inline_container(self) -> 'LayoutBox':
        """
        Get the box that new inline children should be appended to.

        Inline and anonymous boxes hold inline children themselves. A block
        box reuses its trailing anonymous block or appends a new one.
        """
        if self.box_type in (BoxType.INLINE_NODE, BoxType.ANONYMOUS_BLOCK):
            return self

        if not self.children or self.children[-1].box_type != BoxType.ANONYMOUS_BLOCK:
            self.children.append(LayoutBox(BoxType.ANONYMOUS_BLOCK))
        return self.children[-1]

    def layout(self, containing_block: Dimensions) -> None:
        """
        Lay out this box and its descendants.

        Args:
            containing_block: Dimensions of the containing block; its content
                height is the space already used by earlier siblings
        """
        if self.box_type == BoxType.BLOCK_NODE:
            self.layout_block(containing_block)
        elif self.box_type in (BoxType.INLINE_NODE, BoxType.ANONYMOUS_BLOCK):
            pass
        else:
            raise ValueError(f"Unknown box type: {self.box_type}")

    def layout_block(self, containing_block: Dimensions) -> None:
        # Child width depends on ours, so width comes first
        self.calculate_block_width(containing_block)

        self.calculate_block_position(containing_block)

        self.layout_block_children()

        # Height depends on the children
        self.calculate_block_height()

    def calculate_block_width(self, containing_block: Dimensions) -> None:
        """
        Resolve the width and horizontal edges of a block box.

        Over-constrained boxes absorb the difference in margin-right; auto
        widths take the remaining space; two auto margins center the box.

        Args:
            containing_block: Dimensions of the containing block
        """
        style = self.style_node

        width = style.value('width') or AUTO

        margin_left = style.lookup('margin-left', 'margin', ZERO)
        margin_right = style.lookup('margin-right', 'margin', ZERO)

        border_left = style.lookup('border-left-width', 'border-width', ZERO)
        border_right = style.lookup('border-right-width', 'border-width', ZERO)

        padding_left = style.lookup('padding-left', 'padding', ZERO)
        padding_right = style.lookup('padding-right', 'padding', ZERO)

        total = sum(value.to_px() for value in (
            margin_left, margin_right,
            border_left, border_right,
            padding_left, padding_right,
            width,
        ))

        # Too wide for the container: auto margins collapse to zero
        if width != AUTO and total > containing_block.content.width:
            if margin_left == AUTO:
                margin_left = ZERO
            if margin_right == AUTO:
                margin_right = ZERO

        underflow = containing_block.content.width - total

        width_auto = width == AUTO
        margin_left_auto = margin_left == AUTO
        margin_right_auto = margin_right == AUTO

        if not width_auto and not margin_left_auto and not margin_right_auto:
            margin_right = Length(margin_right.to_px() + underflow, Unit.PX)
        elif not width_auto and not margin_left_auto and margin_right_auto:
            margin_right = Length(underflow, Unit.PX)
        elif not width_auto and margin_left_auto and not margin_right_auto:
            margin_left = Length(underflow, Unit.PX)
        elif width_auto:
            if margin_left_auto:
                margin_left = ZERO
            if margin_right_auto:
                margin_right = ZERO

            if underflow >= 0.0:
                width = Length(underflow, Unit.PX)
            else:
                # Overflowing edges push into margin-right
                width = ZERO
                margin_right = Length(margin_right.to_px() + underflow, Unit.PX)
        else:
            margin_left = Length(underflow / 2.0, Unit.PX)
            margin_right = Length(underflow / 2.0, Unit.PX)

        d = self.dimensions
        d.content.width = width.to_px()

        d.padding.left = padding_left.to_px()
        d.padding.right = padding_right.to_px()

        d.border.left = border_left.to_px()
        d.border.right = border_right.to_px()

        d.margin.left = margin_left.to_px()
        d.margin.right = margin_right.to_px()

    def calculate_block_position(self, containing_block: Dimensions) -> None:
        """
        Resolve the vertical edges and place the box below earlier siblings.

        Args:
            containing_block: Dimensions of the containing block
        """
        style = self.style_node
        d = self.dimensions

        d.margin.top = style.lookup('margin-top', 'margin', ZERO).to_px()
        d.margin.bottom = style.lookup('margin-bottom', 'margin', ZERO).to_px()

        d.border.top = style.lookup('border-top-width', 'border-width', ZERO).to_px()
        d.border.bottom = style.lookup('border-bottom-width', 'border-width', ZERO).to_px()

        d.padding.top = style.lookup('padding-top', 'padding', ZERO).to_px()
        d.padding.bottom = style.lookup('padding-bottom', 'padding', ZERO).to_px()

        d.content.x = containing_block.content.x + d.margin.left + d.border.left + d.padding.left
        d.content.y = (containing_block.content.y + containing_block.content.height
                       + d.margin.top + d.border.top + d.padding.top)

    def layout_block_children(self) -> None:
        """Stack the children vertically inside this box's content area."""
        height = 0.0
        for child in self.children:
            containing_block = self.dimensions.copy()
            containing_block.content.height = height

            child.layout(containing_block)
            height += child.dimensions.margin_box().height

        self.dimensions.content.height = height

    def calculate_block_height(self) -> None:
        # An explicit pixel height wins over the stacked children
        height = length_or_none(self.style_node.value('height'))
        if height is not None:
            self.dimensions.content.height = height

    def to_dict(self) -> Dict[str, Any]:
        """
        Get the box and its descendants as plain data.

        Returns:
            Nested dictionaries suitable for a painter or a JSON dump
        """
        result: Dict[str, Any] = {'box_type': self.box_type.value}

        if self.box_type != BoxType.ANONYMOUS_BLOCK:
            node = self._style_node.node
            if isinstance(node, Element):
                result['tag'] = node.tag_name
            elif isinstance(node, Text):
                result['text'] = node.data

        result['dimensions'] = self.dimensions.to_dict()
        result['children'] = [child.to_dict() for child in self.children]
        return result

    def __repr__(self):
        return f"LayoutBox({self.box_type.name}, {self.dimensions!r}, {len(self.children)} children)"


def build_layout_tree(style_node: StyledNode) -> LayoutBox:
    """
    Build the box tree for a styled tree.

    Args:
        style_node: Root of the styled tree

    Returns:
        Root layout box, without geometry

    Raises:
        InvalidRootBox: If the root has ``display: none``
    """
    display = style_node.display()
    if display == Display.BLOCK:
        root = LayoutBox(BoxType.BLOCK_NODE, style_node)
    elif display == Display.INLINE:
        root = LayoutBox(BoxType.INLINE_NODE, style_node)
    else:
        raise InvalidRootBox()

    for child in style_node.children:
        child_display = child.display()
        if child_display == Display.BLOCK:
            root.children.append(build_layout_tree(child))
        elif child_display == Display.INLINE:
            root.get_inline_container().children.append(build_layout_tree(child))

    return root


def layout_tree(style_node: StyledNode, containing_block: Dimensions) -> LayoutBox:
    """
    Transform a styled tree into a laid-out box tree.

    Args:
        style_node: Root of the styled tree
        containing_block: Initial containing block; it is copied and its
            content height reset to 0 before layout

    Returns:
        Root layout box with absolute geometry
    """
    containing_block = containing_block.copy()
    containing_block.content.height = 0.0

    root_box = build_layout_tree(style_node)
    root_box.layout(containing_block)

    logger.debug(f"Laid out root {root_box.box_type.name} box: {root_box.dimensions!r}")
    return root_box
