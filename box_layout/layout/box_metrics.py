from typing import Dict

class Rect:
    """
    An axis-aligned rectangle in absolute pixel coordinates.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, width: float = 0.0, height: float = 0.0):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def expanded_by(self, edge: 'EdgeSizes') -> 'Rect':
        """
        Get a new rectangle grown outward by the given edge sizes.

        Args:
            edge: Amount to grow on each side

        Returns:
            The expanded rectangle
        """
        return Rect(
            self.x - edge.left,
            self.y - edge.top,
            self.width + edge.left + edge.right,
            self.height + edge.top + edge.bottom,
        )

    def copy(self) -> 'Rect':
        return Rect(self.x, self.y, self.width, self.height)

    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}

    def __eq__(self, other):
        return (isinstance(other, Rect)
                and (self.x, self.y, self.width, self.height)
                == (other.x, other.y, other.width, other.height))

    def __repr__(self):
        return f"Rect(x={self.x:g}, y={self.y:g}, width={self.width:g}, height={self.height:g})"


class EdgeSizes:
    """Sizes of the four edges of a padding, border or margin area."""

    def __init__(self, left: float = 0.0, right: float = 0.0, top: float = 0.0, bottom: float = 0.0):
        self.left = left
        self.right = right
        self.top = top
        self.bottom = bottom

    def copy(self) -> 'EdgeSizes':
        return EdgeSizes(self.left, self.right, self.top, self.bottom)

    def to_dict(self) -> Dict[str, float]:
        return {'left': self.left, 'right': self.right, 'top': self.top, 'bottom': self.bottom}

    def __eq__(self, other):
        return (isinstance(other, EdgeSizes)
                and (self.left, self.right, self.top, self.bottom)
                == (other.left, other.right, other.top, other.bottom))

    def __repr__(self):
        return (f"EdgeSizes(left={self.left:g}, right={self.right:g}, "
                f"top={self.top:g}, bottom={self.bottom:g})")


class Dimensions:
    """
    Represents the CSS box model metrics for a layout box.

    Content rectangle plus padding, border and margin edges.
    """

    def __init__(self, content: Rect = None, padding: EdgeSizes = None,
                 border: EdgeSizes = None, margin: EdgeSizes = None):
        # Content box in absolute coordinates
        self.content = content or Rect()

        self.padding = padding or EdgeSizes()
        self.border = border or EdgeSizes()
        self.margin = margin or EdgeSizes()

    def padding_box(self) -> Rect:
        """Get the content area plus padding."""
        return self.content.expanded_by(self.padding)

    def border_box(self) -> Rect:
        """Get the padding box plus borders."""
        return self.padding_box().expanded_by(self.border)

    def margin_box(self) -> Rect:
        """Get the border box plus margins."""
        return self.border_box().expanded_by(self.margin)

    def copy(self) -> 'Dimensions':
        return Dimensions(self.content.copy(), self.padding.copy(),
                          self.border.copy(), self.margin.copy())

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            'content': self.content.to_dict(),
            'padding': self.padding.to_dict(),
            'border': self.border.to_dict(),
            'margin': self.margin.to_dict(),
        }

    def __eq__(self, other):
        return (isinstance(other, Dimensions)
                and self.content == other.content
                and self.padding == other.padding
                and self.border == other.border
                and self.margin == other.margin)

    def __repr__(self):
        return (f"Dimensions(content={self.content!r}, padding={self.padding!r}, "
                f"border={self.border!r}, margin={self.margin!r})")
