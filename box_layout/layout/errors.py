"""
Layout errors.
"""

class LayoutError(Exception):
    """Base class for invalid box trees."""


class InvalidRootBox(LayoutError):
    """Raised when the root styled node has ``display: none``."""

    def __init__(self, message: str = "Root node has display: none"):
        super().__init__(message)


class StyleNodeUnavailable(LayoutError):
    """Raised when the style node of an anonymous block box is requested."""

    def __init__(self, message: str = "Anonymous block box has no style node"):
        super().__init__(message)
