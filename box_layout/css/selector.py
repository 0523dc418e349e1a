"""
CSS selectors, rules and style sheets.
This module holds the cascade input model and the simple-selector matcher.
"""

from typing import List, Optional, Set, Tuple, Iterable

from ..dom import Element
from .values import Value

# (id, class, tag), compared lexicographically
Specificity = Tuple[int, int, int]

class SimpleSelector:
    """
    A single compound selector: optional tag, optional id, set of classes.

    Absent constraints match every element.
    """

    def __init__(self, tag_name: Optional[str] = None, id: Optional[str] = None,
                 classes: Optional[Iterable[str]] = None):
        """
        Initialize a simple selector.

        Args:
            tag_name: Tag name constraint, or None
            id: Id constraint, or None
            classes: Class names the element must all carry
        """
        self.tag_name = tag_name.lower() if tag_name else None
        self.id = id
        self.classes: Set[str] = set(classes or ())

    @property
    def specificity(self) -> Specificity:
        """Get the (id, class, tag) specificity of this selector."""
        return (
            1 if self.id is not None else 0,
            len(self.classes),
            1 if self.tag_name is not None else 0,
        )

    def matches(self, element: Element) -> bool:
        """
        Check whether this selector matches an element.

        Args:
            element: The element to check

        Returns:
            True if every present constraint holds
        """
        if self.tag_name is not None and element.tag_name != self.tag_name:
            return False

        if self.id is not None and element.id != self.id:
            return False

        return self.classes <= element.classes

    def __eq__(self, other):
        return (isinstance(other, SimpleSelector)
                and self.tag_name == other.tag_name
                and self.id == other.id
                and self.classes == other.classes)

    def __repr__(self):
        text = self.tag_name or ''
        if self.id is not None:
            text += f"#{self.id}"
        for class_name in sorted(self.classes):
            text += f".{class_name}"
        return f"SimpleSelector({text or '*'})"


class Declaration:
    """A ``name: value`` pair."""

    def __init__(self, name: str, value: Value):
        self.name = name
        self.value = value

    def __repr__(self):
        return f"Declaration({self.name!r}, {self.value!r})"


class Rule:
    """
    A style rule: a selector group sharing one declaration block.
    """

    def __init__(self, selectors: List[SimpleSelector], declarations: List[Declaration]):
        self.selectors = tuple(selectors)
        self.declarations = tuple(declarations)

    def best_match(self, element: Element) -> Optional[Specificity]:
        """
        Get the specificity of the best selector in this rule matching an element.

        Args:
            element: The element to check

        Returns:
            Highest specificity among matching selectors, or None if no match
        """
        max_specificity = None

        for selector in self.selectors:
            if selector.matches(element):
                if max_specificity is None or selector.specificity > max_specificity:
                    max_specificity = selector.specificity

        return max_specificity

    def __repr__(self):
        return f"Rule({list(self.selectors)}, {list(self.declarations)})"


class Stylesheet:
    """Ordered list of rules."""

    def __init__(self, rules: Optional[List[Rule]] = None):
        self.rules = tuple(rules or ())

    def __add__(self, other: 'Stylesheet') -> 'Stylesheet':
        return Stylesheet(list(self.rules) + list(other.rules))

    def __len__(self):
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)

    def __repr__(self):
        return f"Stylesheet({len(self.rules)} rules)"
