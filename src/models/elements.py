"""
Element model and categories

Defines the immutable data shape produced by every prosetree tag, plus
the small structured payload records used by the built-in tag set.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Union, TYPE_CHECKING

# Forward reference for type hint - avoid circular import
if TYPE_CHECKING:
    from ..lib.ref import Reference


class ElementCategory(Enum):
    """
    Categories of prosetree elements

    Mutually exclusive; they govern which elements may nest inside which.
    """
    BLOCK = "block"        # Paragraph, Blocks
    INLINER = "inliner"    # Text, Inliners, Link


@dataclass(frozen=True, eq=False)
class Element:
    """
    A single node of the document tree

    Created exactly once by a tag invocation and never mutated afterwards.
    Equality and hashing are identity-based: an element is only "the same"
    as another if both come from the same invocation, which is what lets a
    reference embedded twice be recognised as one element.

    Attributes:
        category: Block or inliner, fixed at creation
        name: Name of the tag that produced the element
        payload: Tag-defined data (a string, a tuple of child elements,
                 or a structured record such as LinkData)

    Example:
        >>> el = create_element("inliner", "text", "Hello")
        >>> el.category
        <ElementCategory.INLINER: 'inliner'>
        >>> el.payload
        'Hello'
    """
    category: ElementCategory
    name: str
    payload: Any = None

    @property
    def is_block(self) -> bool:
        return self.category is ElementCategory.BLOCK

    @property
    def is_inliner(self) -> bool:
        return self.category is ElementCategory.INLINER

    def __repr__(self) -> str:
        return f"<{self.name} {self.category.value} payload={self.payload!r}>"


@dataclass(frozen=True)
class LinkData:
    """
    Payload of a Link element

    Attributes:
        target: Reference cell the link points at (resolved or not)
        label: Text shown for the link
    """
    target: 'Reference'
    label: str


def create_element(
    category: Union[ElementCategory, str], name: str, payload: Any = None
) -> Element:
    """
    Build an element from its three parts.

    Only the category is checked: it must be an ElementCategory or one of
    its string values ("block", "inliner").

    Raises:
        ValueError: If category is neither block nor inliner
    """
    return Element(category=ElementCategory(category), name=name, payload=payload)
