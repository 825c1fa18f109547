"""
Element predicates and reusable content checks

Elements are matched to tags structurally, on the (category, name) pair,
never on Python type. The children_* checks are shared by every built-in
container rule so the nesting rule is written exactly once.
"""

from typing import Any, Sequence

from ..models.elements import Element, ElementCategory
from .errors import EmptyContentError, InvalidChildTypeError


def is_tag_element(obj: Any, tag: Any) -> bool:
    """
    Check whether obj is an element produced by tag.

    Args:
        obj: Candidate object (anything)
        tag: Tag (or any object exposing category and name)

    Returns:
        True if obj is an Element whose category and name both match tag
    """
    return (
        isinstance(obj, Element)
        and obj.category is tag.category
        and obj.name == tag.name
    )


def is_block_element(obj: Any) -> bool:
    return isinstance(obj, Element) and obj.category is ElementCategory.BLOCK


def is_inliner_element(obj: Any) -> bool:
    return isinstance(obj, Element) and obj.category is ElementCategory.INLINER


def is_ref(obj: Any) -> bool:
    """Check whether obj is a reference cell"""
    from .ref import Reference
    return isinstance(obj, Reference)


def children_requireNonEmpty(tag_name: str, children: Sequence[Element]) -> None:
    """
    Fail if a tag that needs content received no children.

    Raises:
        EmptyContentError: If children is empty
    """
    if not children:
        raise EmptyContentError(tag_name)


def children_requireCategory(
    tag_name: str, children: Sequence[Element], category: ElementCategory
) -> None:
    """
    Fail on the first child whose category differs from the required one.

    Blocks-only containers reject inliners and inliners-only containers
    reject blocks; the error names the offending child's tag.

    Args:
        tag_name: Display name of the container tag (e.g., "Paragraph")
        children: Normalized children of the container
        category: The only category allowed inside the container

    Raises:
        InvalidChildTypeError: On the first child of the other category
    """
    for child in children:
        if child.category is not category:
            raise InvalidChildTypeError(
                tag_name,
                child.name,
                f"<{tag_name}> can contain only {category.value}s! "
                f"{child.category.value.capitalize()} <{child.name}> found!",
            )
