"""
Children normalization

Converts the raw children handed to a tag (literal strings, elements,
reference cells, or a list mixing these, nested at most one level) into a
flat, ordered list of elements. This is the single point where raw text
enters the element world.

Example:
    >>> normalize_children(["Hello ", ["big ", "world"]])
    [<text inliner payload='Hello '>, <text inliner payload='big '>, <text inliner payload='world'>]
"""

from typing import Any, List

from ..models.elements import Element, ElementCategory, create_element
from .errors import InvalidChildTypeError, UnresolvedReferenceError
from .ref import Reference

TEXT_NAME = 'text'


def normalize_children(raw: Any) -> List[Element]:
    """
    Flatten and resolve raw children into elements.

    Args:
        raw: A single item, or a list/tuple of items and lists/tuples of items

    Returns:
        Elements in the exact order supplied

    Raises:
        UnresolvedReferenceError: If a reference is embedded before it is assigned
        InvalidChildTypeError: If an item is not a string, element or reference,
                               or lists are nested deeper than one level
    """
    if not isinstance(raw, (list, tuple)):
        return [child_resolve(raw)]

    children = []
    for entry in raw:
        if isinstance(entry, (list, tuple)):
            children.extend(child_resolve(item) for item in entry)
        else:
            children.append(child_resolve(entry))
    return children


def child_resolve(item: Any) -> Element:
    """
    Turn one raw child into an element.

    Strings become text leaves, references are unwrapped to their element,
    elements pass through unchanged.
    """
    if isinstance(item, str):
        return create_element(ElementCategory.INLINER, TEXT_NAME, item)

    if isinstance(item, Reference):
        element = item.get()
        if element is None:
            raise UnresolvedReferenceError(item.slug)
        return element

    if isinstance(item, Element):
        return item

    type_name = type(item).__name__
    raise InvalidChildTypeError(
        'children',
        type_name,
        f"Unsupported child of type {type_name}: expected a string, an element or a reference",
    )
