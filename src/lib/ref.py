"""
Reference cells

A reference is a forward declaration: a slot bound to one tag that is
filled, exactly once, by the tag invocation carrying it as bind_to. Other
parts of the tree embed the reference and receive the very same element.

Example:
    >>> intro = define_ref(Paragraph, "intro")
    >>> p = Paragraph("Hello", bind_to=intro)
    >>> intro.get() is p
    True
"""

import inspect
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..config import appsettings
from ..models.elements import Element
from .errors import ReferenceAlreadyAssignedError, ReferenceTypeMismatchError
from .log import LOG
from .utils import is_tag_element

_PACKAGE = __name__.split('.')[0]


class Reference:
    """
    Single-assignment slot bound to a tag

    Attributes:
        tag: Tag whose elements this reference accepts (fixed)
        slug: Optional debug label, used in error messages
        origin: Optional "<file>:<line>" of the declaring call site
    """

    def __init__(self, tag: Any, slug: Optional[str] = None, origin: Optional[str] = None) -> None:
        self._tag = tag
        self._slug = slug
        self._origin = origin
        self._element: Optional[Element] = None

    @property
    def tag(self) -> Any:
        return self._tag

    @property
    def slug(self) -> Optional[str]:
        return self._slug

    @property
    def origin(self) -> Optional[str]:
        return self._origin

    @property
    def is_assigned(self) -> bool:
        return self._element is not None

    def get(self) -> Optional[Element]:
        """Return the assigned element, or None while unassigned"""
        return self._element

    def assign(self, element: Element) -> None:
        """
        Commit an element to this reference.

        Assignment is a one-shot commit: a second call fails even when it
        passes the element already stored.

        Raises:
            ReferenceAlreadyAssignedError: If an element is already present
            ReferenceTypeMismatchError: If element's category/name differ
                                        from the bound tag
        """
        if self._element is not None:
            raise ReferenceAlreadyAssignedError(self._tag.name, self._slug)

        if not is_tag_element(element, self._tag):
            element_name = element.name if isinstance(element, Element) else type(element).__name__
            raise ReferenceTypeMismatchError(self._tag.name, element_name, self._slug)

        self._element = element
        LOG(f"Assigned <{element.name}> to reference {self._label()}", level=3)

    def _label(self) -> str:
        return f'"{self._slug}"' if self._slug else f"<{self._tag.name}>"

    def __repr__(self) -> str:
        state = "assigned" if self.is_assigned else "unassigned"
        slug = f" {self._slug!r}" if self._slug else ""
        return f"<Reference{slug} to <{self._tag.name}> {state}>"


def define_ref(tag: Any, slug: Optional[str] = None) -> Reference:
    """
    Declare a reference bound to tag.

    Args:
        tag: Tag the reference accepts
        slug: Optional debug label

    Returns:
        New unassigned Reference, with its origin recorded when
        capture_origin is enabled
    """
    return Reference(tag, slug, _origin_capture())


def define_refs(definitions: Mapping[str, Any]) -> Dict[str, Reference]:
    """
    Declare a batch of references, each labelled with its key.

    Example:
        >>> refs = define_refs({"intro": Paragraph, "greet": Text})
        >>> refs["greet"].slug
        'greet'
    """
    origin = _origin_capture()
    return {key: Reference(tag, key, origin) for key, tag in definitions.items()}


def to_element(ref: Reference) -> Optional[Element]:
    return ref.get()


def to_elements(refs: Iterable[Reference]) -> List[Optional[Element]]:
    return [ref.get() for ref in refs]


def _origin_capture() -> Optional[str]:
    """Locate the first caller frame outside this package"""
    if not appsettings.capture_origin:
        return None

    frame = inspect.currentframe()
    try:
        while frame is not None:
            module = frame.f_globals.get('__name__', '')
            if module != _PACKAGE and not module.startswith(_PACKAGE + '.'):
                return appsettings.origin_make(frame.f_code.co_filename, frame.f_lineno)
            frame = frame.f_back
        return None
    finally:
        del frame
