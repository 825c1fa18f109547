"""
Error taxonomy for prosetree

Every failure raised while building a document derives from ProseError.
Each kind also derives from the closest builtin exception so callers that
only know about ValueError/TypeError/LookupError still catch it.

All of these are authoring defects: they are raised synchronously, abort
the construction call in progress and are never retried.
"""

from typing import Optional


class ProseError(Exception):
    """Base class for all document construction errors"""
    pass


class EmptyContentError(ProseError, ValueError):
    """Raised when a tag requiring at least one child received none"""

    def __init__(self, tag_name: str) -> None:
        self.tag_name = tag_name
        super().__init__(f"<{tag_name}> cannot be empty!")


class InvalidChildTypeError(ProseError, TypeError):
    """Raised when a child violates a tag's nesting or type rule"""

    def __init__(self, tag_name: str, child_name: str, message: str) -> None:
        self.tag_name = tag_name
        self.child_name = child_name
        super().__init__(message)


class InvalidChildCountError(ProseError, ValueError):
    """Raised when a tag requiring an exact number of children got another count"""

    def __init__(self, tag_name: str, expected: int, actual: int, message: str) -> None:
        self.tag_name = tag_name
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class MissingPropError(ProseError, ValueError):
    """Raised when a required construction prop is absent"""

    def __init__(self, tag_name: str, prop: str) -> None:
        self.tag_name = tag_name
        self.prop = prop
        super().__init__(f'Missing "{prop}" prop in <{tag_name}> tag!')


class InvalidPropError(ProseError, TypeError):
    """Raised when a construction prop is present but malformed"""

    def __init__(self, tag_name: str, prop: str, message: str) -> None:
        self.tag_name = tag_name
        self.prop = prop
        super().__init__(message)


class ReferenceAlreadyAssignedError(ProseError):
    """Raised when a reference cell receives a second assignment"""

    def __init__(self, tag_name: str, slug: Optional[str] = None) -> None:
        self.tag_name = tag_name
        self.slug = slug
        super().__init__(
            f"Reference{_slug_format(slug)} for tag <{tag_name}> is already assigned "
            f"and cannot be reassigned!"
        )


class ReferenceTypeMismatchError(ProseError, TypeError):
    """Raised when an element assigned to a reference does not match its tag"""

    def __init__(self, tag_name: str, element_name: str, slug: Optional[str] = None) -> None:
        self.tag_name = tag_name
        self.element_name = element_name
        self.slug = slug
        super().__init__(
            f"Element <{element_name}> assigned to reference{_slug_format(slug)} "
            f"does not match expected tag <{tag_name}>!"
        )


class UnresolvedReferenceError(ProseError, LookupError):
    """Raised when an unassigned reference is embedded in a tree"""

    def __init__(self, slug: Optional[str] = None) -> None:
        self.slug = slug
        super().__init__(f"Unable to unwrap unassigned reference{_slug_format(slug)}!")


class UnassignedReferenceError(ProseError, LookupError):
    """Raised when document finalization finds a declared reference never assigned"""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(
            f'Document reference "{slug}" was not assigned a value in the build function!'
        )


def _slug_format(slug: Optional[str]) -> str:
    return f' "{slug}"' if slug else ''
