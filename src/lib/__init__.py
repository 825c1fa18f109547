"""
prosetree - Typed document-content trees with forward references

Elements built by tags, checked for nesting, and linked through
single-assignment reference cells.
"""

__version__ = "1.0.0"

from .errors import (
    ProseError,
    EmptyContentError,
    InvalidChildTypeError,
    InvalidChildCountError,
    MissingPropError,
    InvalidPropError,
    ReferenceAlreadyAssignedError,
    ReferenceTypeMismatchError,
    UnresolvedReferenceError,
    UnassignedReferenceError,
)
from .ref import Reference, define_ref, define_refs, to_element, to_elements
from .children import normalize_children
from .tag import Tag, define_tag, define_block_tag, define_inliner_tag
from .tags import Text, Paragraph, Blocks, Inliners, Link
from .registry import TagRegistry
from .document import define_document
from .utils import is_tag_element, is_block_element, is_inliner_element, is_ref
from .log import (
    LOG,
    state_connectToLogger,
    state_disconnectFromLogger,
    verbosity_setDefault,
    verbosity_resetDefault,
)

__all__ = [
    "ProseError",
    "EmptyContentError",
    "InvalidChildTypeError",
    "InvalidChildCountError",
    "MissingPropError",
    "InvalidPropError",
    "ReferenceAlreadyAssignedError",
    "ReferenceTypeMismatchError",
    "UnresolvedReferenceError",
    "UnassignedReferenceError",
    "Reference",
    "define_ref",
    "define_refs",
    "to_element",
    "to_elements",
    "normalize_children",
    "Tag",
    "define_tag",
    "define_block_tag",
    "define_inliner_tag",
    "Text",
    "Paragraph",
    "Blocks",
    "Inliners",
    "Link",
    "TagRegistry",
    "define_document",
    "is_tag_element",
    "is_block_element",
    "is_inliner_element",
    "is_ref",
    "LOG",
    "state_connectToLogger",
    "state_disconnectFromLogger",
    "verbosity_setDefault",
    "verbosity_resetDefault",
    "__version__",
]
