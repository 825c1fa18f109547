"""
prosetree - Typed document-content trees with forward references

Elements built by tags, checked for nesting, and linked through
single-assignment reference cells.
"""

__version__ = "1.0.0"

from .lib import (
    Text,
    Paragraph,
    Blocks,
    Inliners,
    Link,
    Tag,
    TagRegistry,
    Reference,
    ProseError,
    define_tag,
    define_block_tag,
    define_inliner_tag,
    define_ref,
    define_refs,
    define_document,
    normalize_children,
    to_element,
    to_elements,
    LOG,
    state_connectToLogger,
)
from .models import Document, Element, ElementCategory, LinkData, create_element

__all__ = [
    "Text",
    "Paragraph",
    "Blocks",
    "Inliners",
    "Link",
    "Tag",
    "TagRegistry",
    "Reference",
    "ProseError",
    "define_tag",
    "define_block_tag",
    "define_inliner_tag",
    "define_ref",
    "define_refs",
    "define_document",
    "normalize_children",
    "to_element",
    "to_elements",
    "Document",
    "Element",
    "ElementCategory",
    "LinkData",
    "create_element",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
