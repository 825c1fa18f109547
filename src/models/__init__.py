"""
Models package for prosetree

Contains data structures and type definitions for elements, documents and
the build pipelines.
"""

from .state import BuildState, ProgramState, pipeline
from .elements import Element, ElementCategory, LinkData, create_element
from .document import Document

__all__ = [
    "BuildState",
    "ProgramState",
    "pipeline",
    "Element",
    "ElementCategory",
    "LinkData",
    "create_element",
    "Document",
]
