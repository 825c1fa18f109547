"""
Document model

The finished artifact of a document build: the declared references, all
assigned, and the root element they point into.
"""

from dataclasses import dataclass
from typing import Mapping, TYPE_CHECKING

from .elements import Element

if TYPE_CHECKING:
    from ..lib.ref import Reference


@dataclass(frozen=True)
class Document:
    """
    Finalized pairing of resolved references and a root element

    Attributes:
        references: Read-only mapping of declared name -> Reference
        content: Root element produced by the build function
    """
    references: Mapping[str, 'Reference']
    content: Element
