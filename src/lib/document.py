"""
Document builder

Composes declared references and a content function into a finished
Document, guaranteeing every declared reference was bound during the
build. The build runs as a pipeline of stages over a BuildState:

    refs_declare -> content_build -> refs_verify

Any stage may raise; the exception aborts the whole build and no partial
document is returned.

Example:
    >>> doc = define_document(
    ...     lambda refs: Blocks(Paragraph("Hello", bind_to=refs["intro"]), refs["intro"]),
    ...     refs={"intro": Paragraph},
    ... )
    >>> doc.content.payload[0] is doc.references["intro"].get()
    True
"""

from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

from ..models.document import Document
from ..models.elements import Element
from ..models.state import BuildState, pipeline
from .errors import InvalidPropError, UnassignedReferenceError
from .log import LOG, state_connectToLogger, state_disconnectFromLogger, verbosity_default
from .ref import Reference, define_ref
from .tag import Tag


def refs_declare(inputstate: BuildState) -> BuildState:
    """
    Create a reference cell for every declaration.

    Tags are declared as new references labelled with their key; existing
    references (e.g. from define_refs) are taken as they are.

    Raises:
        InvalidPropError: If a declaration is neither a Tag nor a Reference
    """
    state = inputstate.copy()

    references: Dict[str, Reference] = {}
    for name, declaration in state.declarations.items():
        if isinstance(declaration, Reference):
            references[name] = declaration
        elif isinstance(declaration, Tag):
            references[name] = define_ref(declaration, name)
        else:
            raise InvalidPropError(
                'document', 'refs',
                f'Document reference "{name}" must be declared with a tag or a reference, '
                f'got {type(declaration).__name__}',
            )

    state.references = references
    LOG(f"Declared {len(references)} references: {', '.join(references) or '-'}", level=2)
    return state


def content_build(inputstate: BuildState) -> BuildState:
    """
    Run the build function against the declared references.

    Raises:
        InvalidPropError: If the build function does not return an element
    """
    state = inputstate.copy()

    LOG("Building document content...", level=2)
    content = state.build(state.references)

    if not isinstance(content, Element):
        raise InvalidPropError(
            'document', 'build',
            f"Document build function must return an element, got {type(content).__name__}",
        )

    state.content = content
    LOG(f"Built root <{content.name}>", level=2)
    return state


def refs_verify(inputstate: BuildState) -> BuildState:
    """
    Check every declared reference was assigned, then mark the build finalized.

    Raises:
        UnassignedReferenceError: Naming the first unassigned reference by
                                  its slug, or its key when it has none
    """
    state = inputstate.copy()

    LOG(f"Verifying {len(state.references)} references...", level=2)
    for name, ref in state.references.items():
        if not ref.is_assigned:
            raise UnassignedReferenceError(ref.slug or name)

    state.finalized = True
    return state


def define_document(
    build: Callable[[Dict[str, Reference]], Element],
    refs: Optional[Mapping[str, Any]] = None,
    verbosity: Optional[int] = None,
) -> Document:
    """
    Build a document and verify its references.

    Args:
        build: Content function; receives the name -> Reference mapping
               (empty when refs is not given) and returns the root element
        refs: Mapping of name -> Tag to declare, or name -> Reference
        verbosity: Logging verbosity for this build (defaults to the
                   context default set by verbosity_setDefault(), else
                   the PROSETREE_VERBOSITY setting)

    Returns:
        Finalized Document with every declared reference assigned

    Raises:
        ProseError: Any construction error raised by the build function,
                    or UnassignedReferenceError from finalization
    """
    state = BuildState(
        declarations=refs or {},
        build=build,
        verbosity=verbosity_default() if verbosity is None else verbosity,
    )

    # The build's verbosity applies to tags run inside it, and only there
    token = state_connectToLogger(state)
    try:
        state = pipeline(state, refs_declare, content_build, refs_verify)

        LOG(
            f"Document finalized: root <{state.content.name}>, "
            f"{len(state.references)} references resolved",
            level=1,
        )
    finally:
        state_disconnectFromLogger(token)

    return Document(references=MappingProxyType(state.references), content=state.content)
