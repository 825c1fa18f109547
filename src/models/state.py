"""
State models and pipeline helper

Defines the state dataclasses carried through prosetree's functional
pipelines (document build, CLI check) and the pipeline() helper for
composing transformation stages.
"""

from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, Dict, Callable, Mapping, TYPE_CHECKING
from dataclasses import dataclass, field

# Forward reference for type hint - avoid circular import
if TYPE_CHECKING:
    from .document import Document
    from .elements import Element
    from ..lib.ref import Reference


S = TypeVar("S")


@dataclass
class BuildState:
    """
    State of one document build (state bus pattern).

    The build has two phases: under construction until refs_verify
    succeeds, finalized afterwards. A failing stage raises, so no state
    past a failure is ever observed.

    Pipeline stages and their state additions:
        - Initial: declarations, build, verbosity
        - refs_declare: references
        - content_build: content
        - refs_verify: finalized

    Attributes:
        declarations: Mapping of name -> Tag or Reference, as given by the caller
        build: Content function (references) -> root element
        verbosity: Logging verbosity level (0-3)
        references: Declared reference cells by name
        content: Root element returned by build
        finalized: Every declared reference verified as assigned
    """

    declarations: Mapping[str, Any] = field(default_factory=dict)
    build: Optional[Callable[[Dict[str, Any]], Any]] = field(default=None)
    verbosity: int = field(default=0)

    references: Dict[str, 'Reference'] = field(default_factory=dict)
    content: Optional['Element'] = field(default=None)
    finalized: bool = field(default=False)

    def copy(self: S) -> S:
        """
        Creates a shallow copy of the state instance.

        Returns:
            A new instance of the same state class.
        """
        return type(self)(**self.__dict__)


@dataclass
class ProgramState:
    """
    Central state container for the authoring-check CLI.

    Pipeline stages and their state additions:
        - Initial: target, listTags, verbosity
        - target_resolve: moduleName, attributeName
        - document_load: document, loadOK

    Attributes:
        target: "module:attribute" naming a document to check
        listTags: Print the registered tags instead of checking a document
        verbosity: Logging verbosity level (1-3)
        moduleName: Module part of target
        attributeName: Attribute part of target
        document: Loaded and finalized document
        loadOK: Document imported and finalized without errors
    """

    # CLI arguments
    target: Optional[str] = field(default=None)
    listTags: bool = field(default=False)
    verbosity: int = field(default=1)

    # Pipeline state
    moduleName: str = field(default="")
    attributeName: str = field(default="")
    document: Optional['Document'] = field(default=None)
    loadOK: bool = field(default=False)

    @classmethod
    def state_createFromNamespace(cls: Type["ProgramState"], options: Namespace) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace.

        Args:
            options: Parsed CLI arguments (target, listTags, verbosity)

        Returns:
            ProgramState instance with all known CLI options as attributes
        """
        # Get the set of valid field names for ProgramState
        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Filter options to only include fields that exist in ProgramState
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}

        return cls(**filtered_options)

    def copy(self: S) -> S:
        return type(self)(**self.__dict__)


def pipeline(initial_state: S, *stages: Callable[[S], S]) -> S:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (state) -> state that receives the output of
    the previous stage and returns a new state.

    Args:
        initial_state: Starting state
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final state after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            refs_declare,
            content_build,
            refs_verify
        )

    This is equivalent to:
        refs_verify(content_build(refs_declare(initial_state)))

    But reads left-to-right instead of inside-out.
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
