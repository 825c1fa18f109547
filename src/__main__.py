#!/usr/bin/env python3
"""
prosetree - authoring check for prosetree documents

Documents are built when the module defining them is imported, so every
construction error (bad nesting, double binding, unassigned references)
surfaces at import time. This command imports a document and reports
whether it finalized, without rendering or writing anything.

Usage:
    prosetree module:attribute [-v]
    prosetree --listTags

    The attribute is either a Document or a zero-argument callable that
    builds and returns one.

Examples:
    # Check the document bound to `article` in docs/article.py
    prosetree docs.article:article

    # Trace every build stage and element
    prosetree docs.article:build_article -vvv

    # Show the built-in tags
    prosetree --listTags
"""

import sys
import importlib
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import List, Optional

from .lib import (
    TagRegistry,
    ProseError,
    __version__,
    LOG,
    state_connectToLogger,
    state_disconnectFromLogger,
    verbosity_setDefault,
    verbosity_resetDefault,
)
from .models import Document, ElementCategory, ProgramState, pipeline


# Define CLI arguments
parser = ArgumentParser(
    description="prosetree - check that a document builds and its references resolve",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "target", nargs="?", default=None, type=str, help="Document to check, as module:attribute"
)

parser.add_argument(
    "--listTags", action="store_true", default=False, help="List the registered tags and exit"
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def tags_list(inputstate: ProgramState) -> ProgramState:
    """
    Print the registered tags grouped by category.

    Args:
        inputstate: Program state (unchanged)

    Returns:
        ProgramState unchanged (terminal pipeline stage)
    """
    state = inputstate.copy()
    registry = TagRegistry()

    for category in ElementCategory:
        print(f"{category.value}:")
        for tag in registry.tags_listByCategory(category):
            print(f"  {tag.name: <12} {tag.description}")
            if state.verbosity >= 2:
                for example in tag.examples:
                    print(f"  {'': <12}   e.g. {example}")
    return state


def target_resolve(inputstate: ProgramState) -> ProgramState:
    """
    Split the module:attribute target.

    Returns:
        ProgramState with added fields:
            - moduleName: Importable module path
            - attributeName: Attribute holding the document

    Exits:
        1 if no target was given or it is not of the form module:attribute
    """
    state = inputstate.copy()

    if not state.target:
        print("Error: No document given (expected module:attribute)", file=sys.stderr)
        sys.exit(1)

    moduleName, sep, attributeName = state.target.partition(":")
    if not sep or not moduleName or not attributeName:
        print(f"Error: Invalid target '{state.target}' (expected module:attribute)", file=sys.stderr)
        sys.exit(1)

    state.moduleName = moduleName
    state.attributeName = attributeName
    LOG(f"Module: {moduleName}, attribute: {attributeName}", level=2)
    return state


def document_load(inputstate: ProgramState) -> ProgramState:
    """
    Import the target module and obtain the finalized document.

    Returns:
        ProgramState with added fields:
            - document: The finalized Document
            - loadOK: True if the document was obtained

    Exits:
        1 if the import or the document build fails, or the attribute is
        not a document
    """
    state = inputstate.copy()

    LOG(f"Importing {state.moduleName}...", level=1)

    # Builds run during import default to the CLI's verbosity
    token = verbosity_setDefault(state.verbosity)
    try:
        module = importlib.import_module(state.moduleName)
        document = getattr(module, state.attributeName)
        if callable(document) and not isinstance(document, Document):
            document = document()
    except ProseError as e:
        print(f"Document error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error loading {state.target}: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            import traceback

            traceback.print_exc()
        sys.exit(1)
    finally:
        verbosity_resetDefault(token)

    if not isinstance(document, Document):
        print(f"Error: {state.target} is not a document (got {type(document).__name__})", file=sys.stderr)
        sys.exit(1)

    state.document = document
    state.loadOK = True
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display the document summary to the user.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if no document was loaded
    """
    state: ProgramState = inputstate.copy()
    if not state.loadOK or state.document is None:
        print("Error: Document check failed", file=sys.stderr)
        sys.exit(1)

    document = state.document
    LOG(f"✓ {state.target} builds", level=1)
    LOG(f"  Root: <{document.content.name}> ({document.content.category.value})", level=1)
    LOG(f"  References: {len(document.references)}", level=1)
    for name, ref in document.references.items():
        origin = f" [{ref.origin}]" if ref.origin else ""
        LOG(f"    {name} -> <{ref.tag.name}>{origin}", level=2)
    return state


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point - check a document, or list the registered tags.

    Orchestrates the check pipeline:
        1. target_resolve: Split module:attribute
        2. document_load: Import the module and obtain the document
        3. results_report: Display the summary
    """
    options: Namespace = parser.parse_args(argv)
    state: ProgramState = ProgramState.state_createFromNamespace(options)

    # Connect state to logger for entire pipeline
    token = state_connectToLogger(state)
    try:
        if state.listTags:
            pipeline(state, tags_list)
            return

        pipeline(state, target_resolve, document_load, results_report)
    finally:
        state_disconnectFromLogger(token)


if __name__ == "__main__":
    main()
