"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the verbosity of the
build state currently connected to the context, without passing the state
through every tag invocation.

Features:
- Context-aware logging tied to the active build state's verbosity
- Compact formatting with timestamps, colors, and call site
- Safe across threads and tasks using contextvars

Usage:
    from prosetree.lib.log import LOG, state_connectToLogger, state_disconnectFromLogger

    # Around a pipeline:
    token = state_connectToLogger(state)
    try:
        ...
    finally:
        state_disconnectFromLogger(token)

    # Anywhere in that context:
    LOG("Document summary", level=1)
    LOG("Build stage details", level=2)
    LOG("Per-element trace", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar, Token
import sys

from ..config import appsettings

# Context variable to hold the current build state
_build_state: ContextVar[Optional[Any]] = ContextVar('build_state', default=None)

# Context-local default verbosity for builds (None: use appsettings)
_default_verbosity: ContextVar[Optional[int]] = ContextVar('default_verbosity', default=None)

# Configure loguru with prosetree-specific format
logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> Token:
    """
    Connect a build state to the logging context.

    Call this at the start of a pipeline to make the state's verbosity
    setting available to LOG() calls made while tags run. Pass the
    returned token to state_disconnectFromLogger() when the pipeline ends
    so the previously connected state (if any) takes over again.

    Args:
        state: Any object with a verbosity attribute (BuildState, ProgramState)

    Returns:
        Token restoring the previously connected state
    """
    return _build_state.set(state)


def state_disconnectFromLogger(token: Token) -> None:
    """Restore the state connected before the matching state_connectToLogger()"""
    _build_state.reset(token)


def verbosity_setDefault(level: int) -> Token:
    """
    Set the verbosity of document builds started in the current context.

    Builds given no explicit verbosity use this level instead of the
    PROSETREE_VERBOSITY setting until the token is reset.

    Args:
        level: Verbosity for builds in this context

    Returns:
        Token for verbosity_resetDefault()
    """
    return _default_verbosity.set(level)


def verbosity_resetDefault(token: Token) -> None:
    _default_verbosity.reset(token)


def verbosity_default() -> int:
    """Verbosity for a build started now: context default, else settings"""
    level = _default_verbosity.get()
    return appsettings.verbosity if level is None else level


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=summary, 2=stages, 3=trace)
        **kwargs: Additional loguru metadata

    Example:
        LOG("Document built with 2 references", level=1)
        LOG("Verifying 2 references", level=2)
        LOG("Built <paragraph> (block)", level=3)
    """
    state = _build_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)
