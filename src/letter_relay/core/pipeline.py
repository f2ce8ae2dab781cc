"""
Step results for the letter flows.

Every blocking Google API call in a flow runs as a named step. A step never
raises: it returns a StepResult carrying either the value or the classified
error, and the flow returns on the first failure.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from googleapiclient.errors import HttpError

from ..utils.errors import LetterRelayError, format_error, handle_http_error

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class StepResult(Generic[T]):
    """Outcome of one step: a value on success, an error on failure."""

    ok: bool
    value: Optional[T] = None
    error: Optional[LetterRelayError] = None
    step: Optional[str] = None

    @classmethod
    def success(cls, value: T, step: Optional[str] = None) -> "StepResult[T]":
        return cls(ok=True, value=value, step=step)

    @classmethod
    def failure(cls, error: LetterRelayError, step: str) -> "StepResult[T]":
        return cls(ok=False, error=error, step=step)


def classify_error(error: Exception, file_id: Optional[str] = None) -> LetterRelayError:
    """Map any adapter exception into the relay's error taxonomy."""
    if isinstance(error, LetterRelayError):
        return error
    if isinstance(error, HttpError):
        return handle_http_error(error, file_id)
    return LetterRelayError(f"{type(error).__name__}: {error}", file_id)


async def run_step(
    step: str,
    func: Callable[..., T],
    *args: Any,
    file_id: Optional[str] = None,
) -> StepResult[T]:
    """
    Run a blocking adapter call in a worker thread.

    Args:
        step: Name of the step, reported on failure.
        func: The blocking callable.
        *args: Positional arguments for func.
        file_id: Optional file ID for error context.

    Returns:
        StepResult with the call's return value, or the classified error.
    """
    try:
        value = await asyncio.to_thread(func, *args)
    except Exception as e:
        error = classify_error(e, file_id)
        logger.error(format_error(step, error), exc_info=True)
        return StepResult.failure(error, step)
    return StepResult.success(value, step)
