"""Maximum search parameterized over an error handler.

The search only knows that an empty input is a failure. Whether that
failure comes back as a value or as a raised error is decided entirely by
the handler passed in.
"""

import logging
from typing import Any, Sequence

from fallible.errors import SearchError
from fallible.handlers.base import ErrorHandler

__all__ = ['find_max', 'find_max_index']

logger = logging.getLogger(__name__)


def _argmax(values: Sequence) -> int:
    """Position of the first occurrence of the largest element."""
    best = 0
    for i in range(1, len(values)):
        if values[i] > values[best]:
            best = i
    return best


def find_max(values: Sequence, handler: ErrorHandler) -> Any:
    """Find the largest element of ``values``.

    Parameters
    ----------
    values : sequence
        Sized, indexable sequence of mutually comparable values (lists,
        tuples, 1-D numpy arrays).
    handler : ErrorHandler
        Decides the shape of both outcomes.

    Returns
    -------
    object
        ``handler.ok(maximum)`` when ``values`` is non-empty, otherwise
        whatever ``handler.signal(SearchError.IS_EMPTY)`` returns.

    Notes
    -----
    The running maximum is only replaced by a strictly greater element, so
    among equal maxima the earliest one is kept.

    Examples
    --------
    >>> find_max([-1, 2, 0], ResultHandler(registry))
    Ok(value=2)
    >>> find_max([-1, 2, 0], RaisingHandler(registry))
    2
    """
    if len(values) == 0:
        logger.debug("find_max: empty input")
        return handler.signal(SearchError.IS_EMPTY)
    return handler.ok(values[_argmax(values)])


def find_max_index(values: Sequence, handler: ErrorHandler) -> Any:
    """Find the position of the largest element of ``values``.

    Same scan and failure path as ``find_max``; the success value is the
    index of the first occurrence of the maximum.
    """
    if len(values) == 0:
        logger.debug("find_max_index: empty input")
        return handler.signal(SearchError.IS_EMPTY)
    return handler.ok(_argmax(values))
