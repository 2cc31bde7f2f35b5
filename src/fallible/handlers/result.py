"""Handler that returns failures as values."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from fallible.errors import SearchError
from fallible.handlers.base import ErrorHandler

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed result carrying the error kind."""

    error: SearchError


Result = Union[Ok, Err]


class ResultHandler(ErrorHandler):
    """Surface failures as ``Err`` return values.

    Control flow is never interrupted; the caller checks whether it got an
    ``Ok`` or an ``Err`` before using the value.

    Examples
    --------
    >>> handler = ResultHandler(registry)
    >>> outcome = find_max([], handler)
    >>> outcome
    Err(error=<SearchError.IS_EMPTY: 'is_empty'>)
    >>> handler.message(outcome.error)
    'is empty'
    """

    def signal(self, kind: SearchError) -> Err:
        return Err(kind)

    def ok(self, value: T) -> Ok[T]:
        return Ok(value)
