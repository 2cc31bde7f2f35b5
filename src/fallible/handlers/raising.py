"""Handler that raises failures."""

from typing import NoReturn, TypeVar

from fallible.errors import HandlerError, SearchError
from fallible.handlers.base import ErrorHandler

T = TypeVar("T")


class RaisingHandler(ErrorHandler):
    """Surface failures as a raised ``HandlerError``.

    Values pass through ``ok`` untouched. A failure unwinds the stack until
    the caller catches ``HandlerError``; the error text is the registry
    message for the kind.
    """

    def signal(self, kind: SearchError) -> NoReturn:
        """Raise ``HandlerError`` for ``kind``.

        Raises
        ------
        HandlerError
            Always. ``str(err)`` is ``self.message(kind)``.
        """
        raise HandlerError(self.message(kind), kind)

    def ok(self, value: T) -> T:
        return value
