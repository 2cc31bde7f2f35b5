"""Error handler interface.

A handler decides how a failure reaches the caller. Code that can fail asks
the handler to ``signal`` a kind, and asks it to wrap a found value with
``ok``; it never learns which variant it was given.
"""

from abc import ABC, abstractmethod
from typing import Any

from fallible.errors import MessageRegistry, SearchError


class ErrorHandler(ABC):
    """Base class for error handlers.

    Subclasses share the message lookup and only differ in ``signal`` and
    ``ok``.

    Parameters
    ----------
    registry : MessageRegistry
        Message table for the error kinds this handler can signal.
    """

    def __init__(self, registry: MessageRegistry):
        self.registry = registry

    def message(self, kind: SearchError) -> str:
        """Return the human-readable text for ``kind``."""
        return self.registry.message(kind)

    @abstractmethod
    def signal(self, kind: SearchError) -> Any:
        """Report a failure of ``kind`` in this handler's shape."""

    @abstractmethod
    def ok(self, value: Any) -> Any:
        """Return ``value`` in this handler's success shape."""
