"""Error kinds and the error raised by interrupting handlers.

Avoid any non-stdlib references in this module, it is at the bottom of the
dependency chain.
"""

from enum import Enum


class SearchError(str, Enum):
    """Reasons a search can fail.

    Members are ordered; a kind's ordinal is its declaration position and
    indexes the message registry.
    """
    IS_EMPTY = "is_empty"


class HandlerError(RuntimeError):
    """Raised by an interrupting error handler.

    The message is the registry text for the kind, so ``str(err)`` is what
    a caller prints. The kind is kept on ``err.kind`` for callers that want
    to branch on it.
    """

    def __init__(self, message: str, kind: SearchError):
        super().__init__(message)
        self.kind = kind
