"""Error kinds and message text shared by every error handler.

Key principle:
- What failed lives here (kinds and their messages)
- How the failure is surfaced lives in fallible.handlers
"""

from fallible.errors.failure import HandlerError, SearchError
from fallible.errors.registry import MessageRegistry

__all__ = [
    "HandlerError",
    "SearchError",
    "MessageRegistry",
]
