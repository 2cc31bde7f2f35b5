"""Error handlers: interchangeable policies for surfacing a failure.

- base: Shared interface and message lookup
- result: Return failures as ``Err`` values
- raising: Raise failures as ``HandlerError``
- logging_handler: Decorator that logs each failure, then delegates
"""

from fallible.handlers.base import ErrorHandler
from fallible.handlers.result import Ok, Err, Result, ResultHandler
from fallible.handlers.raising import RaisingHandler
from fallible.handlers.logging_handler import LoggingHandler

__all__ = [
    "ErrorHandler",
    "Ok",
    "Err",
    "Result",
    "ResultHandler",
    "RaisingHandler",
    "LoggingHandler",
]
