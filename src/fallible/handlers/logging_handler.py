"""Decorator handler that records every failure to a log sink."""

import logging
from pathlib import Path
from typing import Any, TextIO, Union

from fallible.errors import SearchError
from fallible.handlers.base import ErrorHandler

__all__ = ['LoggingHandler']

logger = logging.getLogger(__name__)


class LoggingHandler(ErrorHandler):
    """Write each signalled failure to a sink, then delegate.

    Wraps one inner handler of any variant. The returned or raised outcome
    of ``signal`` is exactly the inner handler's; the only addition is one
    ``Error: <message>`` line per call, written and flushed before the
    inner handler runs.

    Parameters
    ----------
    sink : text file object
        Write-only destination for log lines. Owned by this handler and
        closed by ``close()`` or on leaving a ``with`` block.
    inner : ErrorHandler
        Handler whose behavior is preserved.

    Examples
    --------
    >>> with LoggingHandler.open("log.txt", ResultHandler(registry)) as handler:
    ...     find_max([], handler)
    Err(error=<SearchError.IS_EMPTY: 'is_empty'>)
    """

    def __init__(self, sink: TextIO, inner: ErrorHandler):
        # registry is the inner handler's
        super().__init__(inner.registry)
        self.sink = sink
        self.inner = inner

    @classmethod
    def open(cls, path: Union[str, Path], inner: ErrorHandler) -> "LoggingHandler":
        """Create a handler logging to ``path``.

        The file is opened for writing, so a previous run's log is replaced.
        """
        path = Path(path)
        logger.debug("Opening error log: %s", path)
        return cls(path.open("w", encoding="utf-8"), inner)

    def message(self, kind: SearchError) -> str:
        return self.inner.message(kind)

    def signal(self, kind: SearchError) -> Any:
        text = self.inner.message(kind)
        self.sink.write(f"Error: {text}\n")
        self.sink.flush()
        logger.debug("Logged %s: %s", kind.value, text)
        return self.inner.signal(kind)

    def ok(self, value: Any) -> Any:
        return self.inner.ok(value)

    def close(self) -> None:
        """Close the sink. Safe to call more than once."""
        if not self.sink.closed:
            self.sink.close()

    def __enter__(self) -> "LoggingHandler":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
