"""Fixed table of human-readable error messages."""

from enum import Enum
from typing import Iterable, Iterator, Mapping, Type


class MessageRegistry:
    """Immutable message table indexed by error-kind ordinal.

    Parameters
    ----------
    messages : iterable of str
        One message per kind, in the kinds' declaration order.
    kinds : Enum subclass
        The closed set of error kinds this registry covers.

    Raises
    ------
    ValueError
        If the number of messages does not match the number of kinds.

    Examples
    --------
    >>> registry = MessageRegistry(["is empty"], SearchError)
    >>> registry.message(SearchError.IS_EMPTY)
    'is empty'
    """

    __slots__ = ("_messages", "_kinds", "_ordinals")

    def __init__(self, messages: Iterable[str], kinds: Type[Enum]):
        messages = tuple(messages)
        members = tuple(kinds)
        if len(messages) != len(members):
            raise ValueError(
                f"{kinds.__name__} has {len(members)} kinds but "
                f"{len(messages)} messages were given"
            )
        object.__setattr__(self, "_messages", messages)
        object.__setattr__(self, "_kinds", kinds)
        object.__setattr__(self, "_ordinals", {kind: i for i, kind in enumerate(members)})

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str], kinds: Type[Enum]) -> "MessageRegistry":
        """Build a registry from ``{kind value: message}``.

        Raises
        ------
        ValueError
            If the mapping misses a kind or names one that does not exist.
        """
        expected = {kind.value for kind in kinds}
        missing = expected - set(mapping)
        unknown = set(mapping) - expected
        if missing:
            raise ValueError(f"No message for {kinds.__name__} kinds: {sorted(missing)}")
        if unknown:
            raise ValueError(f"Unknown {kinds.__name__} kinds: {sorted(unknown)}")
        return cls((mapping[kind.value] for kind in kinds), kinds)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def kinds(self) -> Type[Enum]:
        return self._kinds

    @property
    def messages(self) -> tuple:
        return self._messages

    def message(self, kind: Enum) -> str:
        """Return the message for ``kind``."""
        return self._messages[self._ordinals[kind]]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Enum]:
        return iter(self._kinds)

    def __repr__(self) -> str:
        return f"MessageRegistry({list(self._messages)!r}, {self._kinds.__name__})"
