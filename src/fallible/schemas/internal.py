"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully
validated and frozen.
"""

from typing import Literal, Optional
from pydantic import ConfigDict, field_validator
from fallible.errors import SearchError
from fallible.schemas.base import FallibleBaseModel


class InternalLogFileConfig(FallibleBaseModel):
    """Runtime error log configuration."""
    enabled: bool
    directory: Optional[str]
    filename: str


class InternalLoggingConfig(FallibleBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InternalConfig(FallibleBaseModel):
    """Authoritative runtime configuration.

    ``messages`` covers every ``SearchError`` kind exactly once.
    """

    variant: Literal["value", "index"]
    messages: dict[str, str]
    samples: list[list[int]]
    log_file: InternalLogFileConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )

    @field_validator("messages")
    @classmethod
    def check_messages_cover_kinds(cls, v):
        expected = {kind.value for kind in SearchError}
        if set(v) != expected:
            raise ValueError(
                f"messages must have exactly the keys {sorted(expected)}, got {sorted(v)}"
            )
        return v
