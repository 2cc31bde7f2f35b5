"""ParamConfig: defaults for the comparison runner.

ALL runner parameters have defaults here. Runtime code never reads from
ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field
from fallible.schemas.base import FallibleBaseModel


class LogFileConfig(FallibleBaseModel):
    """Error log written by the logging handler."""
    enabled: bool = True
    directory: Optional[str] = Field(
        None, description="Directory for the log file; None means the parent of the working directory"
    )
    filename: str = Field("log.txt", min_length=1)


class LoggingConfig(FallibleBaseModel):
    """Diagnostic logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


class ParamConfig(FallibleBaseModel):
    """Complete default configuration.

    The defaults reproduce the fixed demonstration: one message, an empty
    sample and ``[-1, 2, 0]``, and the value-labelled variant with an
    error log.
    """
    variant: Literal["value", "index"] = "value"
    messages: dict[str, str] = Field(default_factory=lambda: {"is_empty": "is empty"})
    samples: list[list[int]] = Field(default_factory=lambda: [[], [-1, 2, 0]])
    log_file: LogFileConfig = Field(default_factory=LogFileConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
