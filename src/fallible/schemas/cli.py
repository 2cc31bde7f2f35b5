"""CLIConfig: Command-line overrides.

This schema handles command-line arguments parsed by argparse.
"""

from pathlib import Path
from typing import Literal, Optional
from pydantic import model_validator
from fallible.schemas.base import FallibleBaseModel


class CLIConfig(FallibleBaseModel):
    """Command-line configuration overrides.

    Highest priority in config resolution.

    Notes
    -----
    ``log_path`` is split into the log directory and file name. Giving
    ``log_path`` together with ``no_log_file`` is rejected.

    Usage
    -----
        cli_cfg = CLIConfig(variant="index", log_level="DEBUG")
        internal = resolve_config(param_cfg, cli_cfg)
    """

    variant: Optional[Literal["value", "index"]] = None
    log_path: Optional[str] = None
    no_log_file: bool = False
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    @model_validator(mode="after")
    def check_log_file_flags(self):
        if self.no_log_file and self.log_path is not None:
            raise ValueError("log_path cannot be combined with no_log_file")
        return self

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        if self.variant is not None:
            overrides["variant"] = self.variant

        log_file_overrides = {}
        if self.log_path is not None:
            path = Path(self.log_path).expanduser()
            log_file_overrides["directory"] = str(path.parent)
            log_file_overrides["filename"] = path.name
        if self.no_log_file:
            log_file_overrides["enabled"] = False
        if log_file_overrides:
            overrides["log_file"] = log_file_overrides

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
