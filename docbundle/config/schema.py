"""
Configuration schema and data models for docbundle.

This module defines the configuration data structures:
- Delimiter and selection policy used to split and select
- Output settings (directory, sidecar metadata, overwrite)
- Logging settings
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from docbundle.errors import InvalidArgumentError
from docbundle.selector import PolicyKind, parse_policy


class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


ENCODING = "utf-8"


@dataclass
class OutputConfig:
    """Configuration for published output."""
    dir: str = "./published"
    sidecar: bool = False
    force: bool = False


@dataclass
class BundleConfig:
    """Complete docbundle configuration.

    The delimiter has no default: splitter and bundle writer must agree on
    the exact literal, so it always comes from the operator.
    """

    delimiter: Optional[str] = None
    policy: str = PolicyKind.LAST.value
    log_level: str = LogLevel.WARNING.value
    log_file: Optional[str] = None

    output: OutputConfig = field(default_factory=OutputConfig)

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.delimiter is not None:
            if not isinstance(self.delimiter, str):
                errors.append("delimiter must be a string")
            elif not self.delimiter:
                errors.append("delimiter must not be empty")

        try:
            parse_policy(self.policy)
        except InvalidArgumentError as e:
            errors.append(str(e))

        try:
            LogLevel(str(self.log_level).lower())
        except ValueError:
            valid_levels = [l.value for l in LogLevel]
            errors.append(f"Invalid log_level '{self.log_level}'. Valid options: {valid_levels}")

        if not self.output.dir:
            errors.append("output.dir must not be empty")

        return errors

    def require_delimiter(self) -> str:
        """Return the configured delimiter.

        Raises:
            InvalidArgumentError: If no delimiter has been configured
        """
        if not self.delimiter:
            raise InvalidArgumentError(
                "No delimiter configured. Pass --delimiter, set DOCBUNDLE_DELIMITER, "
                "or add 'delimiter' to the configuration file",
                argument="delimiter",
                value=self.delimiter,
            )
        return self.delimiter
