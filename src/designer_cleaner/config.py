"""
Run configuration.

A run is configured once, before any file is read:
    - the backing-field prefix character
    - the mode (clean or report)
    - the target directory

Any problem here is a ConfigurationError and stops the run before a single
designer file is touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union


DEFAULT_PREFIX = "f"


class ConfigurationError(Exception):
    """Raised when the run configuration is invalid."""
    pass


class Mode(Enum):
    """Mutually exclusive run modes."""
    CLEAN = "clean"
    REPORT = "report"


@dataclass(frozen=True)
class CleanerConfig:
    """
    Settings applied uniformly to every pair of one run.

    Properties:
        prefix:
            Backing-field prefix character. ``f`` pairs field ``fName`` with
            property ``Name``. Must be exactly one character.
    """

    prefix: str = DEFAULT_PREFIX

    def __post_init__(self) -> None:
        if not isinstance(self.prefix, str) or len(self.prefix) != 1:
            raise ConfigurationError("The -prefix parameter must be a single character.")


def resolve_mode(clean: bool, report: bool) -> Mode:
    """Turn the two mode switches into a Mode, exactly one must be set."""
    if not clean and not report:
        raise ConfigurationError("Set -clean or -report")
    if clean and report:
        raise ConfigurationError(
            "The -report and -clean parameters are mutually exclusive. Use only one."
        )
    return Mode.CLEAN if clean else Mode.REPORT


def validate_directory(path: Optional[Union[str, Path]]) -> Path:
    """Return the target directory as a Path, or raise ConfigurationError."""
    if path is None or not str(path).strip():
        raise ConfigurationError("Set path")
    directory = Path(path)
    if not directory.is_dir():
        raise ConfigurationError(f"Directory not found: '{path}'")
    return directory


__all__ = [
    "DEFAULT_PREFIX",
    "ConfigurationError",
    "Mode",
    "CleanerConfig",
    "resolve_mode",
    "validate_directory",
]
