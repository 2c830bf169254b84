"""Exit codes for CLI error paths, following sysexits.h and errno."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised via ``SystemExit`` by CLI commands.

    * 22: EINVAL - bad option value, unknown component name, missing cache path
    * 78: EX_CONFIG - configuration could not be aggregated or cached

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
