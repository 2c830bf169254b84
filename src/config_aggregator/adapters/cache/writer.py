"""Atomic cache file writes with optional permission modes.

Contents are written to a temporary file in the target directory and moved
into place with :func:`os.replace`, so concurrent readers see either the old
artifact or the complete new one, never a partial file. Racing writers are not
coordinated; the last rename wins.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from pathlib import Path

from ...domain.errors import CacheWriteError

logger = logging.getLogger(__name__)

_MAX_FILE_MODE = 0o7777


def parse_mode(value: int | str | None) -> int | None:
    """Parse a permission mode from configuration.

    Accepts an integer or an octal string (``"0o600"`` or ``"600"``) between
    ``0`` and ``0o7777``. Booleans, unparseable strings and out-of-range values
    yield None, which means "use the default mode".

    Example:
        >>> parse_mode(384)
        384
        >>> parse_mode("0o600")
        384
        >>> parse_mode("600")
        384
        >>> parse_mode(None) is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        try:
            # Handle both "600" and "0o600" formats
            parsed = int(value, 0) if value.startswith("0o") else int(value, 8)
        except ValueError:
            logger.warning("Invalid cache file mode '%s', using the default mode", value)
            return None
    else:
        logger.warning("Invalid cache file mode %r, using the default mode", value)
        return None
    if not 0 <= parsed <= _MAX_FILE_MODE:
        logger.warning("Cache file mode %r is out of range, using the default mode", value)
        return None
    return parsed


def write_cache_file(path: Path, contents: str, *, mode: int | str | None = None) -> None:
    """Write *contents* to *path* atomically.

    Args:
        path: Target file. Its directory must exist.
        contents: Text to write (UTF-8).
        mode: Permission mode for the file. When None the artifact keeps the
            owner-only ``0o600`` mode of :func:`tempfile.mkstemp`; the process
            umask is never touched.

    Raises:
        CacheWriteError: If any filesystem step fails. The temporary file is
            removed before raising.
    """
    target = Path(path)
    file_mode = parse_mode(mode)

    temp_name: str | None = None
    try:
        fd, temp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(contents)
            handle.flush()
            os.fsync(handle.fileno())
        if file_mode is not None:
            os.chmod(temp_name, file_mode)
        os.replace(temp_name, target)
    except (OSError, OverflowError, ValueError) as exc:
        if temp_name is not None:
            with contextlib.suppress(OSError):
                os.unlink(temp_name)
        raise CacheWriteError(f"Cannot write cache file {target}: {exc}") from exc



def remove_cache_file(path: Path) -> bool:
    """Delete the cache file at *path*; return whether a file was removed."""
    try:
        Path(path).unlink()
    except FileNotFoundError:
        return False
    return True


__all__ = [
    "parse_mode",
    "remove_cache_file",
    "write_cache_file",
]
