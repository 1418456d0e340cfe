"""Locate, check, load and save the user's .netrc file."""

import logging
import os
import stat
from pathlib import Path

from .errors import InsecurePermissionsError
from .netrc import Entries, parse, validate, write

logger = logging.getLogger(__name__)

# Owner read/write only. Existing files must have exactly this mode.
FILE_MODE = 0o600


def location() -> Path:
    """Return the conventional credentials path in the user's home directory.

    ~/.netrc on POSIX systems, ~/_netrc on Windows.
    """
    name = "_netrc" if os.name == "nt" else ".netrc"
    return Path.home() / name


def resolve_path(path: Path | str | None = None) -> Path:
    """Pick the file to use: explicit path, then $NETRC, then location()."""
    if path is not None:
        return Path(path).expanduser()
    if env_path := os.environ.get("NETRC"):
        return Path(env_path).expanduser()
    return location()


def check_permissions(path: Path | str) -> None:
    """Refuse to trust an existing file that others can read or write.

    A missing file is fine; it gets created with mode 0600 on first use.

    Raises:
        InsecurePermissionsError: the file exists and its mode is not 0600
        OSError: the file could not be inspected
    """
    try:
        st = os.stat(path)
    except FileNotFoundError:
        return

    # Windows has no POSIX permission bits to check
    if os.name != "posix":
        return

    mode = stat.S_IMODE(st.st_mode)
    if mode != FILE_MODE:
        raise InsecurePermissionsError(path, mode)


def load(path: Path | str | None = None) -> Entries:
    """Read credentials from a .netrc file.

    The file is created empty (mode 0600) if it does not exist yet.

    Args:
        path: Path to the file. Defaults to $NETRC or ~/.netrc

    Returns:
        Mapping of host -> Entry; the default entry is under ""
    """
    path = resolve_path(path)
    check_permissions(path)

    created = not os.path.exists(path)
    fd = os.open(path, os.O_RDONLY | os.O_CREAT, FILE_MODE)
    with os.fdopen(fd, "r", encoding="utf-8") as f:
        if created and os.name == "posix":
            # a freshly created file may have been narrowed by the umask
            os.fchmod(f.fileno(), FILE_MODE)
        entries = parse(f)

    logger.debug("Loaded %d entries from %s", len(entries), path)
    return entries


def save(entries: Entries, path: Path | str | None = None) -> None:
    """Write credentials to a .netrc file, replacing its contents.

    Args:
        entries: Mapping of host -> Entry to write
        path: Path to the file. Defaults to $NETRC or ~/.netrc
    """
    path = resolve_path(path)
    # reject unwritable values before the old file is truncated
    validate(entries)

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        if os.name == "posix":
            os.fchmod(f.fileno(), FILE_MODE)
        write(entries, f)

    logger.debug("Saved %d entries to %s", len(entries), path)
