"""netrcfile - read and write .netrc credential files."""

from .errors import (
    InsecurePermissionsError,
    MalformedInputError,
    NetrcError,
    UnsupportedFeatureError,
)
from .files import check_permissions, load, location, resolve_path, save
from .netrc import (
    DEFAULT,
    Entries,
    Entry,
    dumps,
    find_entry,
    parse,
    parse_string,
    validate,
    write,
)

__version__ = "0.1.0"
__all__ = [
    "DEFAULT",
    "Entries",
    "Entry",
    "InsecurePermissionsError",
    "MalformedInputError",
    "NetrcError",
    "UnsupportedFeatureError",
    "check_permissions",
    "dumps",
    "find_entry",
    "load",
    "location",
    "parse",
    "parse_string",
    "resolve_path",
    "save",
    "validate",
    "write",
]
