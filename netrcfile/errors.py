"""Errors raised while reading or writing .netrc files."""


class NetrcError(Exception):
    """Base class for all netrcfile errors."""


class MalformedInputError(NetrcError):
    """A keyword is missing its value or appears outside an entry."""


class UnsupportedFeatureError(NetrcError):
    """The file uses a construct we refuse to handle (macdef)."""


class InsecurePermissionsError(NetrcError, PermissionError):
    """An existing credentials file is readable or writable by others."""

    def __init__(self, path, mode: int):
        self.path = path
        self.mode = mode
        super().__init__(
            f"Refusing to read {path}: permissions are {mode:#o}, expected 0o600"
        )
