"""Parse and write .netrc files.

The format is a flat stream of whitespace-separated tokens, so these two
files describe the same entry:

    machine mail.example.com login joe password secret

    machine mail.example.com
        login joe
        password secret

`machine <host>` and `default` start a new entry. `login`, `password`
and `account` each take the following token as their value. Unknown
tokens are skipped. `macdef` is not supported.
"""

import re
from dataclasses import dataclass
from io import StringIO
from typing import IO, Iterable, Iterator

from .errors import MalformedInputError, UnsupportedFeatureError

# Key used for the `default` entry.
DEFAULT = ""

# Order in which fields are written back.
FIELDS = ("account", "login", "password")

_WHITESPACE = re.compile(r"\s")


@dataclass
class Entry:
    """Credentials for one machine. An empty field means "not set"."""
    login: str = ""
    password: str = ""
    account: str = ""


# host -> Entry, in file order ("" is the default entry)
Entries = dict[str, Entry]


def tokenize(stream: Iterable[str | bytes]) -> Iterator[str]:
    """Yield the whitespace-delimited tokens of a stream, line by line.

    Raises:
        MalformedInputError: the input is not valid UTF-8
    """
    try:
        for line in stream:
            if isinstance(line, bytes):
                line = line.decode("utf-8")
            yield from line.split()
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"input is not valid UTF-8: {e}") from e


def _value(tokens: Iterator[str], keyword: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise MalformedInputError(f"'{keyword}' at end of input has no value") from None


def parse(stream: Iterable[str | bytes]) -> Entries:
    """Parse a .netrc stream into a mapping of host -> Entry.

    An entry is committed when the next `machine`/`default` token is seen,
    or at end of input. A host that appears twice keeps only its last entry.

    Raises:
        UnsupportedFeatureError: the input contains `macdef`
        MalformedInputError: a value keyword appears before any
            `machine`/`default`, or a keyword is the last token
    """
    entries: Entries = {}
    host = DEFAULT
    entry: Entry | None = None

    tokens = tokenize(stream)
    for token in tokens:
        if token == "default":
            if entry is not None:
                entries[host] = entry
            host, entry = DEFAULT, Entry()
        elif token == "machine":
            if entry is not None:
                entries[host] = entry
            host, entry = _value(tokens, token), Entry()
        elif token in FIELDS:
            if entry is None:
                raise MalformedInputError(
                    f"'{token}' appears before any 'machine' or 'default'"
                )
            setattr(entry, token, _value(tokens, token))
        elif token == "macdef":
            raise UnsupportedFeatureError(
                "macro definitions (macdef) are not supported"
            )
        # anything else is an unknown keyword: skip it

    if entry is not None:
        entries[host] = entry

    return entries


def parse_string(text: str) -> Entries:
    """Parse .netrc content held in a string."""
    return parse(StringIO(text))


def validate(entries: Entries) -> None:
    """Check that every host and value can be written as a single token.

    Raises:
        MalformedInputError: a host or value contains whitespace
    """
    for host, entry in entries.items():
        if _WHITESPACE.search(host):
            raise MalformedInputError(f"host name {host!r} contains whitespace")
        for field in FIELDS:
            if _WHITESPACE.search(getattr(entry, field)):
                raise MalformedInputError(
                    f"{field} for {host or 'default'} contains whitespace"
                )


def write(entries: Entries, stream: IO[str]) -> None:
    """Write entries to a text stream in .netrc format.

    Output is always regenerated from the fields; formatting and comments
    of a previously parsed file are not preserved. Nothing is written if
    an entry fails validate().
    """
    validate(entries)
    for host, entry in entries.items():
        if host == DEFAULT:
            stream.write("default\n")
        else:
            stream.write(f"machine {host}\n")

        for field in FIELDS:
            value = getattr(entry, field)
            if value:
                stream.write(f"\t{field} {value}\n")

        stream.write("\n")


def dumps(entries: Entries) -> str:
    """Return entries in .netrc format as a string."""
    buf = StringIO()
    write(entries, buf)
    return buf.getvalue()


def find_entry(entries: Entries, host: str) -> Entry | None:
    """Find credentials for a host.

    Looks up the exact hostname first, then falls back to the default
    entry.

    Returns:
        Entry if found, None otherwise
    """
    if host in entries:
        return entries[host]
    return entries.get(DEFAULT)
