from typing import IO, AnyStr

from .attribute import Attribute
from .entry import Entry
from .errors import (
    AttributeBeforeSection,
    InvalidEncoding,
    MalformedAttributeLine,
    MalformedSectionHeader,
    ParseError,
)
from .lexer import Lexer
from .parser import Parser
from .section import Section
from .utils import decode

__all__ = (
    "parse",
    "load",
    "Entry",
    "Section",
    "Attribute",
    "ParseError",
    "MalformedSectionHeader",
    "MalformedAttributeLine",
    "AttributeBeforeSection",
    "InvalidEncoding",
)


def parse(data: str | bytes) -> Entry:
    """Parse a FreeDesktop entry file.

    Desktop Entry files (`.desktop`), Icon Theme index files (`index.theme`)
    and systemd unit files all share this format. It looks like INI, but keys
    may carry a locale or parameter suffix (`Name[en_US]=...`), duplicate keys
    are allowed, and attributes must always belong to a section.

    <https://specifications.freedesktop.org/desktop-entry-spec/latest/basic-format.html>

    Parameters
    ----------
    data
        Contents of the file. `bytes` are decoded as UTF-8. A leading
        byte order mark is ignored either way.

    Returns
    -------
    Entry
        The sections of the file, in order.

    Raises
    ------
    ParseError
        On the first line that cannot be parsed. See the subclasses in
        `fdentry.errors` for the individual cases.
    """
    if isinstance(data, bytes):
        data = decode(data)

    # Text-mode files opened as "utf-8" rather than "utf-8-sig" keep the BOM.
    data = data.removeprefix("\ufeff")

    lexer = Lexer(input=data)
    lines = iter(lexer)
    parser = Parser(lines)
    return Entry.parse(parser)


def load(fp: IO[AnyStr]) -> Entry:
    """Read an already open file object and parse its contents."""
    return parse(fp.read())


del IO, AnyStr
