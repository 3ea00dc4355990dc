"""Errors raised while parsing entry files.

Parsing is fail-fast: the first offending line aborts the whole parse and no
partial `Entry` is returned.
"""

__all__ = (
    "ParseError",
    "MalformedSectionHeader",
    "MalformedAttributeLine",
    "AttributeBeforeSection",
    "InvalidEncoding",
)


class ParseError(Exception):
    """Base class for everything that can go wrong while parsing.

    Attributes
    ----------
    line
        1-based number of the offending line, if known.
    text
        Raw text of the offending line, if known.
    """

    reason = "could not parse input"

    def __init__(
        self, line: int | None = None, text: str | None = None
    ) -> None:
        self.line = line
        self.text = text

        message = self.reason

        if line is not None:
            message += f" on line {line}"
        if text is not None:
            message += f": {text!r}"

        super().__init__(message)


class MalformedSectionHeader(ParseError):
    """A line starts with `[` but is not a valid `[Name]` header."""

    reason = "malformed section header"


class MalformedAttributeLine(ParseError):
    """A line that is not blank, a comment or a header, and has no `key=`."""

    reason = "malformed attribute line"


class AttributeBeforeSection(ParseError):
    """An attribute appears before any section header."""

    reason = "attribute outside of any section"


class InvalidEncoding(ParseError):
    """The input bytes are not valid UTF-8."""

    reason = "invalid UTF-8"
