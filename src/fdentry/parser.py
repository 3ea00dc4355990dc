import logging
from typing import Iterator

from .errors import MalformedAttributeLine, MalformedSectionHeader, ParseError
from .token import Line, LineKind

logger = logging.getLogger(__name__)


class Parser:
    def __init__(self, lines: Iterator[Line]) -> None:
        self._lines = lines
        self._current: Line | None = None
        self._next: Line | None = None

        self.advance()
        self.advance()

    @property
    def current(self) -> Line | None:
        return self._current

    @property
    def next(self) -> Line | None:
        return self._next

    def advance(self) -> None:
        self._current = self._next

        try:
            self._next = next(self._lines)
        except StopIteration:
            self._next = None

    def skip_insignificant(self) -> None:
        """Advance past blank lines and comments.

        Raises the matching `ParseError` if the line we stop on was
        classified as malformed.
        """
        while self.current is not None and self.current.kind in (
            LineKind.BLANK,
            LineKind.COMMENT,
        ):
            self.advance()

        if self.current is not None and self.current.kind.is_error:
            raise self.error(self.current)

    def error(
        self, line: Line, cls: type[ParseError] | None = None
    ) -> ParseError:
        if cls is None:
            match line.kind:
                case LineKind.MALFORMED_SECTION_HEADER:
                    cls = MalformedSectionHeader
                case LineKind.MALFORMED_ATTRIBUTE_LINE:
                    cls = MalformedAttributeLine
                case _:
                    raise AssertionError(line.kind.name)

        logger.debug("line %d rejected: %s", line.number, cls.reason)
        return cls(line=line.number, text=line.text)
