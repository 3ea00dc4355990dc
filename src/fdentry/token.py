import dataclasses
import enum


class LineKind(enum.IntEnum):
    BLANK = enum.auto()
    COMMENT = enum.auto()
    SECTION_HEADER = enum.auto()
    ATTRIBUTE = enum.auto()

    # Lines the classifier could not make sense of.
    MALFORMED_SECTION_HEADER = enum.auto()
    MALFORMED_ATTRIBUTE_LINE = enum.auto()

    @property
    def is_error(self) -> bool:
        return self in (
            LineKind.MALFORMED_SECTION_HEADER,
            LineKind.MALFORMED_ATTRIBUTE_LINE,
        )


@dataclasses.dataclass(frozen=True)
class Line:
    """A single physical line of input and what it was classified as.

    `name` is only set for section headers; `key` and `value` only for
    attributes. `text` is always the raw line without its terminator.
    """

    kind: LineKind
    number: int
    text: str
    name: str | None = None
    key: str | None = None
    value: str | None = None
