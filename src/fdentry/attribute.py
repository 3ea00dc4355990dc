import dataclasses

from .parser import Parser
from .token import LineKind
from .utils import split_param


@dataclasses.dataclass(frozen=True)
class Attribute:
    """Represents a single `key=value` line of a `Section`.

    The key is kept verbatim, locale or parameter suffix included
    (`Name[en_US]`). Use `name` and `param` for the two halves.
    """

    key: str
    value: str

    @classmethod
    def parse(cls, p: Parser, /) -> "Attribute":
        assert p.current is not None, "called parse after end of input"
        assert p.current.kind == LineKind.ATTRIBUTE, p.current.kind.name
        assert p.current.key is not None and p.current.value is not None

        attribute = cls(key=p.current.key, value=p.current.value)
        p.advance()
        return attribute

    @property
    def name(self) -> str:
        return split_param(self.key)[0]

    @property
    def param(self) -> str | None:
        return split_param(self.key)[1]
