import dataclasses
from typing import Iterator

from .attribute import Attribute
from .parser import Parser
from .token import LineKind


@dataclasses.dataclass(frozen=True)
class Section:
    """A `[Name]` header and the attributes that follow it, in file order.

    Duplicate keys are all kept. The lookup helpers resolve them by returning
    the first occurrence; iterate to see every one.
    """

    name: str
    attributes: tuple[Attribute, ...] = ()

    @classmethod
    def parse(cls, p: Parser) -> "Section":
        assert p.current is not None, "called parse after end of input"
        assert p.current.kind == LineKind.SECTION_HEADER, p.current.kind.name
        assert p.current.name is not None

        name = p.current.name
        p.advance()

        attributes: list[Attribute] = []

        while True:
            p.skip_insignificant()

            if p.current is None or p.current.kind == LineKind.SECTION_HEADER:
                # End of input or start of the next section.
                break

            attributes.append(Attribute.parse(p))

        return cls(name=name, attributes=tuple(attributes))

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self.attributes)

    def __len__(self) -> int:
        return len(self.attributes)

    def __contains__(self, key: object) -> bool:
        return any(attribute.key == key for attribute in self.attributes)

    def has_attr(self, key: str) -> bool:
        return key in self

    def attr(self, key: str) -> str | None:
        """Return the value of the first attribute named exactly `key`.

        The key is compared verbatim, so `Name` and `Name[de]` are different
        attributes. Returns `None` if there is no such attribute.
        """
        for attribute in self.attributes:
            if attribute.key == key:
                return attribute.value

        return None

    def attr_with_param(self, name: str, param: str) -> str | None:
        """Return the value of `name[param]`, e.g. `GenericName[es]`.

        No locale fallback is attempted; callers wanting `de_DE` -> `de` ->
        no suffix have to probe each one themselves.
        """
        for attribute in self.attributes:
            if attribute.name == name and attribute.param == param:
                return attribute.value

        return None

    def attrs(self, key: str) -> list[str]:
        """Return every value of `key`, duplicates included, in file order."""
        return [a.value for a in self.attributes if a.key == key]

    def params(self, name: str) -> list[str]:
        params: list[str] = []

        for attribute in self.attributes:
            param = attribute.param

            if attribute.name == name and param is not None:
                if param not in params:
                    params.append(param)

        return params

    def keys(self) -> Iterator[str]:
        return (attribute.key for attribute in self.attributes)

    def items(self) -> Iterator[tuple[str, str]]:
        return ((a.key, a.value) for a in self.attributes)
