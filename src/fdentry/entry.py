import dataclasses
import logging
from typing import Iterator

from .errors import AttributeBeforeSection
from .parser import Parser
from .section import Section
from .token import LineKind

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Entry:
    """A parsed entry file: its sections, in the order they appear.

    Section names are not required to be unique. `section()` returns the
    first one with a given name; iteration yields all of them.
    """

    sections: tuple[Section, ...] = ()

    @classmethod
    def parse(cls, p: Parser) -> "Entry":
        sections: list[Section] = []

        while True:
            p.skip_insignificant()

            if p.current is None:
                break

            if p.current.kind == LineKind.ATTRIBUTE:
                # Unlike INI, there is no implicit default section.
                raise p.error(p.current, AttributeBeforeSection)

            sections.append(Section.parse(p))

        logger.debug(
            "parsed %d section(s), %d attribute(s)",
            len(sections),
            sum(len(section) for section in sections),
        )
        return cls(sections=tuple(sections))

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    def __contains__(self, name: object) -> bool:
        return any(section.name == name for section in self.sections)

    def has_section(self, name: str) -> bool:
        return name in self

    def section(self, name: str) -> Section | None:
        """Return the first section called exactly `name`, or `None`."""
        for section in self.sections:
            if section.name == name:
                return section

        return None

    def sections_named(self, name: str) -> Iterator[Section]:
        """Iterate over every section called `name`, duplicates included."""
        return (s for s in self.sections if s.name == name)

    def section_names(self) -> list[str]:
        return [section.name for section in self.sections]

    def items(self) -> Iterator[tuple[str, Section]]:
        return ((section.name, section) for section in self.sections)
