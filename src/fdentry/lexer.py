from .token import Line, LineKind


class Lexer:
    def __init__(self, input: str) -> None:
        self.input = input

    def __iter__(self) -> "LexerIterator":
        # A fresh iterator per call, so the same input can be walked again.
        return LexerIterator(self.input)


class LexerIterator:
    def __init__(self, input: str) -> None:
        self.input = input
        self.index = 0
        self.number = 0

    def __iter__(self) -> "LexerIterator":
        return self

    def __next__(self) -> Line:
        if self.index >= len(self.input):
            raise StopIteration

        end = self.input.find("\n", self.index)

        if end == -1:
            # Last line has no terminating newline.
            end = len(self.input)

        text = self.input[self.index : end].removesuffix("\r")
        self.index = end + 1
        self.number += 1

        return self.classify(text)

    def classify(self, text: str) -> Line:
        stripped = text.strip()

        match stripped[:1]:
            case "":
                return Line(kind=LineKind.BLANK, number=self.number, text=text)
            case "#":
                return Line(
                    kind=LineKind.COMMENT, number=self.number, text=text
                )
            case "[":
                return self.handle_section_header(text, stripped)
            case _:
                return self.handle_attribute(text)

    def handle_section_header(self, text: str, stripped: str) -> Line:
        name = stripped[1:-1].strip() if stripped.endswith("]") else ""

        # Nested brackets are not supported, and neither is `[]`.
        if not name or "]" in name:
            return Line(
                kind=LineKind.MALFORMED_SECTION_HEADER,
                number=self.number,
                text=text,
            )

        return Line(
            kind=LineKind.SECTION_HEADER,
            number=self.number,
            text=text,
            name=name,
        )

    def handle_attribute(self, text: str) -> Line:
        key, sep, value = text.partition("=")
        key = key.strip()

        if not sep or not key:
            return Line(
                kind=LineKind.MALFORMED_ATTRIBUTE_LINE,
                number=self.number,
                text=text,
            )

        # `Key= value` and `Key=value` mean the same thing. Anything past
        # that single space, trailing whitespace included, is kept.
        return Line(
            kind=LineKind.ATTRIBUTE,
            number=self.number,
            text=text,
            key=key,
            value=value.removeprefix(" "),
        )
