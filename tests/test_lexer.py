import unittest

from fdentry.lexer import Lexer
from fdentry.token import Line, LineKind


def classify(text: str) -> list[Line]:
    return list(Lexer(input=text))


class TestLexer(unittest.TestCase):
    def test_kinds(self) -> None:
        lines = classify("[Unit]\n\n# comment\nDescription=sshd\n")

        self.assertEqual(
            [line.kind for line in lines],
            [
                LineKind.SECTION_HEADER,
                LineKind.BLANK,
                LineKind.COMMENT,
                LineKind.ATTRIBUTE,
            ],
        )
        self.assertEqual([line.number for line in lines], [1, 2, 3, 4])

    def test_section_header_name_is_trimmed(self) -> None:
        (line,) = classify("  [ Desktop Entry ]  ")
        self.assertEqual(line.kind, LineKind.SECTION_HEADER)
        self.assertEqual(line.name, "Desktop Entry")

    def test_comment_keeps_text(self) -> None:
        (line,) = classify("  # Name=not an attribute")
        self.assertEqual(line.kind, LineKind.COMMENT)
        self.assertEqual(line.text, "  # Name=not an attribute")

    def test_malformed_section_header(self) -> None:
        for text in ("[Unit", "[]", "[  ]", "[a]b]", "[Unit] trailing"):
            with self.subTest(text=text):
                (line,) = classify(text)
                self.assertEqual(line.kind, LineKind.MALFORMED_SECTION_HEADER)
                self.assertEqual(line.text, text)

    def test_attribute_splits_on_first_equals(self) -> None:
        (line,) = classify("Exec=env FOO=bar app")
        self.assertEqual(line.key, "Exec")
        self.assertEqual(line.value, "env FOO=bar app")

    def test_attribute_single_leading_space(self) -> None:
        self.assertEqual(classify("Key= value")[0].value, "value")
        self.assertEqual(classify("Key =  value")[0].value, " value")
        self.assertEqual(classify("Key = value")[0].key, "Key")

    def test_attribute_trailing_whitespace_preserved(self) -> None:
        (line,) = classify("Key=value  \t")
        self.assertEqual(line.value, "value  \t")

    def test_attribute_empty_value(self) -> None:
        (line,) = classify("Key=")
        self.assertEqual(line.kind, LineKind.ATTRIBUTE)
        self.assertEqual(line.value, "")

    def test_attribute_with_param(self) -> None:
        (line,) = classify("GenericName[es]=Navegador web")
        self.assertEqual(line.key, "GenericName[es]")
        self.assertEqual(line.value, "Navegador web")

    def test_malformed_attribute(self) -> None:
        for text in ("NoEqualsSignHere", "=value", "   =value"):
            with self.subTest(text=text):
                (line,) = classify(text)
                self.assertEqual(line.kind, LineKind.MALFORMED_ATTRIBUTE_LINE)
                self.assertTrue(line.kind.is_error)

    def test_line_endings(self) -> None:
        self.assertEqual(classify(""), [])
        self.assertEqual(len(classify("A=1\n")), 1)
        self.assertEqual(len(classify("A=1\n\n")), 2)
        self.assertEqual(classify("A=1\r\n")[0].value, "1")

    def test_restartable(self) -> None:
        lexer = Lexer(input="[A]\nX=1\n")
        self.assertEqual(list(lexer), list(lexer))

    def test_lazy(self) -> None:
        lines = iter(Lexer(input="[A]\nbroken\n"))
        self.assertEqual(next(lines).kind, LineKind.SECTION_HEADER)
        self.assertEqual(next(lines).kind, LineKind.MALFORMED_ATTRIBUTE_LINE)
        with self.assertRaises(StopIteration):
            next(lines)
