"""Reader and writer for ``"key" = "template";`` catalogue resources.

The format is a sequence of quoted key/value assignments terminated by
semicolons::

    /* Greeting shown on the dashboard */
    "dashboard.greeting" = "Hi ${name}!";
    // Shown when the inbox is empty
    "inbox.empty" = "Nothing here yet.";

Whitespace between tokens is insignificant. The comment immediately preceding
an entry is kept as its translator note. Quoted text supports the ``\\"``,
``\\\\``, ``\\n``, ``\\t`` and ``\\r`` escapes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

_ESCAPES = {'"': '"', "\\": "\\", "n": "\n", "t": "\t", "r": "\r"}
_REVERSE_ESCAPES = {value: f"\\{key}" for key, value in _ESCAPES.items()}


class CatalogueFormatError(ValueError):
    """Raised when a catalogue resource cannot be parsed."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


@dataclass(frozen=True)
class StringsEntry:
    """Single parsed catalogue entry."""

    key: str
    value: str
    comment: str | None
    line: int


class _Scanner:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.line = 1

    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def advance(self) -> str:
        char = self.text[self.pos]
        self.pos += 1
        if char == "\n":
            self.line += 1
        return char

    def skip_trivia(self) -> str | None:
        """Skip whitespace and comments, returning the last comment seen."""

        comment: str | None = None
        while not self.exhausted:
            char = self.peek()
            if char.isspace() or char == "\ufeff":
                self.advance()
            elif char == "/" and self.peek(1) == "*":
                start_line = self.line
                self.advance()
                self.advance()
                body: list[str] = []
                while not (self.peek() == "*" and self.peek(1) == "/"):
                    if self.exhausted:
                        raise CatalogueFormatError("unterminated block comment", line=start_line)
                    body.append(self.advance())
                self.advance()
                self.advance()
                comment = "".join(body).strip()
            elif char == "/" and self.peek(1) == "/":
                self.advance()
                self.advance()
                body = []
                while not self.exhausted and self.peek() != "\n":
                    body.append(self.advance())
                comment = "".join(body).strip()
            else:
                break
        return comment

    def expect(self, token: str) -> None:
        if self.peek() != token:
            found = repr(self.peek()) if not self.exhausted else "end of input"
            raise CatalogueFormatError(f"expected {token!r}, found {found}", line=self.line)
        self.advance()

    def read_quoted(self) -> str:
        start_line = self.line
        self.expect('"')
        chars: list[str] = []
        while True:
            if self.exhausted:
                raise CatalogueFormatError("unterminated string", line=start_line)
            char = self.advance()
            if char == '"':
                return "".join(chars)
            if char == "\\":
                if self.exhausted:
                    raise CatalogueFormatError("unterminated string", line=start_line)
                escaped = self.advance()
                if escaped not in _ESCAPES:
                    raise CatalogueFormatError(
                        f"unsupported escape sequence '\\{escaped}'", line=self.line
                    )
                chars.append(_ESCAPES[escaped])
            else:
                chars.append(char)


def parse_strings_entries(text: str) -> list[StringsEntry]:
    """Parse catalogue text into ordered entries, rejecting duplicate keys."""

    scanner = _Scanner(text)
    entries: list[StringsEntry] = []
    seen: dict[str, int] = {}

    while True:
        comment = scanner.skip_trivia()
        if scanner.exhausted:
            break

        line = scanner.line
        key = scanner.read_quoted()
        if not key:
            raise CatalogueFormatError("empty key", line=line)
        if key in seen:
            raise CatalogueFormatError(
                f"duplicate key {key!r} (first defined on line {seen[key]})", line=line
            )

        scanner.skip_trivia()
        scanner.expect("=")
        scanner.skip_trivia()
        value = scanner.read_quoted()
        scanner.skip_trivia()
        scanner.expect(";")

        seen[key] = line
        entries.append(StringsEntry(key=key, value=value, comment=comment, line=line))

    return entries


def parse_strings(text: str) -> dict[str, str]:
    """Parse catalogue text into a ``key -> template`` mapping."""

    return {entry.key: entry.value for entry in parse_strings_entries(text)}


def _quote(value: str) -> str:
    escaped = "".join(_REVERSE_ESCAPES.get(char, char) for char in value)
    return f'"{escaped}"'


def dump_strings(
    messages: Mapping[str, str],
    comments: Mapping[str, str] | None = None,
) -> str:
    """Render a mapping in catalogue format, preserving the mapping order."""

    lines: list[str] = []
    for key, value in messages.items():
        note = (comments or {}).get(key)
        if note:
            lines.append(f"/* {note.replace('*/', '* /')} */")
        lines.append(f"{_quote(key)} = {_quote(str(value))};")
    return "\n".join(lines) + ("\n" if lines else "")


__all__ = [
    "CatalogueFormatError",
    "StringsEntry",
    "dump_strings",
    "parse_strings",
    "parse_strings_entries",
]
