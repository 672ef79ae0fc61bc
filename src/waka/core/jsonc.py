"""Format-preserving JSON-with-comments (JSONC) parsing and editing.

Editor settings files are hand-edited JSON with ``//`` and ``/* */``
comments and trailing commas. Round-tripping them through ``json`` would
drop the comments and reflow the file, so this module parses into a small
syntax tree that records source offsets and applies edits as text splices.
Everything outside the edited span is left byte-for-byte intact.
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Union

_NUMBER_RE = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?")
_STRING_RE = re.compile(r'"(?:[^"\\\n]|\\.)*"')
_LITERALS = (("true", True), ("false", False), ("null", None))
_WHITESPACE = " \t\r\n\ufeff"
DEFAULT_INDENT = "  "


class JsoncError(ValueError):
    """Syntax error, with 1-based line and column of the offending offset."""

    def __init__(self, message: str, text: str, pos: int) -> None:
        self.message = message
        self.pos = pos
        self.line = text.count("\n", 0, pos) + 1
        self.column = pos - (text.rfind("\n", 0, pos) + 1) + 1
        super().__init__(f"{message} at line {self.line} column {self.column}")


class JsoncShapeError(ValueError):
    """A value along an edit path is not an object."""


# -- Syntax tree --


@dataclass
class Scalar:
    start: int
    end: int
    value: Any


@dataclass
class Member:
    key: str
    key_start: int
    value: Node
    comma_end: int | None = None  # offset just past a following ',', if any


@dataclass
class ObjectNode:
    start: int
    end: int  # one past the closing brace
    members: list[Member] = field(default_factory=list)

    def get(self, key: str) -> Member | None:
        """Return the member for ``key``; the last one wins on duplicates."""
        for member in reversed(self.members):
            if member.key == key:
                return member
        return None


@dataclass
class ArrayNode:
    start: int
    end: int
    items: list[Node] = field(default_factory=list)


Node = Union[Scalar, ObjectNode, ArrayNode]


def to_python(node: Node) -> Any:
    if isinstance(node, ObjectNode):
        return {m.key: to_python(m.value) for m in node.members}
    if isinstance(node, ArrayNode):
        return [to_python(item) for item in node.items]
    return node.value


# -- Parser --


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def error(self, message: str) -> JsoncError:
        return JsoncError(message, self.text, self.pos)

    def peek(self) -> str:
        return self.text[self.pos : self.pos + 1]

    def skip_trivia(self) -> None:
        text = self.text
        while self.pos < len(text):
            if text[self.pos] in _WHITESPACE:
                self.pos += 1
            elif text.startswith("//", self.pos):
                end = text.find("\n", self.pos)
                self.pos = len(text) if end == -1 else end
            elif text.startswith("/*", self.pos):
                end = text.find("*/", self.pos + 2)
                if end == -1:
                    raise self.error("Unterminated block comment")
                self.pos = end + 2
            else:
                break

    def parse_document(self) -> Node:
        self.skip_trivia()
        if self.pos >= len(self.text):
            raise self.error("Empty document")
        node = self.parse_value()
        self.skip_trivia()
        if self.pos < len(self.text):
            raise self.error("Unexpected content after end of document")
        return node

    def parse_value(self) -> Node:
        ch = self.peek()
        if not ch:
            raise self.error("Unexpected end of input")
        if ch == "{":
            return self.parse_object()
        if ch == "[":
            return self.parse_array()
        start = self.pos
        if ch == '"':
            value, end = self.parse_string()
            return Scalar(start, end, value)
        for word, value in _LITERALS:
            if self.text.startswith(word, start):
                after = self.text[start + len(word) : start + len(word) + 1]
                if not (after.isalnum() or after == "_"):
                    self.pos = start + len(word)
                    return Scalar(start, self.pos, value)
        match = _NUMBER_RE.match(self.text, start)
        if match:
            try:
                number = json.loads(match.group())
            except ValueError:
                raise self.error("Number literal too long")
            self.pos = match.end()
            return Scalar(start, self.pos, number)
        raise self.error(f"Unexpected character {ch!r}")

    def parse_string(self) -> tuple[str, int]:
        """Parse a string literal at the cursor. Returns (value, end offset)."""
        match = _STRING_RE.match(self.text, self.pos)
        if not match:
            raise self.error("Unterminated string")
        try:
            value = json.loads(match.group(), strict=False)
        except json.JSONDecodeError as e:
            raise self.error(f"Invalid string: {e.msg}")
        self.pos = match.end()
        return value, self.pos

    def parse_object(self) -> ObjectNode:
        node = ObjectNode(self.pos, self.pos)
        self.pos += 1
        while True:
            self.skip_trivia()
            ch = self.peek()
            if ch == "}":
                self.pos += 1
                node.end = self.pos
                return node
            if ch != '"':
                raise self.error("Expected property name or '}'")
            key_start = self.pos
            key, _ = self.parse_string()
            self.skip_trivia()
            if self.peek() != ":":
                raise self.error("Expected ':' after property name")
            self.pos += 1
            self.skip_trivia()
            member = Member(key, key_start, self.parse_value())
            node.members.append(member)
            self.skip_trivia()
            if self.peek() == ",":
                self.pos += 1
                member.comma_end = self.pos
            elif self.peek() != "}":
                raise self.error("Expected ',' or '}' after property value")

    def parse_array(self) -> ArrayNode:
        node = ArrayNode(self.pos, self.pos)
        self.pos += 1
        while True:
            self.skip_trivia()
            if self.peek() == "]":
                self.pos += 1
                node.end = self.pos
                return node
            node.items.append(self.parse_value())
            self.skip_trivia()
            if self.peek() == ",":
                self.pos += 1
            elif self.peek() != "]":
                raise self.error("Expected ',' or ']' after array element")


def parse(text: str) -> Node:
    """Parse JSONC text into a syntax tree. Raises JsoncError."""
    return _Parser(text).parse_document()


def loads(text: str) -> Any:
    """Parse JSONC text into plain Python values."""
    return to_python(parse(text))


# -- Editing --


def _line_start(text: str, pos: int) -> int:
    return text.rfind("\n", 0, pos) + 1


def _line_indent(text: str, pos: int) -> str | None:
    """Whitespace before ``pos`` on its line, or None if ``pos`` isn't first."""
    prefix = text[_line_start(text, pos) : pos]
    if prefix.strip():
        return None
    return prefix


def _leading_ws(text: str, pos: int) -> str:
    start = _line_start(text, pos)
    end = start
    while end < len(text) and text[end] in " \t":
        end += 1
    return text[start:end]


def _detect_indent_unit(text: str, root: ObjectNode) -> str:
    base = _leading_ws(text, root.start)
    for member in root.members:
        indent = _line_indent(text, member.key_start)
        if indent and len(indent) > len(base):
            return indent[len(base) :]
    return DEFAULT_INDENT


def _member_indent(text: str, obj: ObjectNode, unit: str) -> str:
    for member in reversed(obj.members):
        indent = _line_indent(text, member.key_start)
        if indent is not None:
            return indent
    return _leading_ws(text, obj.start) + unit


def _render(value: Any, indent: str, unit: str, newline: str, multiline: bool = True) -> str:
    if isinstance(value, dict) and value:
        if not multiline:
            pairs = (f"{json.dumps(k)}: {_render(v, indent, unit, newline, False)}" for k, v in value.items())
            return "{" + ", ".join(pairs) + "}"
        inner = indent + unit
        lines = [
            f"{inner}{json.dumps(k)}: {_render(v, inner, unit, newline)}"
            for k, v in value.items()
        ]
        return "{" + newline + ("," + newline).join(lines) + newline + indent + "}"
    return json.dumps(value)


def _splice(text: str, start: int, end: int, replacement: str) -> str:
    return text[:start] + replacement + text[end:]


def _insert_member(text: str, obj: ObjectNode, key: str, value: Any, unit: str, newline: str) -> str:
    interior = text[obj.start + 1 : obj.end - 1]
    close = obj.end - 1

    if not obj.members:
        base = _leading_ws(text, obj.start)
        inner = base + unit
        member = f"{json.dumps(key)}: {_render(value, inner, unit, newline)}"
        if "\n" in interior and _line_indent(text, close) is not None:
            # Closing brace on its own line: slot in above it, keep comments.
            nl = text.rfind("\n", 0, close)
            if nl > 0 and text[nl - 1] == "\r":
                nl -= 1
            return _splice(text, nl, nl, newline + inner + member)
        replacement = interior.rstrip() + newline + inner + member + newline + base
        return _splice(text, obj.start + 1, close, replacement)

    last = obj.members[-1]
    trailing = last.comma_end is not None
    anchor = last.comma_end if trailing else last.value.end

    if "\n" not in text[obj.start : obj.end]:
        member = f"{json.dumps(key)}: {_render(value, '', unit, newline, multiline=False)}"
        return _splice(text, anchor, anchor, (" " if trailing else ", ") + member)

    indent = _member_indent(text, obj, unit)
    member = f"{json.dumps(key)}: {_render(value, indent, unit, newline)}"
    suffix = "," if trailing else ""
    comma = "" if trailing else ","

    if _line_indent(text, close) is not None:
        nl = text.rfind("\n", 0, close)
        if nl > 0 and text[nl - 1] == "\r":
            nl -= 1
        if nl > last.value.end:
            text = _splice(text, nl, nl, newline + indent + member + suffix)
            return _splice(text, last.value.end, last.value.end, comma)
    return _splice(text, anchor, anchor, comma + newline + indent + member + suffix)


def set_value(text: str, path: Sequence[str], value: Any) -> str:
    """Return ``text`` with the value at ``path`` set to ``value``.

    Missing objects along the path are created. An existing leaf has only
    its value span replaced; a new leaf is appended to its parent object in
    the parent's existing layout.

    Raises JsoncError on invalid syntax and JsoncShapeError if the root or
    an intermediate value is not an object.
    """
    if not path:
        raise ValueError("path must not be empty")

    root = parse(text)
    if not isinstance(root, ObjectNode):
        raise JsoncShapeError("Document root must be an object")

    newline = "\r\n" if "\r\n" in text else "\n"
    unit = _detect_indent_unit(text, root)
    node = root
    for depth, key in enumerate(path):
        member = node.get(key)
        if member is None:
            remaining = value
            for inner_key in reversed(path[depth + 1 :]):
                remaining = {inner_key: remaining}
            return _insert_member(text, node, key, remaining, unit, newline)

        if depth == len(path) - 1:
            indent = _leading_ws(text, member.key_start)
            rendered = _render(value, indent, unit, newline)
            return _splice(text, member.value.start, member.value.end, rendered)

        if not isinstance(member.value, ObjectNode):
            dotted = ".".join(path[: depth + 1])
            raise JsoncShapeError(f"{dotted} must be an object")
        node = member.value

    raise AssertionError("unreachable")
