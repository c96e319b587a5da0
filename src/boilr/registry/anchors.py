"""Locate the structural anchors of a route registry without parsing Dart."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "Anchors",
    "CONSTANT_PAIR_PATTERN",
    "CONTAINER_SIGNATURE",
    "IMPORT_PATTERN",
    "LIST_OPEN_TOKEN",
    "find_closing",
    "scan",
]


IMPORT_PATTERN = re.compile(r"^import\s+'[^'\n]+'[^;\n]*;", re.MULTILINE)
CONTAINER_SIGNATURE = "class Router {"
CONSTANT_PAIR_PATTERN = re.compile(r"static const String (?P<stem>\w+)Name = '[^'\n]*';")
LIST_OPEN_TOKEN = "routes: ["

_PAIRS = {")": "(", "]": "[", "}": "{"}


@dataclass(frozen=True, slots=True)
class Anchors:
    """Offsets found in a registry document. ``None`` means not found.

    Attributes
    ----------
    import_end:
        End of the last import directive.
    container_start, container_end:
        Start of ``class Router {`` and offset of its closing brace.
    constants_end:
        End of the last ``static const String <id>Name = '...';`` line inside
        the container.
    list_open:
        Offset just past ``routes: [``.
    list_close:
        Offset of the bracket closing the route list.
    """

    import_end: int | None = None
    container_start: int | None = None
    container_end: int | None = None
    constants_end: int | None = None
    list_open: int | None = None
    list_close: int | None = None


def _skip_string(text: str, start: int) -> int:
    quote = text[start]
    triple = quote * 3
    if text.startswith(triple, start):
        end = text.find(triple, start + 3)
        return len(text) if end == -1 else end + 3

    index = start + 1
    while index < len(text):
        char = text[index]
        if char == "\\":
            index += 2
            continue
        if char == quote or char == "\n":
            return index + 1
        index += 1
    return len(text)


def find_closing(text: str, start: int) -> int | None:
    """Return the offset of the bracket matching the one at ``start - 1``.

    Nested brackets are tracked on a stack; string literals and comments are
    skipped. Mismatched or unterminated brackets yield ``None``.
    """

    stack = [text[start - 1]]
    index = start
    length = len(text)
    while index < length:
        char = text[index]
        if char in "'\"":
            index = _skip_string(text, index)
            continue
        if text.startswith("//", index):
            newline = text.find("\n", index)
            if newline == -1:
                return None
            index = newline
            continue
        if text.startswith("/*", index):
            end = text.find("*/", index + 2)
            if end == -1:
                return None
            index = end + 2
            continue

        if char in "([{":
            stack.append(char)
        elif char in _PAIRS:
            if stack[-1] != _PAIRS[char]:
                return None
            stack.pop()
            if not stack:
                return index
        index += 1
    return None


def _find_import_end(text: str) -> int | None:
    last = None
    for last in IMPORT_PATTERN.finditer(text):
        pass
    return last.end() if last else None


def _find_constants_end(text: str, start: int, end: int | None) -> int | None:
    last = None
    for last in CONSTANT_PAIR_PATTERN.finditer(text, start, len(text) if end is None else end):
        pass
    return last.end() if last else None


def scan(text: str) -> Anchors:
    """Find every anchor the registry patcher needs in ``text``."""

    anchors: dict[str, int | None] = {"import_end": _find_import_end(text)}

    container_start = text.find(CONTAINER_SIGNATURE)
    if container_start != -1:
        container_end = find_closing(text, container_start + len(CONTAINER_SIGNATURE))
        anchors["container_start"] = container_start
        anchors["container_end"] = container_end
        anchors["constants_end"] = _find_constants_end(text, container_start, container_end)

    list_start = text.find(LIST_OPEN_TOKEN)
    if list_start != -1:
        list_open = list_start + len(LIST_OPEN_TOKEN)
        anchors["list_open"] = list_open
        anchors["list_close"] = find_closing(text, list_open)

    return Anchors(**anchors)
