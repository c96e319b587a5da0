"""Render registry declarations and decide where they are spliced in."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .schema import RouteDescriptor

__all__ = ["DeclarationMerger", "Insertion"]


_INDENT = re.compile(r"[ \t]*")
_STEP = "  "


@dataclass(frozen=True, slots=True)
class Insertion:
    """Text to splice into a document at ``offset``."""

    offset: int
    text: str

    def apply(self, document: str) -> str:
        return document[: self.offset] + self.text + document[self.offset :]


def _line_start(document: str, offset: int) -> int:
    return document.rfind("\n", 0, offset) + 1


def _line_indent(document: str, offset: int) -> str:
    start = _line_start(document, offset)
    return _INDENT.match(document, start).group(0)


def _indent_step(document: str, list_close: int, base_indent: str) -> str:
    """Indent one list level adds, read off the line above the closing bracket."""

    line_start = _line_start(document, list_close)
    if line_start > 0 and not document[line_start:list_close].strip():
        previous = _line_indent(document, line_start - 1)
        if previous.startswith(base_indent) and len(previous) > len(base_indent):
            return previous[len(base_indent) :]
    return "\t" if "\t" in base_indent else _STEP


class DeclarationMerger:
    """Plan the three insertions that register ``descriptor``.

    Every ``merge_*`` method returns ``None`` when the text it would insert is
    already present verbatim anywhere in the document, which makes repeated
    patches with the same descriptor no-ops.
    """

    def __init__(self, descriptor: RouteDescriptor) -> None:
        self.descriptor = descriptor

    @staticmethod
    def _newline(document: str) -> str:
        return "\r\n" if "\r\n" in document else "\n"

    def import_line(self) -> str:
        return f"import '{self.descriptor.import_path}';"

    def constant_pair(self, indent: str = _STEP, newline: str = "\n") -> str:
        d = self.descriptor
        return (
            f"static const String {d.symbolic_name} = '{d.display_path}';"
            f"{newline}{indent}static const String {d.symbolic_name}Name = '{d.route_name}';"
        )

    def route_entry(self, indent: str, newline: str = "\n", step: str = _STEP) -> str:
        d = self.descriptor
        lines = [
            "GoRoute(",
            f"{indent}{step}path: Router.{d.symbolic_name},",
            f"{indent}{step}name: Router.{d.symbolic_name}Name,",
            f"{indent}{step}builder: (context, state) => const {d.widget_type_name}(),",
            f"{indent}),",
        ]
        return newline.join(lines)

    def merge_import(self, document: str, import_end: int) -> Insertion | None:
        line = self.import_line()
        if line in document:
            return None
        return Insertion(import_end, self._newline(document) + line)

    def merge_constants(self, document: str, constants_end: int) -> Insertion | None:
        newline = self._newline(document)
        indent = _line_indent(document, constants_end)
        pair = self.constant_pair(indent, newline)
        if pair in document:
            return None
        return Insertion(constants_end, newline + indent + pair)

    def merge_route(self, document: str, list_close: int) -> Insertion | None:
        newline = self._newline(document)
        line_start = _line_start(document, list_close)
        base_indent = _line_indent(document, list_close)
        step = _indent_step(document, list_close, base_indent)
        indent = base_indent + step
        entry = self.route_entry(indent, newline, step)
        if entry in document:
            return None

        preceding = document[:list_close].rstrip()
        if preceding and preceding[-1] not in ",[":
            # last entry has no trailing comma: separate it from the new one
            return Insertion(len(preceding), "," + newline + indent + entry)
        if not document[line_start:list_close].strip():
            # closing bracket on its own line: the entry becomes the line before it
            return Insertion(line_start, indent + entry + newline)
        return Insertion(list_close, newline + indent + entry + newline + base_indent)
