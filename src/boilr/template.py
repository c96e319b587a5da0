"""Placeholder substitution for the Dart source templates.

A placeholder is ``{{ key }}`` or ``{{ key|filter }}``. Dart's own single
braces and ``${...}`` interpolation pass through untouched. Filters turn a
free-form name into the casing a Dart declaration or file name needs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from .naming import to_camel_case, to_pascal_case, to_snake_case

__all__ = [
    "CASE_FILTERS",
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")

CASE_FILTERS: Mapping[str, Callable[[str], str]] = {
    "snake": to_snake_case,
    "camel": to_camel_case,
    "pascal": to_pascal_case,
}


class TemplateRenderingError(RuntimeError):
    """Raised when a placeholder names an unknown key or filter."""


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates whose placeholders must all resolve."""

    filters: dict[str, Callable[[str], str]] = field(default_factory=lambda: dict(CASE_FILTERS))

    def _filter(self, name: str) -> Callable[[str], str]:
        try:
            return self.filters[name]
        except KeyError:
            raise TemplateRenderingError(f"unknown filter '{name}'") from None

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template``, raising :class:`TemplateRenderingError` on gaps."""

        def substitute(match: re.Match[str]) -> str:
            key, _, filter_name = match.group("expression").partition("|")
            key, filter_name = key.strip(), filter_name.strip()
            if key not in context:
                raise TemplateRenderingError(f"missing value for '{key}'")
            value = str(context[key])
            return self._filter(filter_name)(value) if filter_name else value

        return _PLACEHOLDER_PATTERN.sub(substitute, template)
