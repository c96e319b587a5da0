"""String normalisation utilities used throughout the project."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Iterable

__all__ = [
    "NameForms",
    "derive_names",
    "is_identifier",
    "split_words",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
]


_SEPARATORS = re.compile(r"[\s_\-]+")
_INVALID_CHARACTERS = re.compile(r"[^0-9a-zA-Z]")
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _capitalize_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def split_words(value: str | Iterable[str]) -> list[str]:
    """Split ``value`` into ASCII words on underscores, hyphens and whitespace.

    Characters that cannot appear in a Dart identifier are dropped from each
    word and empty words are discarded. When an iterable of strings is provided
    the values are joined with spaces first.
    """

    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        value = " ".join(str(part) for part in value)

    text = unicodedata.normalize("NFKD", str(value))
    text = text.encode("ascii", "ignore").decode("ascii")

    words = (_INVALID_CHARACTERS.sub("", word) for word in _SEPARATORS.split(text))
    return [word for word in words if word]


def to_snake_case(value: str | Iterable[str]) -> str:
    """Return the lower-case, underscore separated form used for file names."""

    return "_".join(word.lower() for word in split_words(value))


def to_camel_case(value: str | Iterable[str]) -> str:
    """Return ``value`` as a ``camelCase`` identifier.

    The first word is lower-cased; every following word has its first
    character upper-cased and the remainder kept verbatim.
    """

    words = split_words(value)
    if not words:
        return ""
    first, *rest = words
    return first.lower() + "".join(_capitalize_first(word) for word in rest)


def to_pascal_case(value: str | Iterable[str]) -> str:
    """Return ``value`` as a ``PascalCase`` type name."""

    return "".join(_capitalize_first(word) for word in split_words(value))


def is_identifier(value: str) -> bool:
    """Whether ``value`` is a bare Dart identifier."""

    return bool(_IDENTIFIER.match(value))


@dataclass(frozen=True, slots=True)
class NameForms:
    """Every spelling of a user supplied name needed by the generators."""

    raw: str
    snake: str
    identifier: str
    title: str

    @property
    def path(self) -> str:
        return f"/{self.snake}"


def derive_names(name: str) -> NameForms:
    """Derive :class:`NameForms` from ``name``.

    >>> derive_names("product_catalog").identifier
    'productCatalog'
    >>> derive_names("product_catalog").path
    '/product_catalog'
    """

    identifier = to_camel_case(name)
    if not identifier:
        raise ValueError(f"name {name!r} does not contain any usable characters")
    if identifier[0].isdigit():
        raise ValueError(f"name {name!r} must not start with a digit")

    return NameForms(
        raw=name,
        snake=to_snake_case(name),
        identifier=identifier,
        title=to_pascal_case(name),
    )
