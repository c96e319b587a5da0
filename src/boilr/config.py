"""Configuration helpers shared by the generators and CLI."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .naming import to_pascal_case, to_snake_case

ROUTER_PATH = Path("lib", "core", "router", "app_router.dart")

_ORG_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_]*(\.[A-Za-z][A-Za-z0-9_]*)+$")


@dataclass(slots=True)
class ProjectConfig:
    """Derived identifiers describing a new Flutter project.

    Attributes
    ----------
    name:
        The project name provided by the user, with whitespace collapsed.
    package:
        The Dart package name handed to ``flutter create``; also the name of
        the directory the project is created in.
    class_name:
        A canonical class name derived from :attr:`name`.
    org:
        Reverse domain organisation, e.g. ``com.example``.
    """

    name: str
    package: str
    class_name: str
    org: str

    @classmethod
    def from_name(cls, name: str, *, org: str) -> "ProjectConfig":
        """Build a :class:`ProjectConfig` from a human friendly project name.

        Parameters
        ----------
        name:
            The descriptive name chosen by the caller.
        org:
            The organisation passed to ``flutter create --org``.
        """

        normalized_name = " ".join(name.split())
        package = to_snake_case(normalized_name)
        if not package:
            raise ValueError("project name must not be empty")
        if package[0].isdigit():
            raise ValueError("project name must not start with a digit")

        org = org.strip()
        if not _ORG_PATTERN.match(org):
            raise ValueError(f"invalid organisation '{org}', expected e.g. com.example.myapp")

        return cls(
            name=normalized_name,
            package=package,
            class_name=to_pascal_case(normalized_name),
            org=org,
        )

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "name": self.name,
            "package_name": self.package,
            "class_name": self.class_name,
            "org": self.org,
        }


@dataclass(frozen=True, slots=True)
class ProjectLayout:
    """Locations of the generated sources inside a Flutter project."""

    root: Path

    @classmethod
    def from_root(cls, root: str | Path | None = None) -> "ProjectLayout":
        base = Path.cwd() if root is None else Path(root)
        return cls(root=base.expanduser().resolve())

    @property
    def lib(self) -> Path:
        return self.root / "lib"

    @property
    def router(self) -> Path:
        return self.root / ROUTER_PATH

    @property
    def features(self) -> Path:
        return self.lib / "features"

    @property
    def shared_widgets(self) -> Path:
        return self.lib / "shared" / "widgets"

    @property
    def shared_providers(self) -> Path:
        return self.lib / "shared" / "providers"

    def feature(self, snake_name: str) -> Path:
        return self.features / snake_name
