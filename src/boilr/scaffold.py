"""Generators writing Flutter projects, features and shared components."""

from __future__ import annotations

import logging
import re
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Sequence

from .config import ProjectConfig, ProjectLayout
from .errors import GenerationError
from .naming import NameForms, derive_names
from .registry import PatchResult, patch_registry
from .registry.schema import feature_page_import
from .template import TemplateRenderer
from .templates import (
    FEATURE_DIRECTORIES,
    FEATURE_TEMPLATES,
    PAGE_TEMPLATE,
    PROJECT_DEPENDENCIES,
    PROJECT_DIRECTORIES,
    PROJECT_TEMPLATES,
    PROVIDER_TEMPLATE,
    WIDGET_TEMPLATE,
)

__all__ = [
    "ComponentGenerator",
    "FeatureGenerator",
    "GenerationReport",
    "ProjectGenerator",
    "add_dependencies",
]


LOGGER = logging.getLogger(__name__)

CommandRunner = Callable[[Sequence[str], Path], "subprocess.CompletedProcess[str]"]

_DEPENDENCIES_ANCHOR = re.compile(r"^dependencies:[ \t]*\r?\n", re.MULTILINE)

# files produced by ``flutter create`` that the project template replaces
_REPLACED_FILES = frozenset({"main.dart"})


def _run_command(args: Sequence[str], cwd: Path) -> "subprocess.CompletedProcess[str]":
    return subprocess.run(list(args), cwd=cwd, capture_output=True, text=True, check=False)


def _ensure_writable(paths: Iterable[Path], force: bool) -> None:
    for destination in paths:
        if destination.exists() and not force:
            raise FileExistsError(f"{destination} already exists")


def _write(destination: Path, content: str) -> Path:
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(content, encoding="utf-8")
    LOGGER.debug("Wrote %s", destination)
    return destination


def add_dependencies(pubspec: str) -> str:
    """Insert the standard dependency block after ``dependencies:``.

    The pubspec is returned unchanged when it already declares
    ``flutter_riverpod`` or has no top-level ``dependencies:`` key.
    """

    if re.search(r"^\s+flutter_riverpod:", pubspec, re.MULTILINE):
        return pubspec
    match = _DEPENDENCIES_ANCHOR.search(pubspec)
    if match is None:
        return pubspec
    return pubspec[: match.end()] + PROJECT_DEPENDENCIES + pubspec[match.end() :]


@dataclass(slots=True)
class GenerationReport:
    """Files written by a generator and the outcome of route registration."""

    root: Path
    files: list[Path] = field(default_factory=list)
    registration: PatchResult | None = None


@dataclass(slots=True)
class _Generator:
    renderer: TemplateRenderer
    layout: ProjectLayout

    def __init__(
        self,
        layout: ProjectLayout | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.layout = layout or ProjectLayout.from_root()
        self.renderer = renderer or TemplateRenderer()

    def _render(self, template: str, context: Mapping[str, Any]) -> str:
        return self.renderer.render_string(template, context)


class FeatureGenerator(_Generator):
    """Create a clean-architecture feature module and register its page.

    Registration is delegated to :func:`boilr.registry.patch_registry`; its
    outcome never fails the generation itself.
    """

    def create(self, name: str, *, force: bool = False, atomic: bool = True) -> GenerationReport:
        names = derive_names(name)
        feature_dir = self.layout.feature(names.snake)
        context = {"name": names.raw}

        rendered = [
            (feature_dir / self._render(path, context), self._render(template, context))
            for path, template in FEATURE_TEMPLATES
        ]
        _ensure_writable((destination for destination, _ in rendered), force)

        for directory in FEATURE_DIRECTORIES:
            (feature_dir / directory).mkdir(parents=True, exist_ok=True)
        LOGGER.debug("Created feature directories in %s", feature_dir)

        report = GenerationReport(root=feature_dir)
        report.files.extend(_write(destination, content) for destination, content in rendered)
        report.registration = self.register(names, atomic=atomic)
        return report

    def register(self, names: NameForms, *, atomic: bool = True) -> PatchResult:
        return patch_registry(
            self.layout.router,
            names.identifier,
            names.path,
            names.snake,
            f"{names.title}Page",
            import_path=feature_page_import(names.snake),
            atomic=atomic,
        )


class ComponentGenerator(_Generator):
    """Create a single shared page, widget or provider file."""

    KINDS = {
        "page": ("shared_widgets", "page", PAGE_TEMPLATE),
        "widget": ("shared_widgets", "widget", WIDGET_TEMPLATE),
        "provider": ("shared_providers", "provider", PROVIDER_TEMPLATE),
    }

    def create(self, kind: str, name: str, *, force: bool = False) -> Path:
        try:
            directory_attr, suffix, template = self.KINDS[kind]
        except KeyError as exc:
            raise ValueError(f"unknown component kind '{kind}'") from exc

        names = derive_names(name)
        destination = getattr(self.layout, directory_attr) / f"{names.snake}_{suffix}.dart"
        _ensure_writable([destination], force)
        return _write(destination, self._render(template, {"name": names.raw}))


@dataclass(slots=True)
class ProjectGenerator:
    """Create a Flutter project and lay the boilerplate over it."""

    renderer: TemplateRenderer
    runner: CommandRunner

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.runner = runner or _run_command

    def create(
        self,
        config: ProjectConfig,
        target_dir: str | Path,
        *,
        force: bool = False,
        run_flutter: bool = True,
    ) -> GenerationReport:
        """Create the project described by ``config`` inside ``target_dir``."""

        target_path = Path(target_dir).expanduser().resolve()
        target_path.mkdir(parents=True, exist_ok=True)
        layout = ProjectLayout.from_root(target_path / config.package)

        if run_flutter:
            self._flutter_create(config, target_path)
        else:
            layout.lib.mkdir(parents=True, exist_ok=True)

        report = GenerationReport(root=layout.root)
        pubspec = layout.root / "pubspec.yaml"
        if pubspec.is_file():
            original = pubspec.read_text(encoding="utf-8")
            updated = add_dependencies(original)
            if updated != original:
                report.files.append(_write(pubspec, updated))
                LOGGER.info("Dependencies added to %s", pubspec)
        else:
            LOGGER.warning("No pubspec.yaml in %s; skipping dependencies.", layout.root)

        for directory in PROJECT_DIRECTORIES:
            (layout.lib / directory).mkdir(parents=True, exist_ok=True)

        base_context = dict(config.context())
        rendered = []
        for relative_path, template, extra in PROJECT_TEMPLATES:
            context = {**base_context, **extra}
            rendered.append((relative_path, self.renderer.render_string(template, context)))

        _ensure_writable(
            (layout.lib / path for path, _ in rendered if path not in _REPLACED_FILES),
            force,
        )
        report.files.extend(_write(layout.lib / path, content) for path, content in rendered)
        LOGGER.info("Boilerplate code generated in %s", layout.lib)
        return report

    def _flutter_create(self, config: ProjectConfig, target_path: Path) -> None:
        command = ["flutter", "create", config.package, "--org", config.org]
        LOGGER.info("Running %s", " ".join(command))
        try:
            result = self.runner(command, target_path)
        except OSError as exc:
            raise GenerationError(f"cannot run flutter: {exc}") from exc
        if result.returncode != 0:
            raise GenerationError(f"flutter create failed: {(result.stderr or '').strip()}")
