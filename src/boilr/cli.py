"""Command line interface for the boilr generators."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from . import __version__
from .config import ProjectConfig, ProjectLayout
from .errors import BoilrError
from .scaffold import ComponentGenerator, FeatureGenerator, ProjectGenerator

LOGGER = logging.getLogger("boilr")

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")


class _ConsoleFormatter(logging.Formatter):
    """Prefix console messages with a marker for their level."""

    PREFIXES = {
        logging.DEBUG: "·  ",
        logging.INFO: "ℹ️  ",
        SUCCESS: "✅ ",
        logging.WARNING: "⚠️  ",
        logging.ERROR: "❌ ",
    }

    def format(self, record: logging.LogRecord) -> str:
        prefix = self.PREFIXES.get(record.levelno, "")
        return prefix + super().format(record)


class _ConsoleHandler(logging.StreamHandler):
    pass


def _configure_logging(verbose: bool) -> None:
    for handler in list(LOGGER.handlers):
        if isinstance(handler, _ConsoleHandler):
            LOGGER.removeHandler(handler)
    handler = _ConsoleHandler(sys.stdout)
    handler.setFormatter(_ConsoleFormatter("%(message)s"))
    LOGGER.addHandler(handler)
    LOGGER.setLevel(logging.DEBUG if verbose else logging.INFO)


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("name", help="Name of the component to create")
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=None,
        help="Root of the Flutter project (defaults to the current directory)",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files instead of failing",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boilr", description="Flutter project generator with Riverpod and go_router"
    )
    parser.add_argument("--version", action="version", version=f"boilr {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser(
        "create", help="create Flutter projects, features, widgets, pages, and providers"
    )
    kinds = create_parser.add_subparsers(dest="kind", required=True)

    project_parser = kinds.add_parser(
        "project", help="create a complete Flutter project with pre-configured packages"
    )
    project_parser.add_argument("name", help="Name of the Flutter project to create")
    project_parser.add_argument(
        "-o",
        "--org",
        required=True,
        help="Organization/package name (e.g., com.example.myapp)",
    )
    project_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Directory the project folder is created in",
    )
    project_parser.add_argument(
        "--skip-flutter-create",
        action="store_true",
        help="Only write the boilerplate, do not run 'flutter create'",
    )
    project_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files instead of failing",
    )

    feature_parser = kinds.add_parser(
        "feature", help="create a feature module with clean architecture"
    )
    _add_common_options(feature_parser)
    feature_parser.add_argument(
        "--no-atomic",
        action="store_true",
        help="Keep partial router updates when an anchor is missing",
    )

    for kind, help_text in (
        ("page", "create a Flutter screen with Riverpod integration"),
        ("widget", "create a ConsumerWidget with Riverpod integration"),
        ("provider", "create a Riverpod provider and state class"),
    ):
        _add_common_options(kinds.add_parser(kind, help=help_text))

    return parser


def _handle_project(args: argparse.Namespace) -> int:
    config = ProjectConfig.from_name(args.name, org=args.org)
    LOGGER.info("Creating Flutter project: %s", config.name)
    LOGGER.info("Organization: %s", config.org)
    report = ProjectGenerator().create(
        config,
        args.directory,
        force=args.force,
        run_flutter=not args.skip_flutter_create,
    )
    LOGGER.log(SUCCESS, 'Flutter project "%s" created successfully!', config.name)
    LOGGER.info("Next steps:")
    LOGGER.info("  cd %s", report.root)
    LOGGER.info("  flutter pub get")
    LOGGER.info("  flutter run")
    return 0


def _handle_feature(args: argparse.Namespace) -> int:
    LOGGER.info("Creating feature: %s", args.name)
    generator = FeatureGenerator(ProjectLayout.from_root(args.root))
    report = generator.create(args.name, force=args.force, atomic=not args.no_atomic)
    LOGGER.log(SUCCESS, 'Feature "%s" created successfully!', args.name)
    LOGGER.info("Feature structure created in %s", report.root)
    if report.registration is not None and report.registration.applied:
        LOGGER.log(SUCCESS, "Router updated with new feature route")
    return 0


def _handle_component(args: argparse.Namespace) -> int:
    LOGGER.info("Creating %s: %s", args.kind, args.name)
    generator = ComponentGenerator(ProjectLayout.from_root(args.root))
    destination = generator.create(args.kind, args.name, force=args.force)
    LOGGER.log(SUCCESS, '%s "%s" created successfully!', args.kind.capitalize(), args.name)
    LOGGER.info("%s created in %s", args.kind.capitalize(), destination)
    return 0


_HANDLERS = {
    "project": _handle_project,
    "feature": _handle_feature,
    "page": _handle_component,
    "widget": _handle_component,
    "provider": _handle_component,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    handler = _HANDLERS.get(args.kind)
    if handler is None:
        parser.error("no command provided")
        return 2
    try:
        return handler(args)
    except (BoilrError, OSError, ValueError) as exc:
        LOGGER.error("Failed to create %s: %s", args.kind, exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
