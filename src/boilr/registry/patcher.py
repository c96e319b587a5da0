"""Apply a route registration to the registry file in one read-modify-write."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..errors import RegistryIOError
from .anchors import scan
from .merger import DeclarationMerger, Insertion
from .schema import PatchDetail, PatchResult, RouteDescriptor, feature_page_import

__all__ = ["RegistryPatcher", "patch_registry", "patch_text"]


LOGGER = logging.getLogger(__name__)


def _splice(document: str, insertion: Insertion | None) -> str:
    return document if insertion is None else insertion.apply(document)


def patch_text(
    text: str,
    descriptor: RouteDescriptor,
    *,
    atomic: bool = True,
) -> tuple[str, PatchDetail]:
    """Register ``descriptor`` in the registry source ``text``.

    The import line, the constant pair and the route entry are merged in that
    order; anchors are rescanned after each splice. When an anchor is missing
    the remaining steps are skipped. With ``atomic`` (the default) the original
    text is returned untouched in that case and the outcome is
    :attr:`PatchDetail.SKIPPED_NO_ANCHOR`; otherwise the steps applied so far
    are kept and a ``partial-*`` outcome is reported.
    """

    merger = DeclarationMerger(descriptor)

    anchors = scan(text)
    if anchors.import_end is None:
        LOGGER.warning("No import directive found in the router; skipping registration.")
        return text, PatchDetail.SKIPPED_NO_ANCHOR
    document = _splice(text, merger.merge_import(text, anchors.import_end))

    anchors = scan(document)
    if anchors.constants_end is None:
        LOGGER.warning("No route constants found in 'class Router'; skipping route constants.")
        if atomic:
            return text, PatchDetail.SKIPPED_NO_ANCHOR
        return document, PatchDetail.PARTIAL_IMPORT_ONLY
    document = _splice(document, merger.merge_constants(document, anchors.constants_end))

    anchors = scan(document)
    if anchors.list_close is None:
        LOGGER.warning("No 'routes: [' list found in the router; skipping route entry.")
        if atomic:
            return text, PatchDetail.SKIPPED_NO_ANCHOR
        return document, PatchDetail.PARTIAL_IMPORT_AND_CONSTANTS
    document = _splice(document, merger.merge_route(document, anchors.list_close))

    return document, PatchDetail.FULL


@dataclass(slots=True)
class RegistryPatcher:
    """Patch the route registry stored at :attr:`path`.

    The file is read and written with newline translation disabled so bytes
    outside the insertion points survive unchanged.
    """

    path: Path
    encoding: str = "utf-8"
    atomic: bool = True

    def read(self) -> str:
        try:
            with self.path.open("r", encoding=self.encoding, newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise RegistryIOError(self.path, str(exc)) from exc

    def write(self, text: str) -> None:
        try:
            with self.path.open("w", encoding=self.encoding, newline="") as handle:
                handle.write(text)
        except OSError as exc:
            raise RegistryIOError(self.path, str(exc)) from exc

    def patch(self, descriptor: RouteDescriptor) -> PatchResult:
        if not self.path.is_file():
            LOGGER.warning("Router file %s not found. Skipping router update.", self.path)
            return PatchResult(detail=PatchDetail.SKIPPED_NO_REGISTRY, path=self.path)

        original = self.read()
        updated, detail = patch_text(original, descriptor, atomic=self.atomic)
        changed = updated != original
        if changed:
            self.write(updated)

        if detail is PatchDetail.FULL and changed:
            LOGGER.info("Registered route %s in %s", descriptor.display_path, self.path)
        elif detail is PatchDetail.FULL:
            LOGGER.info("Route %s is already registered", descriptor.display_path)
        else:
            LOGGER.warning("Route %s not fully registered (%s)", descriptor.display_path, detail.value)
        return PatchResult(detail=detail, changed=changed, path=self.path)


def patch_registry(
    registry_path: str | Path,
    name: str,
    path: str,
    route_name: str,
    widget_type_name: str,
    *,
    import_path: str | None = None,
    atomic: bool = True,
) -> PatchResult:
    """Register a page route in the registry file at ``registry_path``.

    ``name`` is the symbolic identifier of the two route constants. When
    ``import_path`` is omitted the page is assumed to live in the feature
    directory named after ``route_name``.
    """

    descriptor = RouteDescriptor(
        symbolic_name=name,
        display_path=path,
        route_name=route_name,
        widget_type_name=widget_type_name,
        import_path=import_path or feature_page_import(route_name),
    )
    return RegistryPatcher(Path(registry_path), atomic=atomic).patch(descriptor)
