"""Scaffolding for Flutter projects built on Riverpod and go_router.

The package converts free-form names into Dart identifiers, renders Dart
sources from small moustache templates and merges new routes into an
already generated, possibly hand-edited, route registry without parsing Dart.
"""

from __future__ import annotations

__version__ = "1.0.0"

from .config import ProjectConfig, ProjectLayout
from .naming import NameForms, derive_names, to_camel_case, to_pascal_case, to_snake_case
from .registry import PatchDetail, PatchResult, RegistryPatcher, RouteDescriptor, patch_registry
from .scaffold import ComponentGenerator, FeatureGenerator, ProjectGenerator
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "ComponentGenerator",
    "FeatureGenerator",
    "NameForms",
    "PatchDetail",
    "PatchResult",
    "ProjectConfig",
    "ProjectGenerator",
    "ProjectLayout",
    "RegistryPatcher",
    "RouteDescriptor",
    "TemplateRenderer",
    "TemplateRenderingError",
    "derive_names",
    "patch_registry",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
]
