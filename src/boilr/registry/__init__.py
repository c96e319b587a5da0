"""Anchor based merging of new routes into the generated route registry."""

from .anchors import Anchors, scan
from .merger import DeclarationMerger, Insertion
from .patcher import RegistryPatcher, patch_registry, patch_text
from .schema import PatchDetail, PatchResult, RouteDescriptor

__all__ = [
    "Anchors",
    "DeclarationMerger",
    "Insertion",
    "PatchDetail",
    "PatchResult",
    "RegistryPatcher",
    "RouteDescriptor",
    "patch_registry",
    "patch_text",
    "scan",
]
