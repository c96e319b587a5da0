"""Schemas exchanged between the generators and the registry patcher."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from ..naming import derive_names, is_identifier


class PatchDetail(str, Enum):
    """Outcome of a single registry patch."""

    FULL = "full"
    PARTIAL_IMPORT_ONLY = "partial-import-only"
    PARTIAL_IMPORT_AND_CONSTANTS = "partial-import-and-constants"
    SKIPPED_NO_REGISTRY = "skipped-no-registry"
    SKIPPED_NO_ANCHOR = "skipped-no-anchor"


class RouteDescriptor(BaseModel):
    """Everything needed to register one page in the route registry."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    symbolic_name: str = Field(..., description="Identifier used for the path and name constants.")
    display_path: str = Field(..., description="URL path of the route, starting with '/'.")
    route_name: str = Field(..., min_length=1, description="Value of the route name constant.")
    widget_type_name: str = Field(..., description="Page widget built by the route.")
    import_path: str = Field(..., min_length=1, description="Dart import path of the page, relative to the registry.")

    @field_validator("symbolic_name", "widget_type_name")
    @classmethod
    def _check_identifier(cls, value: str) -> str:
        if not is_identifier(value):
            raise ValueError(f"{value!r} is not a valid identifier")
        return value

    @field_validator("display_path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("display_path must start with '/'")
        return value

    @field_validator("route_name", "import_path")
    @classmethod
    def _check_quotable(cls, value: str) -> str:
        if "'" in value or "\n" in value:
            raise ValueError(f"{value!r} cannot be embedded in a single-quoted literal")
        return value

    @classmethod
    def from_name(cls, name: str) -> "RouteDescriptor":
        """Derive the descriptor for the feature page generated from ``name``."""

        names = derive_names(name)
        return cls(
            symbolic_name=names.identifier,
            display_path=names.path,
            route_name=names.snake,
            widget_type_name=f"{names.title}Page",
            import_path=feature_page_import(names.snake),
        )


class PatchResult(BaseModel):
    """Report returned to the generator after a patch attempt."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    detail: PatchDetail = Field(..., description="Which part of the registration was applied.")
    changed: bool = Field(False, description="Whether the registry file was rewritten.")
    path: Path | None = Field(None, description="Registry file the patch was applied to.")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def applied(self) -> bool:
        """Whether the route is fully registered after the patch."""

        return self.detail is PatchDetail.FULL


def feature_page_import(snake_name: str) -> str:
    """Import path of a feature page as seen from ``lib/core/router``."""

    return f"../../features/{snake_name}/presentation/pages/{snake_name}_page.dart"


__all__ = ["PatchDetail", "PatchResult", "RouteDescriptor", "feature_page_import"]
