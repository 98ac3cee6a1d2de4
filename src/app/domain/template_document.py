"""Modelo tipado de documento de template (catálogo ou YAML colado).

Qualquer valor parseado vira um TemplateDocument: seções ausentes ou com
tipo inesperado resultam em seções vazias, nunca em exceção.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from app.domain.source_location import SOURCE_LOCATION_ANNOTATION


def _optional_str(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


@dataclass(frozen=True, slots=True)
class TemplateSpec:
    """Campos de `spec` relevantes para a auditoria.

    description e owner guardam o valor cru: a presença é avaliada por
    truthiness, qualquer que seja o tipo.
    """

    description: Any = None
    tags: tuple[Any, ...] | None = None
    owner: Any = None
    annotations: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, value: Any) -> TemplateSpec:
        section = _as_mapping(value)
        tags = section.get("tags")
        return cls(
            description=section.get("description"),
            tags=tuple(tags) if isinstance(tags, list) else None,
            owner=section.get("owner"),
            annotations=dict(_as_mapping(section.get("annotations"))),
        )

    @property
    def source_location(self) -> Any:
        return self.annotations.get(SOURCE_LOCATION_ANNOTATION)


@dataclass(frozen=True, slots=True)
class TemplateMetadata:
    """Campos de `metadata` relevantes para a auditoria."""

    name: str | None = None

    @classmethod
    def from_mapping(cls, value: Any) -> TemplateMetadata:
        return cls(name=_optional_str(_as_mapping(value).get("name")))


@dataclass(frozen=True, slots=True)
class TemplateDocument:
    """Documento de template com o payload bruto preservado."""

    metadata: TemplateMetadata
    spec: TemplateSpec
    payload: Any = None

    @classmethod
    def from_payload(cls, payload: Any) -> TemplateDocument:
        root = _as_mapping(payload)
        return cls(
            metadata=TemplateMetadata.from_mapping(root.get("metadata")),
            spec=TemplateSpec.from_mapping(root.get("spec")),
            payload=payload,
        )


__all__ = ["TemplateDocument", "TemplateMetadata", "TemplateSpec"]
