"""Resultado de auditoria de template.

Criado uma vez por requisição de validação e imutável depois disso.
Serializado com os nomes camelCase consumidos pelo painel e pelo webhook.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import to_jsonable_python

from app.domain.template_document import TemplateSpec  # noqa: TC001 - usado em runtime

AuditStatus = Literal["PASS", "FAIL"]


def json_safe(value: Any) -> Any:
    """Converte valor parseado (bytes, datas, sets, NaN) em equivalente JSON.

    bytes viram base64; NaN/Infinity viram null; tipos desconhecidos, str().
    """
    return to_jsonable_python(
        value,
        bytes_mode="base64",
        inf_nan_mode="null",
        fallback=str,
    )


class FieldValidation(BaseModel):
    """Presença dos três campos obrigatórios do template."""

    model_config = ConfigDict(frozen=True)

    description: bool
    tags: bool
    owner: bool

    @classmethod
    def from_spec(cls, spec: TemplateSpec) -> FieldValidation:
        return cls(
            description=bool(spec.description),
            tags=bool(spec.tags),
            owner=bool(spec.owner),
        )

    @property
    def passed(self) -> bool:
        return self.description and self.tags and self.owner


def compute_status(
    validation: FieldValidation,
    *,
    readme_status: bool | None = None,
    github_owner_status: bool | None = None,
    require_github: bool = False,
) -> AuditStatus:
    """PASS apenas se todos os checks aplicáveis forem True.

    Com require_github (validação por nome), status nulo do GitHub conta como
    falha: sem source-location GitHub o template não passa.
    """
    if not validation.passed:
        return "FAIL"
    if require_github and not (readme_status is True and github_owner_status is True):
        return "FAIL"
    return "PASS"


class AuditResult(BaseModel):
    """Registro produzido por requisição de validação."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    template_name: str | None = Field(default=None, alias="templateName")
    validation: FieldValidation
    readme_status: bool | None = Field(default=None, alias="readmeStatus")
    github_owner_status: bool | None = Field(default=None, alias="githubOwnerStatus")
    date: str = Field(..., description="Timestamp ISO-8601 (UTC) da validação.")
    status: AuditStatus
    owner: Any = None
    payload: Any = None

    @classmethod
    def create(
        cls,
        *,
        template_name: str | None,
        spec: TemplateSpec,
        payload: Any,
        readme_status: bool | None = None,
        github_owner_status: bool | None = None,
        require_github: bool = False,
        now: datetime | None = None,
    ) -> AuditResult:
        """Monta o resultado aplicando o check de campos e a regra de status."""
        validation = FieldValidation.from_spec(spec)
        timestamp = (now or datetime.now(UTC)).isoformat(timespec="milliseconds")
        return cls(
            template_name=template_name,
            validation=validation,
            readme_status=readme_status,
            github_owner_status=github_owner_status,
            date=timestamp.replace("+00:00", "Z"),
            status=compute_status(
                validation,
                readme_status=readme_status,
                github_owner_status=github_owner_status,
                require_github=require_github,
            ),
            owner=json_safe(spec.owner),
            payload=json_safe(payload),
        )

    def to_response(self) -> dict[str, Any]:
        """Dict JSON-safe com nomes camelCase."""
        return self.model_dump(mode="json", by_alias=True)


__all__ = ["AuditResult", "AuditStatus", "FieldValidation", "compute_status", "json_safe"]
