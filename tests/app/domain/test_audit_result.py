"""Testes do modelo AuditResult e do documento de template."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from app.domain.audit_result import AuditResult, FieldValidation, compute_status
from app.domain.template_document import TemplateDocument, TemplateSpec

_NOW = datetime(2024, 1, 2, 10, 30, tzinfo=UTC)


class TestTemplateDocument:
    """Parse tipado de documentos arbitrários."""

    def test_extracts_sections(self) -> None:
        doc = TemplateDocument.from_payload(
            {
                "metadata": {"name": "svc"},
                "spec": {
                    "description": "desc",
                    "tags": ["a"],
                    "owner": "team",
                    "annotations": {"backstage.io/source-location": "url:x"},
                },
            }
        )

        assert doc.metadata.name == "svc"
        assert doc.spec.description == "desc"
        assert doc.spec.tags == ("a",)
        assert doc.spec.owner == "team"
        assert doc.spec.source_location == "url:x"

    @pytest.mark.parametrize("payload", [None, "texto solto", 12, ["lista"], {"spec": "x"}])
    def test_unexpected_shapes_yield_empty_sections(self, payload: object) -> None:
        doc = TemplateDocument.from_payload(payload)

        assert doc.metadata.name is None
        assert doc.spec == TemplateSpec()
        assert doc.payload == payload

    def test_tags_must_be_a_list(self) -> None:
        spec = TemplateSpec.from_mapping({"tags": "python"})
        assert spec.tags is None


class TestFieldValidation:
    def test_all_fields_present(self) -> None:
        spec = TemplateSpec(description="d", tags=("t",), owner="o")
        assert FieldValidation.from_spec(spec) == FieldValidation(
            description=True, tags=True, owner=True
        )

    def test_empty_values_fail(self) -> None:
        spec = TemplateSpec(description="", tags=(), owner="")
        validation = FieldValidation.from_spec(spec)

        assert validation.passed is False
        assert validation.model_dump() == {"description": False, "tags": False, "owner": False}


class TestComputeStatus:
    _ok = FieldValidation(description=True, tags=True, owner=True)

    def test_document_path_ignores_github(self) -> None:
        assert compute_status(self._ok) == "PASS"

    @pytest.mark.parametrize(
        ("readme", "owner", "expected"),
        [
            (True, True, "PASS"),
            (False, True, "FAIL"),
            (True, None, "FAIL"),
            (None, None, "FAIL"),
        ],
    )
    def test_name_path_requires_github(
        self, readme: bool | None, owner: bool | None, expected: str
    ) -> None:
        status = compute_status(
            self._ok,
            readme_status=readme,
            github_owner_status=owner,
            require_github=True,
        )
        assert status == expected

    def test_missing_field_fails_even_with_github(self) -> None:
        validation = FieldValidation(description=True, tags=False, owner=True)
        status = compute_status(
            validation, readme_status=True, github_owner_status=True, require_github=True
        )
        assert status == "FAIL"


class TestAuditResult:
    def test_serializes_with_camel_case_names(self) -> None:
        result = AuditResult.create(
            template_name="svc",
            spec=TemplateSpec(description="d", tags=("t",), owner="team"),
            payload={"spec": {}},
            now=_NOW,
        )

        body = result.to_response()

        assert body == {
            "templateName": "svc",
            "validation": {"description": True, "tags": True, "owner": True},
            "readmeStatus": None,
            "githubOwnerStatus": None,
            "date": "2024-01-02T10:30:00.000Z",
            "status": "PASS",
            "owner": "team",
            "payload": {"spec": {}},
        }

    def test_is_immutable(self) -> None:
        result = AuditResult.create(
            template_name="svc", spec=TemplateSpec(), payload=None, now=_NOW
        )
        with pytest.raises(ValidationError):
            result.status = "PASS"  # type: ignore[misc]

    def test_presence_follows_truthiness_of_raw_values(self) -> None:
        zero_owner = AuditResult.create(
            template_name="svc",
            spec=TemplateSpec.from_mapping({"description": "d", "tags": ["t"], "owner": 0}),
            payload=None,
            now=_NOW,
        )
        structured = AuditResult.create(
            template_name="svc",
            spec=TemplateSpec.from_mapping(
                {"description": ["x"], "tags": ["t"], "owner": {"team": "a"}}
            ),
            payload=None,
            now=_NOW,
        )

        assert zero_owner.validation.owner is False
        assert zero_owner.status == "FAIL"
        assert zero_owner.owner == 0
        assert structured.validation.description is True
        assert structured.status == "PASS"
        assert structured.owner == {"team": "a"}

    def test_payload_is_converted_to_json_values(self) -> None:
        result = AuditResult.create(
            template_name=None,
            spec=TemplateSpec(owner=b"\x80"),
            payload={"blob": b"\x80", "ratio": float("nan"), "when": _NOW.date()},
            now=_NOW,
        )

        body = result.to_response()

        assert body["owner"] == "gA=="
        assert body["payload"] == {"blob": "gA==", "ratio": None, "when": "2024-01-02"}
