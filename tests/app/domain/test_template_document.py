"""Testes do modelo tipado de documento de template."""

from __future__ import annotations

from app.domain.template_document import TemplateDocument, TemplateSpec


def test_reads_metadata_and_spec_fields() -> None:
    payload = {
        "metadata": {"name": "svc-template"},
        "spec": {
            "description": "Service template",
            "tags": ["python", "api"],
            "owner": "team-a",
            "annotations": {"backstage.io/source-location": "url:https://github.com/a/b"},
        },
    }

    document = TemplateDocument.from_payload(payload)

    assert document.metadata.name == "svc-template"
    assert document.spec.description == "Service template"
    assert document.spec.tags == ("python", "api")
    assert document.spec.owner == "team-a"
    assert document.spec.source_location == "url:https://github.com/a/b"
    assert document.payload is payload


def test_missing_sections_become_empty() -> None:
    document = TemplateDocument.from_payload({"kind": "Template"})

    assert document.metadata.name is None
    assert document.spec == TemplateSpec()
    assert document.spec.source_location is None


def test_non_mapping_payload_is_tolerated() -> None:
    for payload in (None, "just text", 42, ["a", "b"]):
        document = TemplateDocument.from_payload(payload)
        assert document.spec.owner is None
        assert document.payload == payload


def test_field_values_are_kept_raw() -> None:
    spec = TemplateSpec.from_mapping(
        {"description": ["x"], "tags": "python", "owner": {"team": "a"}, "annotations": ["x"]}
    )

    assert spec.description == ["x"]
    assert spec.tags is None
    assert spec.owner == {"team": "a"}
    assert spec.annotations == {}


def test_empty_tags_list_is_kept() -> None:
    assert TemplateSpec.from_mapping({"tags": []}).tags == ()
