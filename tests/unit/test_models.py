"""Unit tests for models module.

Tests the Pydantic models for SendGrid template payloads including
defaults, ignored fields and version ownership.
"""

import pytest
from pydantic import ValidationError

from sendgridman.models import (
    TemplateDetail,
    TemplateList,
    TemplateSummary,
    VersionDetail,
    VersionSummary,
)


@pytest.fixture
def template_payload():
    """Detail payload as returned by GET /v3/templates/{id}."""
    return {
        "id": "d-1234",
        "name": "welcome",
        "generation": "dynamic",
        "updated_at": "2024-01-01 00:00:00",
        "versions": [
            {
                "id": "v-1",
                "template_id": "d-1234",
                "active": 1,
                "name": "Welcome v1",
                "updated_at": "2024-01-01 00:00:00",
                "editor": "code",
                "subject": "Hello {{name}}",
                "html_content": "<h1>hi</h1>",
                "plain_content": "hi",
                "thumbnail_url": "//example.com/thumb.png",
                "test_data": "{}",
            },
            {
                "id": "v-2",
                "template_id": "d-1234",
                "active": 0,
                "name": "Welcome v2",
                "editor": "design",
                "html_content": "<h1>draft</h1>",
                "plain_content": "draft",
            },
        ],
    }


class TestVersionModels:
    """Test cases for the version models."""

    def test_version_summary_defaults(self):
        """Missing fields decode to zero values."""
        version = VersionSummary()

        assert version.id == ""
        assert version.template_id == ""
        assert version.active == 0
        assert version.is_active is False

    def test_version_detail_extends_summary(self):
        """Version detail carries the summary fields and content."""
        version = VersionDetail(id="v-1", active=1, html_content="<p>x</p>")

        assert isinstance(version, VersionSummary)
        assert version.is_active is True
        assert version.html_content == "<p>x</p>"
        assert version.plain_content == ""
        assert version.subject == ""

    def test_version_active_out_of_range(self):
        """Active flag other than 0 or 1 is rejected."""
        with pytest.raises(ValidationError):
            VersionSummary(id="v-1", active=2)

    def test_version_ignores_unknown_fields(self):
        """Unknown fields in the payload are ignored."""
        version = VersionDetail.model_validate({"id": "v-1", "thumbnail_url": "x"})

        assert version.id == "v-1"
        assert not hasattr(version, "thumbnail_url")


class TestTemplateModels:
    """Test cases for the template models."""

    def test_template_detail_from_payload(self, template_payload):
        """Detail payload decodes into versions in remote order."""
        template = TemplateDetail.model_validate(template_payload)

        assert template.id == "d-1234"
        assert template.name == "welcome"
        assert template.generation == "dynamic"
        assert [v.id for v in template.versions] == ["v-1", "v-2"]
        assert template.versions[0].subject == "Hello {{name}}"
        assert template.versions[1].updated_at == ""

    @pytest.mark.parametrize(
        "field", ["plain_content", "subject", "editor", "name", "updated_at", "html_content", "template_id"]
    )
    def test_version_null_field_decodes_to_zero_value(self, template_payload, field):
        """Null fields decode like missing ones."""
        template_payload["versions"][0][field] = None

        template = TemplateDetail.model_validate(template_payload)

        expected = "d-1234" if field == "template_id" else ""
        assert getattr(template.versions[0], field) == expected

    def test_version_null_active_is_inactive(self, template_payload):
        """A null active flag means inactive."""
        template_payload["versions"][0]["active"] = None

        template = TemplateDetail.model_validate(template_payload)

        assert template.versions[0].is_active is False

    def test_template_null_versions(self, template_payload):
        """Null versions decode to an empty list."""
        template_payload["versions"] = None
        template_payload["name"] = None

        template = TemplateDetail.model_validate(template_payload)

        assert template.versions == []
        assert template.name == ""

    def test_template_list_null_fields(self):
        """Null templates and versions in the list body decode to empty lists."""
        assert TemplateList.model_validate({"templates": None}).templates == []

        data = TemplateList.model_validate({"templates": [{"id": "d-1", "name": None, "versions": None}]})

        assert data.templates[0].name == ""
        assert data.templates[0].versions == []

    def test_template_detail_fills_missing_template_id(self, template_payload):
        """Versions without template_id inherit the owner's id."""
        del template_payload["versions"][1]["template_id"]

        template = TemplateDetail.model_validate(template_payload)

        assert template.versions[1].template_id == "d-1234"

    def test_template_detail_rejects_foreign_version(self, template_payload):
        """A version owned by another template is rejected."""
        template_payload["versions"][1]["template_id"] = "d-9999"

        with pytest.raises(ValidationError, match="belongs to template d-9999"):
            TemplateDetail.model_validate(template_payload)

    def test_template_without_versions(self):
        """Templates may have no versions."""
        template = TemplateDetail.model_validate({"id": "d-1", "name": "empty"})

        assert template.versions == []

    def test_template_list(self):
        """List payload decodes summaries without content."""
        data = TemplateList.model_validate({
            "templates": [
                {"id": "d-1", "name": "a", "versions": [{"id": "v-1", "active": 1}]},
                {"id": "d-2", "name": "b", "generation": "dynamic"},
            ],
            "_metadata": {"count": 2},
        })

        assert len(data.templates) == 2
        assert isinstance(data.templates[0], TemplateSummary)
        assert data.templates[0].versions[0].is_active
        assert data.templates[1].versions == []

    def test_template_list_empty(self):
        """A body without templates decodes to an empty list."""
        assert TemplateList.model_validate({}).templates == []
