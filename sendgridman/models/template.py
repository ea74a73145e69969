"""Transactional template models for the SendGrid v3 API."""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, model_validator
from typing_extensions import Literal


class SendGridModel(BaseModel):
    """Base model for SendGrid payloads.

    Unknown fields are ignored. Fields that are missing or ``null`` take
    their zero value.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        """Treat ``null`` like a missing key."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class VersionSummary(SendGridModel):
    """Template version metadata as returned by the list endpoint."""

    id: str = ""
    template_id: str = ""
    active: Literal[0, 1] = 0
    name: str = ""
    updated_at: str = ""  # opaque, never parsed
    editor: str = ""

    @property
    def is_active(self) -> bool:
        """Whether this is the version currently served by SendGrid."""
        return self.active == 1


class VersionDetail(VersionSummary):
    """Template version including its content."""

    subject: str = ""
    html_content: str = ""
    plain_content: str = ""


class TemplateSummary(SendGridModel):
    """Template entry of the list endpoint."""

    id: str = ""
    name: str = ""
    versions: List[VersionSummary] = []


class TemplateList(SendGridModel):
    """Body of ``GET /v3/templates``."""

    templates: List[TemplateSummary] = []


class TemplateDetail(SendGridModel):
    """Body of ``GET /v3/templates/{id}``."""

    id: str = ""
    name: str = ""
    generation: str = ""
    updated_at: str = ""
    versions: List[VersionDetail] = []

    @model_validator(mode="after")
    def validate_version_owner(self) -> "TemplateDetail":
        """Ensure every version belongs to this template."""
        for version in self.versions:
            if not version.template_id:
                version.template_id = self.id
            elif version.template_id != self.id:
                raise ValueError(
                    f"Version {version.id} belongs to template {version.template_id}, not {self.id}"
                )
        return self
