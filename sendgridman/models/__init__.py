"""Data models for the SendGrid template exporter.

This package contains Pydantic models mirroring the JSON payloads of
the SendGrid v3 transactional templates API.
"""

from .template import (
    TemplateDetail,
    TemplateList,
    TemplateSummary,
    VersionDetail,
    VersionSummary,
)


__all__ = [
    "TemplateDetail",
    "TemplateList",
    "TemplateSummary",
    "VersionDetail",
    "VersionSummary",
]
