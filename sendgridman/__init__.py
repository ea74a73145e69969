"""SendGrid template exporter package.

A command-line tool that downloads SendGrid dynamic transactional
templates and stores the content of their versions as local files.
"""

__version__ = "0.3.0"
__description__ = "Export SendGrid dynamic templates to local files"

# Re-export main classes for convenience
from .client import SendGridClient, SENDGRID_HOST
from .config import ExportSettings
from .store import StorePolicy, StoreResult, TemplateFileStore
from .exceptions import (
    SendgridmanError,
    ConfigError,
    WorkingDirectoryError,
    RemoteError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    DecodeError,
    EmptyTemplateError,
    StoreError,
)

__all__ = [
    "__version__",
    "__description__",
    "SendGridClient",
    "SENDGRID_HOST",
    "ExportSettings",
    "StorePolicy",
    "StoreResult",
    "TemplateFileStore",
    "SendgridmanError",
    "ConfigError",
    "WorkingDirectoryError",
    "RemoteError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "DecodeError",
    "EmptyTemplateError",
    "StoreError",
]
