"""File store for exported templates.

Writes the HTML and plain-text bodies of template versions to a base
directory. Filenames are derived from the template name and, when every
version is exported, the version ID:

    {base_dir}/{name}.html           active version only
    {base_dir}/{name}__{version}.html every version

Plain-text files use the same stem with a ``.txt`` suffix. Version IDs are
percent-encoded so distinct IDs never share a filename.
"""

import os
import re
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import quote

from rich.console import Console
from rich.markup import escape

from .exceptions import EmptyTemplateError, StoreError
from .models import TemplateDetail, VersionDetail

FILE_MODE = 0o644

_UNSAFE_CHARS = re.compile(r"[/\\\x00-\x1f]")


@dataclass(frozen=True)
class StorePolicy:
    """Per-call options for :meth:`TemplateFileStore.store`."""

    include_plain: bool = False
    overwrite_existing: bool = False
    all_versions: bool = False


@dataclass
class StoreResult:
    """Files written and skipped while storing one template."""

    template_id: str
    written: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


def safe_stem(template: TemplateDetail) -> str:
    """Return a filename stem for the template that stays inside the base dir.

    Path separators and control characters are replaced with ``_``. Names
    that reduce to nothing, ``.`` or ``..`` fall back to the template ID.
    """
    stem = _UNSAFE_CHARS.sub("_", template.name)
    if stem.strip() in ("", ".", ".."):
        stem = _UNSAFE_CHARS.sub("_", template.id) or "_"
    return stem


class TemplateFileStore:
    """Stores template versions as files below a base directory."""

    def __init__(self, base_dir: str, console: Optional[Console] = None) -> None:
        """Initialize the store.

        Args:
            base_dir: Existing output directory. It is normalized but not created.
            console: Rich console for progress output
        """
        self.base_dir = os.path.normpath(base_dir)
        self.console = console or Console()

    def _path(self, template: TemplateDetail, version: VersionDetail, all_versions: bool, suffix: str) -> str:
        stem = safe_stem(template)
        if all_versions:
            stem = f"{stem}__{quote(version.id, safe='')}"
        return os.path.join(self.base_dir, f"{stem}{suffix}")

    def html_path(self, template: TemplateDetail, version: VersionDetail, all_versions: bool = False) -> str:
        """Path of the HTML file for a version."""
        return self._path(template, version, all_versions, ".html")

    def plain_path(self, template: TemplateDetail, version: VersionDetail, all_versions: bool = False) -> str:
        """Path of the plain-text file for a version."""
        return self._path(template, version, all_versions, ".txt")

    def _write(self, path: str, content: str) -> None:
        # FILE_MODE applies to new files only; existing files keep their mode
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(content.encode("utf-8"))

    def store(self, template: TemplateDetail, policy: Optional[StorePolicy] = None) -> StoreResult:
        """Write the versions of a template to disk.

        Args:
            template: Template with version content
            policy: Which versions and files to write

        Returns:
            Paths written and skipped

        Raises:
            EmptyTemplateError: If the template has no versions
            StoreError: If a file cannot be written
        """
        policy = policy or StorePolicy()
        result = StoreResult(template_id=template.id)

        if not template.versions:
            raise EmptyTemplateError(
                f"No versions for TemplateID={template.id}",
                template_id=template.id,
            )

        self.console.print(f"Saving versions for TemplateID={template.id} '{template.name}'", markup=False)
        for version in template.versions:
            if not policy.all_versions and not version.is_active:
                self.console.print(f"[dim]Skip inactive version: {escape(version.id)}[/dim]")
                continue

            html_path = self.html_path(template, version, policy.all_versions)
            plain_path = self.plain_path(template, version, policy.all_versions)

            if os.path.exists(html_path) and not policy.overwrite_existing:
                self.console.print(
                    f"[yellow]Warning: file '{escape(html_path)}' already exists, "
                    f"skipping version {escape(version.id)} (use --overwrite)[/yellow]"
                )
                result.skipped.append(html_path)
                continue

            self.console.print(f"Saving version: {version.id} named '{version.name}'", markup=False)
            targets = [("HTML", html_path, version.html_content)]
            if policy.include_plain:
                targets.append(("PLAIN", plain_path, version.plain_content))

            for kind, path, content in targets:
                try:
                    self._write(path, content)
                except OSError as e:
                    raise StoreError(
                        f"store TemplateID='{version.template_id}'/VersionID={version.id} "
                        f"{kind} content to file '{path}' fail: {e}",
                        template_id=template.id,
                        version_id=version.id,
                        path=path,
                    ) from e
                result.written.append(path)

        return result
