"""Output rendering and formatting utilities.

This module renders the run settings and the export report as rich
tables, JSON or YAML.
"""

import json
from typing import Any, Dict, List, Optional

import yaml
from rich import box
from rich.console import Console
from rich.table import Table

from .config import ExportSettings
from .exceptions import ConfigError

FORMATS = ("table", "json", "yaml")


class OutputFormatter:
    """Renders exporter output in multiple formats."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize output formatter.

        Args:
            console: Rich console instance. If None, creates a new one.
        """
        self.console = console or Console()

    def render_settings(self, settings: ExportSettings) -> None:
        """Print the effective settings of a run."""
        table = Table(title="Export settings", box=box.ROUNDED, show_header=False)
        table.add_column("Setting", style="cyan", no_wrap=True)
        table.add_column("Value", overflow="fold")

        table.add_row("API key", settings.masked_api_key())
        table.add_row("Host", settings.host)
        table.add_row("Base dir", settings.base_dir)
        table.add_row("Include plain", "✓" if settings.include_plain else "✗")
        table.add_row("Overwrite", "✓" if settings.overwrite else "✗")
        table.add_row("All versions", "✓" if settings.all_versions else "✗")
        table.add_row("Timeout", f"{settings.timeout}s" if settings.timeout else "none")

        self.console.print(table)

    def render(self, data: List[Dict[str, Any]], format: str = "table", title: Optional[str] = None) -> None:
        """Render report rows in the specified format.

        Args:
            data: Report rows
            format: Output format (table, json, yaml)
            title: Table title
        """
        format_name = format.lower()
        if format_name == "table":
            self.render_table(data, title=title)
        elif format_name == "json":
            self.render_json(data)
        elif format_name == "yaml":
            self.render_yaml(data)
        else:
            raise ConfigError(f"Unknown output format: {format_name}")

    def render_table(self, data: List[Dict[str, Any]], title: Optional[str] = None) -> None:
        """Render report rows as a table using Rich."""
        if not data:
            return

        columns = list(data[0].keys())
        table = Table(title=title, box=box.ROUNDED)
        for col in columns:
            table.add_column(col.replace("_", " ").title(), overflow="fold")

        for item in data:
            row = []
            for col in columns:
                value = item.get(col, "")
                if value is None:
                    value = ""
                elif isinstance(value, list):
                    value = "\n".join(str(v) for v in value) or "—"
                row.append(str(value))
            table.add_row(*row)

        self.console.print(table)

    def render_json(self, data: Any, indent: int = 2) -> None:
        """Render data as JSON."""
        print(json.dumps(data, indent=indent, ensure_ascii=False, default=str))

    def render_yaml(self, data: Any) -> None:
        """Render data as YAML."""
        print(yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False), end="")
