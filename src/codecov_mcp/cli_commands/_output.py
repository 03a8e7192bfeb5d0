"""Shared CLI output formatters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from codecov_mcp.protocol.prompts import PromptSpec
    from codecov_mcp.protocol.resources import ResourceSpec
    from codecov_mcp.protocol.tools import ToolSpec

console = Console()


def print_tools_table(tools: list[ToolSpec]) -> None:
    """Pretty-print tool descriptors as a table."""
    table = Table(title="Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Arguments")
    table.add_column("Description")

    for tool in tools:
        args = ", ".join(p.name if p.required else f"{p.name}?" for p in tool.params)
        table.add_row(tool.name, args, _truncate(tool.description))

    console.print(table)


def print_prompts_table(prompts: list[PromptSpec]) -> None:
    """Pretty-print prompt descriptors as a table."""
    table = Table(title="Prompts")
    table.add_column("Name", style="cyan")
    table.add_column("Arguments")
    table.add_column("Description")

    for prompt in prompts:
        args = ", ".join(a.name if a.required else f"{a.name}?" for a in prompt.arguments)
        table.add_row(prompt.name, args, _truncate(prompt.description))

    console.print(table)


def print_resources_table(resources: list[ResourceSpec]) -> None:
    """Pretty-print resource descriptors as a table."""
    table = Table(title="Resources")
    table.add_column("URI", style="cyan", no_wrap=True)
    table.add_column("Type")
    table.add_column("Name")

    for resource in resources:
        table.add_row(resource.uri, resource.mime_type, resource.name)

    console.print(table)


def print_text(text: str) -> None:
    """Print *text* verbatim, without rich markup or highlighting."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def print_json(data: Any) -> None:
    console.print_json(data=data)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
