"""Inspection commands — effective config and the static descriptor tables."""

from __future__ import annotations

import sys

import click
from rich.markup import escape

from codecov_mcp.cli_commands._output import (
    console,
    print_prompts_table,
    print_resources_table,
    print_text,
    print_tools_table,
)


def parse_pairs(pairs: tuple[str, ...]) -> dict[str, str]:
    """Turn ``("key=value", ...)`` into a dict."""
    result: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"expected KEY=VALUE, got {pair!r}"
            raise click.BadParameter(msg, param_hint="'--arg'")
        result[key] = value
    return result


@click.command("config")
def config_cmd() -> None:
    """Show the effective Codecov configuration."""
    from codecov_mcp.config import resolve_config, validate_for_execution

    config = resolve_config()
    console.print(f"Base URL: {config.base_url}", markup=False)
    console.print(f"Token configured: {'Yes' if config.token else 'No'}", markup=False)

    error = validate_for_execution(config)
    if error is None:
        console.print("[green]Configuration valid.[/green]")
    else:
        console.print("[red]Configuration invalid:[/red]")
        print_text(error)


@click.command("tools")
def tools_cmd() -> None:
    """List the tools exposed to MCP clients."""
    from codecov_mcp.protocol.tools import list_tools

    print_tools_table(list_tools())


@click.command("prompts")
def prompts_cmd() -> None:
    """List the prompt templates."""
    from codecov_mcp.protocol.prompts import list_prompts

    print_prompts_table(list_prompts())


@click.command("prompt")
@click.argument("name")
@click.option("--arg", "-a", "args", multiple=True, help="Prompt argument as KEY=VALUE.")
def prompt_cmd(name: str, args: tuple[str, ...]) -> None:
    """Expand the prompt NAME and print its message text."""
    from codecov_mcp.protocol.errors import CodecovMCPError
    from codecov_mcp.protocol.prompts import get_prompt

    try:
        result = get_prompt(name, parse_pairs(args))
    except CodecovMCPError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    for message in result.messages:
        print_text(message.content.text)


@click.command("resources")
def resources_cmd() -> None:
    """List the static resources."""
    from codecov_mcp.protocol.resources import list_resources

    print_resources_table(list_resources())


@click.command("resource")
@click.argument("uri")
def resource_cmd(uri: str) -> None:
    """Print the body of the resource at URI."""
    from codecov_mcp.protocol.errors import CodecovMCPError
    from codecov_mcp.protocol.resources import read_resource

    try:
        contents = read_resource(uri)
    except CodecovMCPError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    print_text(contents.text)
