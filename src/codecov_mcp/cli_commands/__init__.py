"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from codecov_mcp.cli_commands.inspect import (
        config_cmd,
        prompt_cmd,
        prompts_cmd,
        resource_cmd,
        resources_cmd,
        tools_cmd,
    )
    from codecov_mcp.cli_commands.query import activate, call, compare, pull
    from codecov_mcp.cli_commands.serve import serve

    cli.add_command(serve)
    cli.add_command(config_cmd)
    cli.add_command(tools_cmd)
    cli.add_command(prompts_cmd)
    cli.add_command(prompt_cmd)
    cli.add_command(resources_cmd)
    cli.add_command(resource_cmd)
    cli.add_command(call)
    cli.add_command(pull)
    cli.add_command(compare)
    cli.add_command(activate)
