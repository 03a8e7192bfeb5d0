"""Codecov MCP CLI entrypoint."""

from __future__ import annotations

import click

from codecov_mcp import __version__


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="mcp-server-codecov")
@click.pass_context
def main(ctx: click.Context) -> None:
    """Codecov MCP server — serves on stdio when run without a command."""
    if ctx.invoked_subcommand is None:
        from codecov_mcp.cli_commands.serve import serve

        ctx.invoke(serve)


# Register subcommands
from codecov_mcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
