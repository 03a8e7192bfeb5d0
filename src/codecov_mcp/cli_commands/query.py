"""One-shot Codecov queries from the command line."""

from __future__ import annotations

import asyncio
import sys
from typing import TYPE_CHECKING, Any

import click
from rich.markup import escape

from codecov_mcp.cli_commands._output import console, print_json, print_text
from codecov_mcp.cli_commands.inspect import parse_pairs

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from codecov_mcp.api.client import CodecovClient


@click.command()
@click.argument("name")
@click.option("--arg", "-a", "args", multiple=True, help="Tool argument as KEY=VALUE.")
@click.option("--json", "as_json", is_flag=True, help="Print the full response envelope.")
def call(name: str, args: tuple[str, ...], as_json: bool) -> None:
    """Call the tool NAME exactly as an MCP client would."""
    from codecov_mcp.api.client import CodecovClient
    from codecov_mcp.config import resolve_config
    from codecov_mcp.protocol.dispatcher import dispatch

    arguments = parse_pairs(args)
    config = resolve_config()
    client = CodecovClient(config)
    response = asyncio.run(dispatch(name, arguments, client, config))

    if as_json:
        print_json(response.to_wire())
    else:
        print_text(response.text)

    if response.is_error:
        sys.exit(1)


@click.command()
@click.argument("owner")
@click.argument("repo")
@click.argument("number", type=int)
def pull(owner: str, repo: str, number: int) -> None:
    """Show coverage for pull request NUMBER."""
    _run_query(lambda client: client.get_pull_request_coverage(owner, repo, number))


@click.command()
@click.argument("owner")
@click.argument("repo")
@click.argument("base")
@click.argument("head")
def compare(owner: str, repo: str, base: str, head: str) -> None:
    """Compare coverage between the refs BASE and HEAD."""
    _run_query(lambda client: client.compare_coverage(owner, repo, base, head))


@click.command()
@click.argument("owner")
@click.argument("repo")
def activate(owner: str, repo: str) -> None:
    """Activate OWNER/REPO on Codecov."""
    _run_query(lambda client: client.activate_repository(owner, repo))


def _run_query(query: Callable[[CodecovClient], Awaitable[Any]]) -> None:
    """Validate config, run *query* against a fresh client and print its JSON."""
    from codecov_mcp.api.client import CodecovClient
    from codecov_mcp.config import resolve_config, validate_for_execution

    config = resolve_config()
    error = validate_for_execution(config)
    if error is not None:
        console.print("[red]Configuration Error:[/red]")
        print_text(error)
        sys.exit(1)

    client = CodecovClient(config)

    async def _query() -> Any:
        return await query(client)

    try:
        result = asyncio.run(_query())
    except Exception as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    print_json(result)
