"""MCP server wiring — registers the tool, prompt and resource handlers.

Tool calls always answer with a ``CallToolResult``; lookup failures for
prompts and resources are raised and reported by the SDK as JSON-RPC errors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

from codecov_mcp import __version__
from codecov_mcp.api.client import CodecovClient
from codecov_mcp.protocol.dispatcher import dispatch
from codecov_mcp.protocol.prompts import get_prompt, list_prompts
from codecov_mcp.protocol.resources import list_resources, read_resource
from codecov_mcp.protocol.tools import list_tools

if TYPE_CHECKING:
    from codecov_mcp.config import CodecovConfig
    from codecov_mcp.protocol.models import PromptResult, ResourceContents, ToolResponse

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp-server-codecov"


def create_server(config: CodecovConfig, client: CodecovClient) -> Server:
    """Build an MCP :class:`Server` bound to *config* and *client*."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()  # type: ignore[untyped-decorator,no-untyped-call]
    async def handle_list_tools() -> list[types.Tool]:
        return mcp_tools()

    # Argument bags reach the dispatcher untouched; it owns error reporting.
    @server.call_tool(validate_input=False)  # type: ignore[untyped-decorator]
    async def handle_call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        response = await dispatch(name, arguments, client, config)
        return to_call_tool_result(response)

    @server.list_prompts()  # type: ignore[untyped-decorator,no-untyped-call]
    async def handle_list_prompts() -> list[types.Prompt]:
        return mcp_prompts()

    @server.get_prompt()  # type: ignore[untyped-decorator,no-untyped-call]
    async def handle_get_prompt(
        name: str, arguments: dict[str, str] | None = None
    ) -> types.GetPromptResult:
        return to_get_prompt_result(get_prompt(name, arguments))

    @server.list_resources()  # type: ignore[untyped-decorator,no-untyped-call]
    async def handle_list_resources() -> list[types.Resource]:
        return mcp_resources()

    @server.read_resource()  # type: ignore[untyped-decorator,no-untyped-call]
    async def handle_read_resource(uri: Any) -> Iterable[ReadResourceContents]:
        return to_resource_contents(read_resource(str(uri)))

    return server


# ---------------------------------------------------------------------------
# Conversions to mcp.types
# ---------------------------------------------------------------------------


def mcp_tools() -> list[types.Tool]:
    return [
        types.Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema())
        for tool in list_tools()
    ]


def mcp_prompts() -> list[types.Prompt]:
    return [
        types.Prompt(
            name=prompt.name,
            title=prompt.title,
            description=prompt.description,
            arguments=[
                types.PromptArgument(
                    name=arg.name, description=arg.description, required=arg.required
                )
                for arg in prompt.arguments
            ],
        )
        for prompt in list_prompts()
    ]


def mcp_resources() -> list[types.Resource]:
    return [
        types.Resource(
            uri=resource.uri,  # type: ignore[arg-type]
            name=resource.name,
            description=resource.description,
            mimeType=resource.mime_type,
        )
        for resource in list_resources()
    ]


def to_call_tool_result(response: ToolResponse) -> types.CallToolResult:
    """Convert a :class:`ToolResponse` into the SDK's result type."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=part.text) for part in response.content],
        isError=bool(response.is_error),
    )


def to_get_prompt_result(result: PromptResult) -> types.GetPromptResult:
    return types.GetPromptResult(
        description=result.description,
        messages=[
            types.PromptMessage(
                role=message.role,
                content=types.TextContent(type="text", text=message.content.text),
            )
            for message in result.messages
        ],
    )


def to_resource_contents(contents: ResourceContents) -> list[ReadResourceContents]:
    return [ReadResourceContents(content=contents.text, mime_type=contents.mime_type)]


def initialization_options(server: Server) -> InitializationOptions:
    """Capabilities advertised during the MCP handshake."""
    return server.create_initialization_options(
        notification_options=NotificationOptions(prompts_changed=True, resources_changed=False),
    )


async def run_stdio(config: CodecovConfig) -> None:
    """Serve MCP over stdin/stdout until the peer disconnects."""
    client = CodecovClient(config)
    server = create_server(config, client)

    async with stdio_server() as (read_stream, write_stream):
        logger.info("Codecov MCP Server running on stdio")
        logger.info("Base URL: %s", config.base_url)
        logger.info("Token configured: %s", "Yes" if config.token else "No")
        await server.run(read_stream, write_stream, initialization_options(server))
