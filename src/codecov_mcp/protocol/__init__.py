"""MCP-facing layer — tool dispatch, prompts, resources and server wiring."""

from codecov_mcp.protocol.dispatcher import dispatch
from codecov_mcp.protocol.errors import (
    CodecovMCPError,
    PromptArgumentsError,
    UnknownPromptError,
    UnknownResourceError,
    UnknownToolError,
)
from codecov_mcp.protocol.models import (
    PromptMessage,
    PromptResult,
    ResourceContents,
    TextContent,
    ToolResponse,
)
from codecov_mcp.protocol.prompts import get_prompt, list_prompts
from codecov_mcp.protocol.resources import list_resources, read_resource
from codecov_mcp.protocol.tools import list_tools

__all__ = [
    "CodecovMCPError",
    "PromptArgumentsError",
    "PromptMessage",
    "PromptResult",
    "ResourceContents",
    "TextContent",
    "ToolResponse",
    "UnknownPromptError",
    "UnknownResourceError",
    "UnknownToolError",
    "dispatch",
    "get_prompt",
    "list_prompts",
    "list_resources",
    "list_tools",
    "read_resource",
]
