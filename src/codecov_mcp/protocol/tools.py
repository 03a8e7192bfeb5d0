"""Tool table — the coverage queries exposed to MCP callers.

Each :class:`ToolSpec` carries both the metadata advertised by ``tools/list``
and the coroutine that serves ``tools/call``, so the listing and the dispatch
table are one and the same.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from codecov_mcp.api.client import CodecovClient

# Called as ``handler(client, arguments)``.
ToolHandler = Callable[..., Awaitable[Any]]


class ToolParam(BaseModel):
    """One named argument of a tool."""

    name: str
    type: str = "string"
    description: str = ""
    required: bool = True


class ToolSpec(BaseModel):
    """A dispatchable tool: name, schema, description and handler."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    params: list[ToolParam] = []
    handler: ToolHandler = Field(exclude=True)

    def input_schema(self) -> dict[str, Any]:
        """Render the JSON schema advertised to MCP clients."""
        properties: dict[str, Any] = {}
        required: list[str] = []
        for param in self.params:
            properties[param.name] = {
                "type": param.type,
                "description": param.description,
            }
            if param.required:
                required.append(param.name)
        return {
            "type": "object",
            "properties": properties,
            "required": required,
        }

    def extract(self, arguments: dict[str, Any]) -> dict[str, Any]:
        """Pick this tool's parameters out of *arguments*.

        Missing parameters come back as ``None``; nothing is coerced or
        validated here.
        """
        return {param.name: arguments.get(param.name) for param in self.params}


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


async def _get_file_coverage(client: CodecovClient, args: dict[str, Any]) -> Any:
    return await client.get_file_coverage(
        args["owner"], args["repo"], args["file_path"], args["ref"]
    )


async def _get_commit_coverage(client: CodecovClient, args: dict[str, Any]) -> Any:
    return await client.get_commit_coverage(args["owner"], args["repo"], args["commit_sha"])


async def _get_repo_coverage(client: CodecovClient, args: dict[str, Any]) -> Any:
    return await client.get_repo_coverage(args["owner"], args["repo"], args["branch"])


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------

_OWNER = ToolParam(name="owner", description="Repository owner (username or organization)")
_REPO = ToolParam(name="repo", description="Repository name")

_TOOL_LIST: list[ToolSpec] = [
    ToolSpec(
        name="get_file_coverage",
        description=(
            "Get line-by-line coverage data for a specific file in a repository. "
            "Returns coverage percentages and line-level hit/miss information."
        ),
        params=[
            _OWNER,
            _REPO,
            ToolParam(
                name="file_path",
                description="Path to the file within the repository (e.g., 'src/index.ts')",
            ),
            ToolParam(
                name="ref",
                description=(
                    "Git reference (branch, tag, or commit SHA). "
                    "Defaults to default branch if not specified."
                ),
                required=False,
            ),
        ],
        handler=_get_file_coverage,
    ),
    ToolSpec(
        name="get_commit_coverage",
        description=(
            "Get coverage data for a specific commit, including overall coverage "
            "percentage and file-level changes."
        ),
        params=[
            _OWNER,
            _REPO,
            ToolParam(name="commit_sha", description="Commit SHA to get coverage for"),
        ],
        handler=_get_commit_coverage,
    ),
    ToolSpec(
        name="get_repo_coverage",
        description=(
            "Get overall coverage statistics for a repository, "
            "optionally for a specific branch."
        ),
        params=[
            _OWNER,
            _REPO,
            ToolParam(
                name="branch",
                description="Branch name (defaults to repository's default branch)",
                required=False,
            ),
        ],
        handler=_get_repo_coverage,
    ),
]

TOOLS: dict[str, ToolSpec] = {tool.name: tool for tool in _TOOL_LIST}


def list_tools() -> list[ToolSpec]:
    """Return every tool in advertised order."""
    return list(TOOLS.values())


def get_tool(name: str) -> ToolSpec | None:
    return TOOLS.get(name)
