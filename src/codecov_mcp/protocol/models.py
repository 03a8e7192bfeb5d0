"""Value types exchanged with the MCP layer.

These are transport-neutral: :mod:`codecov_mcp.protocol.server` converts them
to ``mcp.types`` objects, while the CLI prints them directly.
"""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Tool responses
# ---------------------------------------------------------------------------


class TextContent(BaseModel):
    """Plain text content part."""

    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """Uniform envelope for every tool call.

    ``is_error`` is ``True`` on failure and left unset on success, so the
    serialised form carries ``isError`` only when something went wrong.
    """

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent] = []
    is_error: bool | None = Field(default=None, alias="isError")

    @property
    def text(self) -> str:
        """Concatenated text of all content parts."""
        return "".join(part.text for part in self.content)

    @classmethod
    def from_result(cls, result: Any) -> ToolResponse:
        """Wrap a decoded JSON payload as pretty-printed text."""
        text = json.dumps(result, indent=2, ensure_ascii=False)
        return cls(content=[TextContent(text=text)])

    @classmethod
    def error(cls, text: str) -> ToolResponse:
        """Build a failed response carrying *text*."""
        return cls(content=[TextContent(text=text)], is_error=True)

    def to_wire(self) -> dict[str, Any]:
        """Serialise using MCP field names, omitting ``isError`` on success."""
        return self.model_dump(by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


class PromptMessage(BaseModel):
    """A single message of an expanded prompt."""

    role: Literal["user", "assistant"] = "user"
    content: TextContent


class PromptResult(BaseModel):
    """The expansion of a prompt template."""

    description: str
    messages: list[PromptMessage] = []


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


class ResourceContents(BaseModel):
    """The body of a static resource."""

    uri: str
    mime_type: str
    text: str
