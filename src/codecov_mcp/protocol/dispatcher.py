"""Tool dispatch — validate config, route by name, wrap the outcome.

:func:`dispatch` never raises for a tool failure: configuration problems,
unknown names and remote errors all come back as a :class:`ToolResponse`
with ``is_error`` set, so a misbehaving call never takes the server down.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from codecov_mcp.config import validate_for_execution
from codecov_mcp.protocol.errors import UnknownToolError
from codecov_mcp.protocol.models import ToolResponse
from codecov_mcp.protocol.tools import get_tool
from codecov_mcp.utils.telemetry import ATTR_BASE_URL, ATTR_TOOL_ERROR, ATTR_TOOL_NAME, get_tracer

if TYPE_CHECKING:
    from collections.abc import Mapping

    from codecov_mcp.api.client import CodecovClient
    from codecov_mcp.config import CodecovConfig

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


async def dispatch(
    name: str,
    arguments: Mapping[str, Any] | None,
    client: CodecovClient,
    config: CodecovConfig,
) -> ToolResponse:
    """Run the tool called *name* with *arguments* and wrap its result.

    Holds no state of its own; *client* and *config* are read-only and may be
    shared by any number of concurrent calls.
    """
    config_error = validate_for_execution(config)
    if config_error is not None:
        logger.warning("Refusing to run %s: invalid configuration", name)
        return ToolResponse.error(f"Configuration Error:\n\n{config_error}")

    with _tracer.start_as_current_span("codecov.tool.call") as span:
        span.set_attribute(ATTR_TOOL_NAME, name)
        span.set_attribute(ATTR_BASE_URL, config.base_url)
        try:
            result = await _invoke(name, dict(arguments or {}), client)
        except Exception as exc:
            span.set_attribute(ATTR_TOOL_ERROR, True)
            logger.warning("Tool %s failed: %s", name, exc)
            return ToolResponse.error(f"Error: {exc}")

        span.set_attribute(ATTR_TOOL_ERROR, False)
        return ToolResponse.from_result(result)


async def _invoke(name: str, arguments: dict[str, Any], client: CodecovClient) -> Any:
    tool = get_tool(name)
    if tool is None:
        raise UnknownToolError(name)
    logger.debug("Dispatching %s", name)
    return await tool.handler(client, tool.extract(arguments))
