"""``mcp-server-codecov serve`` — run the MCP server on stdio."""

from __future__ import annotations

import asyncio
import logging
import sys

import click

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help=(
        "Logging level for stderr diagnostics. "
        "The startup lines are logged at INFO and hidden at WARNING or above."
    ),
)
@click.option("--telemetry", is_flag=True, help="Export trace spans to stderr.")
@click.option("--otlp-endpoint", default=None, help="Export trace spans via OTLP/gRPC.")
def serve(log_level: str, telemetry: bool, otlp_endpoint: str | None) -> None:
    """Serve Codecov tools, prompts and resources over stdio.

    Configuration comes from CODECOV_BASE_URL and CODECOV_TOKEN.  An invalid
    base URL only produces warnings here; tool calls report it as an error.
    """
    from codecov_mcp.config import configure_logging, log_startup_warnings, resolve_config
    from codecov_mcp.protocol.server import run_stdio

    configure_logging(log_level)

    if telemetry or otlp_endpoint:
        from codecov_mcp.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(export_to_console=telemetry, otlp_endpoint=otlp_endpoint)
        except ImportError as exc:
            logger.warning("Telemetry disabled: %s", exc)

    config = resolve_config()
    log_startup_warnings(config)

    try:
        asyncio.run(run_stdio(config))
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as exc:
        logger.error("Server error: %s", exc)
        sys.exit(1)
