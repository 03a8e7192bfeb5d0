"""Runtime configuration — Codecov base URL and API token.

Configuration is read from the environment exactly once, at process entry,
and handed to every component as an immutable :class:`CodecovConfig`.
Validation is deliberately split in two:

* :func:`log_startup_warnings` reports problems once and lets the server start.
* :func:`validate_for_execution` runs on every tool call and refuses to
  execute against a base URL without an ``http``/``https`` scheme.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

ENV_BASE_URL = "CODECOV_BASE_URL"
ENV_TOKEN = "CODECOV_TOKEN"
DEFAULT_BASE_URL = "https://codecov.io"

_VALID_SCHEMES = ("http://", "https://")

LOG_FORMAT = "%(levelname)s: %(message)s"


class CodecovConfig(BaseModel):
    """Effective Codecov connection settings.

    ``token`` keeps the distinction between an unset variable (``None``) and
    one set to the empty string (``""``).
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    token: str | None = None

    @property
    def has_valid_scheme(self) -> bool:
        return self.base_url.startswith(_VALID_SCHEMES)

    @property
    def is_insecure(self) -> bool:
        return self.base_url.startswith("http://")


def resolve_config(environ: Mapping[str, str] | None = None) -> CodecovConfig:
    """Build a :class:`CodecovConfig` from *environ* (defaults to ``os.environ``).

    An absent or empty ``CODECOV_BASE_URL`` falls back to ``https://codecov.io``.
    ``CODECOV_TOKEN`` is taken verbatim when present.
    """
    env = os.environ if environ is None else environ
    base_url = env.get(ENV_BASE_URL) or DEFAULT_BASE_URL
    token = env.get(ENV_TOKEN)
    return CodecovConfig(base_url=base_url, token=token)


def validate_for_execution(config: CodecovConfig) -> str | None:
    """Return an error message if tools must not run with *config*, else ``None``."""
    if not config.has_valid_scheme:
        return (
            f'Invalid {ENV_BASE_URL}: "{config.base_url}". Must start with http:// or https://.'
            f"\n\nPlease set a valid {ENV_BASE_URL} environment variable."
        )
    return None


def log_startup_warnings(config: CodecovConfig) -> None:
    """Log advisory warnings about *config*; never raises, never blocks startup."""
    if not config.has_valid_scheme:
        logger.warning("%s must start with http:// or https://", ENV_BASE_URL)
        logger.warning("Received: %s", config.base_url)
        logger.warning("Tools will fail at execution time if this URL is invalid.")

    if config.is_insecure:
        logger.warning("Using insecure HTTP connection. Consider using HTTPS.")


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr; stdout is reserved for the MCP stream."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
