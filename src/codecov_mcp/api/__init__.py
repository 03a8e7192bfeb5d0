"""Codecov HTTP API — async client and its error type."""

from codecov_mcp.api.client import CodecovClient
from codecov_mcp.api.errors import CodecovAPIError

__all__ = [
    "CodecovAPIError",
    "CodecovClient",
]
