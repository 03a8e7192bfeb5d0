"""Codecov MCP server — coverage queries, prompts and docs for AI assistants."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "1.0.4"

if TYPE_CHECKING:
    from codecov_mcp.api.client import CodecovClient as CodecovClient
    from codecov_mcp.config import CodecovConfig as CodecovConfig

_LAZY_EXPORTS = {
    "CodecovClient": "codecov_mcp.api.client",
    "CodecovConfig": "codecov_mcp.config",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'codecov_mcp' has no attribute {name!r}")
