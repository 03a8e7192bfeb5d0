"""Shared fixtures."""

from __future__ import annotations

import pytest

from codecov_mcp.config import CodecovConfig


@pytest.fixture
def valid_config() -> CodecovConfig:
    return CodecovConfig(base_url="https://codecov.io", token="abc")


@pytest.fixture
def invalid_config() -> CodecovConfig:
    return CodecovConfig(base_url="invalid-url")


@pytest.fixture(autouse=True)
def _clean_codecov_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CODECOV_BASE_URL", raising=False)
    monkeypatch.delenv("CODECOV_TOKEN", raising=False)
