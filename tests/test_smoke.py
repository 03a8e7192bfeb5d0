"""Smoke test to verify the package imports and exposes its entry point."""

from __future__ import annotations


def test_import() -> None:
    import codecov_mcp

    assert codecov_mcp.__version__ == "1.0.4"


def test_cli_entrypoint() -> None:
    from codecov_mcp.cli import main

    assert callable(main)


def test_lazy_exports() -> None:
    import codecov_mcp

    assert codecov_mcp.CodecovClient is not None
    assert codecov_mcp.CodecovConfig is not None


def test_unknown_attribute() -> None:
    import pytest

    import codecov_mcp

    with pytest.raises(AttributeError, match="nope"):
        codecov_mcp.nope  # noqa: B018
