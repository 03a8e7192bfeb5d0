"""Tests for CodecovClient request building and response handling."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from codecov_mcp.api.client import CodecovClient, encode_component
from codecov_mcp.api.errors import CodecovAPIError
from codecov_mcp.config import CodecovConfig


def _client(
    handler: Callable[[httpx.Request], httpx.Response] | None = None,
    *,
    base_url: str = "https://codecov.io",
    token: str | None = None,
) -> tuple[CodecovClient, list[httpx.Request]]:
    """Build a client whose requests are recorded and answered by *handler*."""
    seen: list[httpx.Request] = []

    def _handle(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if handler is not None:
            return handler(request)
        return httpx.Response(200, json={"ok": True})

    config = CodecovConfig(base_url=base_url, token=token)
    return CodecovClient(config, transport=httpx.MockTransport(_handle)), seen


def _path(request: httpx.Request) -> str:
    return request.url.raw_path.decode("ascii")


class TestEncodeComponent:
    def test_slashes_and_spaces(self) -> None:
        assert encode_component("src/my file.ts") == "src%2Fmy%20file.ts"

    def test_keeps_unreserved(self) -> None:
        assert encode_component("a-b_c.d~e!*'()") == "a-b_c.d~e!*'()"

    def test_non_ascii(self) -> None:
        assert encode_component("é") == "%C3%A9"

    def test_numbers_are_stringified(self) -> None:
        assert encode_component(42) == "42"


class TestConstruction:
    def test_strips_one_trailing_slash(self) -> None:
        client, _ = _client(base_url="https://codecov.example.com/")
        assert client.base_url == "https://codecov.example.com"

    def test_keeps_url_without_slash(self) -> None:
        client, _ = _client(base_url="https://codecov.io")
        assert client.base_url == "https://codecov.io"

    def test_exposes_token(self) -> None:
        client, _ = _client(token="abc")
        assert client.token == "abc"


class TestHeaders:
    async def test_bearer_token(self) -> None:
        client, seen = _client(token="abc")
        await client.get_repo_coverage("o", "r")
        assert seen[0].headers["Authorization"] == "bearer abc"
        assert seen[0].headers["Accept"] == "application/json"

    async def test_no_token(self) -> None:
        client, seen = _client(token=None)
        await client.get_repo_coverage("o", "r")
        assert "Authorization" not in seen[0].headers

    async def test_empty_token_sends_no_header(self) -> None:
        client, seen = _client(token="")
        await client.get_repo_coverage("o", "r")
        assert "Authorization" not in seen[0].headers

    async def test_get_has_no_content_type(self) -> None:
        client, seen = _client()
        await client.get_commit_coverage("o", "r", "abc123")
        assert "Content-Type" not in seen[0].headers


class TestFileCoverage:
    async def test_encodes_file_path(self) -> None:
        client, seen = _client()
        await client.get_file_coverage("owner", "repo", "a/b c.ts")
        assert _path(seen[0]) == "/api/v2/gh/owner/repos/repo/file_report/a%2Fb%20c.ts"
        assert seen[0].method == "GET"

    async def test_ref_query(self) -> None:
        client, seen = _client()
        await client.get_file_coverage("owner", "repo", "src/index.ts", "feature/x")
        assert _path(seen[0]) == (
            "/api/v2/gh/owner/repos/repo/file_report/src%2Findex.ts?ref=feature%2Fx"
        )

    @pytest.mark.parametrize("ref", [None, ""])
    async def test_no_ref_no_query(self, ref: str | None) -> None:
        client, seen = _client()
        await client.get_file_coverage("owner", "repo", "src/index.ts", ref)
        assert "?" not in _path(seen[0])

    async def test_returns_payload(self) -> None:
        payload = {"totals": {"coverage": 85.5}, "line_coverage": [[1, 0]]}
        client, _ = _client(lambda request: httpx.Response(200, json=payload))
        assert await client.get_file_coverage("o", "r", "f.py") == payload


class TestCommitCoverage:
    async def test_path(self) -> None:
        client, seen = _client(base_url="https://codecov.example.com/")
        await client.get_commit_coverage("acme", "widgets", "abc123")
        assert str(seen[0].url) == (
            "https://codecov.example.com/api/v2/gh/acme/repos/widgets/commits/abc123"
        )


class TestRepoCoverage:
    async def test_without_branch(self) -> None:
        client, seen = _client()
        await client.get_repo_coverage("acme", "widgets")
        assert str(seen[0].url) == "https://codecov.io/api/v2/gh/acme/repos/widgets"

    async def test_branch_is_encoded(self) -> None:
        client, seen = _client()
        await client.get_repo_coverage("acme", "widgets", "release/1.0")
        assert _path(seen[0]) == "/api/v2/gh/acme/repos/widgets?branch=release%2F1.0"


class TestPullRequestCoverage:
    async def test_path(self) -> None:
        client, seen = _client()
        await client.get_pull_request_coverage("acme", "widgets", 42)
        assert _path(seen[0]) == "/api/v2/gh/acme/repos/widgets/pulls/42"


class TestCompareCoverage:
    async def test_query(self) -> None:
        client, seen = _client()
        await client.compare_coverage("acme", "widgets", "main", "feature/x")
        assert _path(seen[0]) == (
            "/api/v2/gh/acme/repos/widgets/compare/?base=main&head=feature%2Fx"
        )


class TestActivateRepository:
    async def test_posts_empty_object(self) -> None:
        client, seen = _client(token="abc")
        await client.activate_repository("acme", "widgets")
        request = seen[0]
        assert request.method == "POST"
        assert _path(request) == "/api/v2/gh/acme/repos/widgets/activate"
        assert json.loads(request.content) == {}
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Authorization"] == "bearer abc"


class TestErrors:
    @pytest.mark.parametrize(
        ("status", "message"),
        [
            (404, "Codecov API error: 404 Not Found"),
            (401, "Codecov API error: 401 Unauthorized"),
            (500, "Codecov API error: 500 Internal Server Error"),
        ],
    )
    async def test_non_success_status(self, status: int, message: str) -> None:
        client, _ = _client(lambda request: httpx.Response(status, json={"detail": "x"}))
        with pytest.raises(CodecovAPIError) as exc_info:
            await client.get_repo_coverage("o", "r")
        assert str(exc_info.value) == message
        assert exc_info.value.status == status

    async def test_body_is_not_read_on_error(self) -> None:
        client, _ = _client(lambda request: httpx.Response(502, content=b"<html>bad</html>"))
        with pytest.raises(CodecovAPIError, match="502 Bad Gateway"):
            await client.get_commit_coverage("o", "r", "sha")

    async def test_transport_error_propagates(self) -> None:
        def _fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = _client(_fail)
        with pytest.raises(httpx.ConnectError, match="connection refused"):
            await client.get_repo_coverage("o", "r")

    async def test_invalid_json_propagates(self) -> None:
        client, _ = _client(lambda request: httpx.Response(200, content=b"not json"))
        with pytest.raises(json.JSONDecodeError):
            await client.get_repo_coverage("o", "r")

    async def test_json_array_and_scalar_pass_through(self) -> None:
        payloads: list[Any] = [[1, 2, 3], "text", 0]
        for payload in payloads:
            client, _ = _client(lambda request, p=payload: httpx.Response(200, json=p))
            assert await client.get_repo_coverage("o", "r") == payload
