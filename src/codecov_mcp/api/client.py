"""CodecovClient — thin async wrapper over the Codecov v2 REST API.

Every method issues exactly one HTTP request and returns the decoded JSON
body untouched; interpreting coverage numbers is left to the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from codecov_mcp.api.errors import CodecovAPIError

if TYPE_CHECKING:
    from codecov_mcp.config import CodecovConfig

logger = logging.getLogger(__name__)

# Characters left unescaped by ECMAScript's encodeURIComponent, beyond the
# alphanumerics and ``_.-~`` that ``quote`` always keeps.
_COMPONENT_SAFE = "!*'()"


def encode_component(value: Any) -> str:
    """Percent-encode *value* for use as a single URL path segment or query value."""
    return quote(str(value), safe=_COMPONENT_SAFE)


class CodecovClient:
    """Queries coverage data from a Codecov instance.

    Usage::

        client = CodecovClient(CodecovConfig(token="..."))
        report = await client.get_repo_coverage("my-org", "my-repo", branch="main")

    The client holds only its base URL and token, so a single instance can be
    shared by any number of concurrent calls.  Pass *transport* to route
    requests through a custom :class:`httpx.AsyncBaseTransport`.
    """

    def __init__(
        self,
        config: CodecovConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = config.base_url.removesuffix("/")
        self._token = config.token
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> str | None:
        return self._token

    async def get_file_coverage(
        self,
        owner: str,
        repo: str,
        file_path: str,
        ref: str | None = None,
    ) -> Any:
        """Line-by-line coverage for one file, optionally at *ref*."""
        query = f"?ref={encode_component(ref)}" if ref else ""
        path = f"/api/v2/gh/{owner}/repos/{repo}/file_report/{encode_component(file_path)}"
        return await self._request("GET", path + query)

    async def get_commit_coverage(self, owner: str, repo: str, commit_sha: str) -> Any:
        """Coverage totals and file changes for a single commit."""
        return await self._request("GET", f"/api/v2/gh/{owner}/repos/{repo}/commits/{commit_sha}")

    async def get_repo_coverage(self, owner: str, repo: str, branch: str | None = None) -> Any:
        """Repository-level coverage, optionally for *branch*."""
        query = f"?branch={encode_component(branch)}" if branch else ""
        return await self._request("GET", f"/api/v2/gh/{owner}/repos/{repo}{query}")

    async def get_pull_request_coverage(self, owner: str, repo: str, pull_number: int) -> Any:
        """Coverage for a pull request's head against its base."""
        return await self._request("GET", f"/api/v2/gh/{owner}/repos/{repo}/pulls/{pull_number}")

    async def compare_coverage(self, owner: str, repo: str, base: str, head: str) -> Any:
        """Coverage diff between two refs (branches, tags or SHAs)."""
        query = f"?base={encode_component(base)}&head={encode_component(head)}"
        return await self._request("GET", f"/api/v2/gh/{owner}/repos/{repo}/compare/{query}")

    async def activate_repository(self, owner: str, repo: str) -> Any:
        """Activate a repository on Codecov so it starts accepting uploads."""
        return await self._request(
            "POST", f"/api/v2/gh/{owner}/repos/{repo}/activate", body={}
        )

    def _headers(self, *, has_body: bool = False) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        # Empty tokens send no credential.
        if self._token:
            headers["Authorization"] = f"bearer {self._token}"
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and decode its JSON body.

        Raises
        ------
        CodecovAPIError
            If the response status is not 2xx.
        httpx.TransportError
            Propagated unchanged when the request never completes.
        json.JSONDecodeError
            Propagated unchanged when the body is not JSON.
        """
        url = f"{self._base_url}{path}"
        logger.debug("Codecov request: %s %s", method, url)

        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.request(
                method,
                url,
                headers=self._headers(has_body=body is not None),
                json=body,
            )

        if not response.is_success:
            logger.debug("Codecov response: %s %s", response.status_code, url)
            raise CodecovAPIError(response.status_code, response.reason_phrase)

        return response.json()
