"""Static resources — getting-started docs, CI example and query patterns."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from codecov_mcp.protocol.errors import UnknownResourceError
from codecov_mcp.protocol.models import ResourceContents

MARKDOWN = "text/markdown"
YAML = "text/yaml"


class ResourceSpec(BaseModel):
    """A static document served at a fixed URI."""

    model_config = ConfigDict(frozen=True)

    uri: str
    name: str
    description: str
    mime_type: str
    text: str = Field(repr=False)


_GETTING_STARTED = """\
# Getting Started with Codecov MCP Server

## Installation

```bash
pip install mcp-server-codecov
```

## Configuration

Set environment variables:
- `CODECOV_BASE_URL`: Codecov instance URL (default: https://codecov.io)
- `CODECOV_TOKEN`: Your Codecov API token

## Basic Usage

1. Configure your MCP client to use `mcp-server-codecov`
2. Use the available tools:
   - `get_repo_coverage`: Get overall repository coverage
   - `get_commit_coverage`: Get coverage for specific commit
   - `get_file_coverage`: Get line-by-line file coverage

## Example Query

"Show me the coverage for my-org/my-repo"
"""

_GITHUB_ACTIONS = """\
name: Code Coverage

on:
  push:
    branches: [ main ]
  pull_request:
    branches: [ main ]

jobs:
  test:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v3
      - uses: codecov/codecov-action@v3
        with:
          token: ${{ secrets.CODECOV_TOKEN }}
          fail_ci_if_error: true
          files: ./coverage/lcov.info
          flags: unittests
          name: codecov-umbrella
"""

_QUERY_PATTERNS = """\
# Common Codecov Query Patterns

## Repository Coverage
```
"What's the overall coverage for owner/repo?"
"Show me coverage trends for owner/repo on main branch"
```

## File-Level Coverage
```
"Get coverage for src/index.ts in owner/repo"
"Which lines are uncovered in src/utils/helper.ts?"
```

## Commit Analysis
```
"Show coverage for commit abc123 in owner/repo"
"How did coverage change in the latest commit?"
```

## Comparative Analysis
```
"Compare coverage between main and feature-branch"
"Find files with coverage below 80% in owner/repo"
```
"""

_CONFIGURATION = """\
# Configuration Guide

## Environment Variables

### CODECOV_BASE_URL (Optional)
- Default: `https://codecov.io`
- For self-hosted: `https://codecov.yourcompany.com`
- Must start with `http://` or `https://`

### CODECOV_TOKEN (Recommended)
- Required for private repositories
- Optional for public repositories
- Get your token from Codecov settings

## Example Configurations

### Public Repository (codecov.io)
```bash
# No configuration needed for public repos
```

### Private Repository (codecov.io)
```bash
export CODECOV_TOKEN="your-token-here"
```

### Self-Hosted Codecov
```bash
export CODECOV_BASE_URL="https://codecov.yourcompany.com"
export CODECOV_TOKEN="your-token-here"
```
"""

_RESOURCE_LIST: list[ResourceSpec] = [
    ResourceSpec(
        uri="codecov://docs/getting-started",
        name="Getting Started Guide",
        description="Quick start guide for using the Codecov MCP server",
        mime_type=MARKDOWN,
        text=_GETTING_STARTED,
    ),
    ResourceSpec(
        uri="codecov://examples/github-actions",
        name="GitHub Actions Integration",
        description="Example GitHub Actions workflow for Codecov",
        mime_type=YAML,
        text=_GITHUB_ACTIONS,
    ),
    ResourceSpec(
        uri="codecov://examples/query-patterns",
        name="Common Query Patterns",
        description="Examples of common Codecov queries",
        mime_type=MARKDOWN,
        text=_QUERY_PATTERNS,
    ),
    ResourceSpec(
        uri="codecov://docs/configuration",
        name="Configuration Guide",
        description="How to configure CODECOV_BASE_URL and CODECOV_TOKEN",
        mime_type=MARKDOWN,
        text=_CONFIGURATION,
    ),
]

RESOURCES: dict[str, ResourceSpec] = {res.uri: res for res in _RESOURCE_LIST}


def list_resources() -> list[ResourceSpec]:
    """Return every resource in advertised order."""
    return list(RESOURCES.values())


def read_resource(uri: str) -> ResourceContents:
    """Return the body stored at *uri*; raise :class:`UnknownResourceError` otherwise."""
    resource = RESOURCES.get(uri)
    if resource is None:
        raise UnknownResourceError(uri)
    return ResourceContents(uri=uri, mime_type=resource.mime_type, text=resource.text)
