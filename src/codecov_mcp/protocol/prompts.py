"""Prompt templates — canned coverage-analysis requests for the assistant."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from codecov_mcp.protocol.errors import PromptArgumentsError, UnknownPromptError
from codecov_mcp.protocol.models import PromptMessage, PromptResult, TextContent

DEFAULT_THRESHOLD = 80

# Called as ``render(arguments)`` and returns the message text.
PromptRenderer = Callable[..., str]


class PromptArgumentSpec(BaseModel):
    """One named argument of a prompt."""

    name: str
    description: str = ""
    required: bool = True


class PromptSpec(BaseModel):
    """A prompt template with its advertised metadata."""

    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    description: str
    result_description: str
    arguments: list[PromptArgumentSpec] = []
    render: PromptRenderer = Field(exclude=True)


def _render_analyze_coverage(args: Mapping[str, Any]) -> str:
    branch = args.get("branch")
    on_branch = f" on branch {branch}" if branch else ""
    return (
        f"Analyze the code coverage for {args.get('owner')}/{args.get('repo')}{on_branch}.\n"
        "\n"
        "Please provide:\n"
        "1. Overall coverage percentage\n"
        "2. Coverage trends\n"
        "3. Areas needing attention\n"
        "4. Recommendations for improvement\n"
        "\n"
        "Use the get_repo_coverage tool to retrieve the data."
    )


def _render_compare_commits(args: Mapping[str, Any]) -> str:
    return (
        f"Compare code coverage between commits {args.get('base_commit')} and "
        f"{args.get('head_commit')} for {args.get('owner')}/{args.get('repo')}.\n"
        "\n"
        "Analyze:\n"
        "1. Coverage change (increase/decrease)\n"
        "2. Newly covered files\n"
        "3. Files with reduced coverage\n"
        "4. Impact assessment\n"
        "\n"
        "Use the get_commit_coverage tool for both commits."
    )


def _render_find_low_coverage(args: Mapping[str, Any]) -> str:
    threshold = args.get("threshold") or DEFAULT_THRESHOLD
    return (
        f"Identify all files in {args.get('owner')}/{args.get('repo')} "
        f"with coverage below {threshold}%.\n"
        "\n"
        "For each file:\n"
        "1. Current coverage percentage\n"
        "2. Number of uncovered lines\n"
        "3. Priority for improvement\n"
        "4. Suggested testing approach\n"
        "\n"
        "Use get_repo_coverage and get_file_coverage tools."
    )


_PROMPT_LIST: list[PromptSpec] = [
    PromptSpec(
        name="analyze_coverage",
        title="Analyze Repository Coverage",
        description="Get comprehensive coverage analysis for a repository",
        result_description="Analyze coverage for repository",
        arguments=[
            PromptArgumentSpec(
                name="owner", description="Repository owner (username or organization)"
            ),
            PromptArgumentSpec(name="repo", description="Repository name"),
            PromptArgumentSpec(
                name="branch",
                description="Branch name (optional, defaults to default branch)",
                required=False,
            ),
        ],
        render=_render_analyze_coverage,
    ),
    PromptSpec(
        name="compare_commits",
        title="Compare Coverage Between Commits",
        description="Compare coverage changes between two commits",
        result_description="Compare coverage between commits",
        arguments=[
            PromptArgumentSpec(name="owner", description="Repository owner"),
            PromptArgumentSpec(name="repo", description="Repository name"),
            PromptArgumentSpec(name="base_commit", description="Base commit SHA"),
            PromptArgumentSpec(name="head_commit", description="Head commit SHA"),
        ],
        render=_render_compare_commits,
    ),
    PromptSpec(
        name="find_low_coverage",
        title="Find Low Coverage Files",
        description="Identify files with coverage below a threshold",
        result_description="Find files with low coverage",
        arguments=[
            PromptArgumentSpec(name="owner", description="Repository owner"),
            PromptArgumentSpec(name="repo", description="Repository name"),
            PromptArgumentSpec(
                name="threshold",
                description=f"Coverage threshold percentage (default: {DEFAULT_THRESHOLD})",
                required=False,
            ),
        ],
        render=_render_find_low_coverage,
    ),
]

PROMPTS: dict[str, PromptSpec] = {prompt.name: prompt for prompt in _PROMPT_LIST}


def list_prompts() -> list[PromptSpec]:
    """Return every prompt in advertised order."""
    return list(PROMPTS.values())


def get_prompt(name: str, arguments: Mapping[str, Any] | None) -> PromptResult:
    """Expand the prompt *name* with *arguments*.

    Raises
    ------
    UnknownPromptError
        If no prompt is registered under *name*.
    PromptArgumentsError
        If *arguments* is missing or empty.
    """
    prompt = PROMPTS.get(name)
    if prompt is None:
        raise UnknownPromptError(name)
    if not arguments:
        raise PromptArgumentsError(name)

    text = prompt.render(arguments)
    return PromptResult(
        description=prompt.result_description,
        messages=[PromptMessage(role="user", content=TextContent(text=text))],
    )
