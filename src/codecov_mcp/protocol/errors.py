"""Lookup errors for the tool, prompt and resource tables."""


class CodecovMCPError(Exception):
    """Base error for MCP-facing lookups."""


class UnknownToolError(CodecovMCPError):
    """No tool is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class UnknownPromptError(CodecovMCPError):
    """No prompt template is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown prompt: {name}")


class PromptArgumentsError(CodecovMCPError):
    """A prompt was requested without any arguments."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Arguments required for prompt: {name}")


class UnknownResourceError(CodecovMCPError):
    """No static resource lives at the requested URI."""

    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"Unknown resource: {uri}")
