"""Error raised when the Codecov API answers with a non-2xx status."""


class CodecovAPIError(Exception):
    """The Codecov API returned an unsuccessful HTTP status."""

    def __init__(self, status: int, reason: str = "") -> None:
        self.status = status
        self.reason = reason
        super().__init__(f"Codecov API error: {status} {reason}")
