from typing import Optional


class TokenRankError(Exception):
    """Flexible CLI exception carrying a machine code and an exit status."""

    exit_code: int = 1

    def __init__(
        self, code: str, message: Optional[str] = None, exit_code: Optional[int] = None
    ):
        self.code = code
        self.message = message or "An error occurred"
        if exit_code is not None:
            self.exit_code = exit_code
        super().__init__(f"{code}: {self.message}")


class ArgumentError(TokenRankError):
    """Bad or missing command-line arguments."""

    exit_code = 2


class InputReadError(TokenRankError):
    """Input file missing, unreadable or not text."""


class OutputWriteError(TokenRankError):
    """Report or plot destination cannot be written."""


class StopwordResourceError(TokenRankError):
    """The configured stopword list is not installed."""
