"""Exceptions raised by gitsw."""


class GitswError(Exception):
    """Base exception for gitsw."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GitError(GitswError):
    """A git invocation failed."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        exit_code: int | None = None,
        stderr: str | None = None,
    ):
        super().__init__(message)
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr or ""

    def __str__(self) -> str:
        if self.stderr.strip():
            return self.stderr.strip()
        return self.message


class GitTimeoutError(GitError):
    """Branch listing did not finish before the deadline."""


class SwitchError(GitError):
    """``git switch`` exited with a non-zero status."""
