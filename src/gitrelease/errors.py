"""Exceptions raised by gitrelease."""

from typing import Optional


class GitReleaseError(Exception):
    """Base class for all gitrelease errors."""


class InvocationError(GitReleaseError):
    """git exited non-zero or could not be started.

    ``output`` holds the combined stdout+stderr of the failed process.
    ``status`` is ``None`` when the process never started.
    """

    def __init__(self, command: list[str], status: Optional[int], output: str) -> None:
        self.command = list(command)
        self.status = status
        self.output = output
        super().__init__(self._describe())

    def _describe(self) -> str:
        cmd = " ".join(self.command)
        if self.status is None:
            return f"could not run '{cmd}': {self.output.strip()}"
        return f"'{cmd}' exited with status {self.status}: {self.output.strip()}"


class ParseError(GitReleaseError):
    """git succeeded but its output had an unexpected shape."""

    def __init__(self, message: str, output: str) -> None:
        self.output = output
        super().__init__(f"{message}: {output.strip()!r}")
