"""Exception types raised by the project creator and its collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .schema import ErrorKind, Rejected


class MakeMineError(RuntimeError):
    """Base class for errors reported to the user by the command line."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidInputError(MakeMineError, ValueError):
    """Raised when a rejected validation result is unwrapped."""

    def __init__(self, rejection: "Rejected") -> None:
        super().__init__(rejection.message)
        self.rejection = rejection

    @property
    def kind(self) -> "ErrorKind":
        return self.rejection.kind


class GitCommandError(MakeMineError):
    """Raised when the git executable fails or cannot be started."""

    def __init__(self, command: Sequence[str], returncode: int | None, detail: str = "") -> None:
        rendered = " ".join(command)
        if returncode is None:
            message = f"could not run '{rendered}'"
        else:
            message = f"'{rendered}' exited with status {returncode}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.command = tuple(command)
        self.returncode = returncode
