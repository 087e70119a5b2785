"""Validation of project names and repository URLs."""

from __future__ import annotations

import re

from .schema import Accepted, ErrorKind, Rejected, ValidationResult

__all__ = [
    "CURRENT_DIRECTORY",
    "DEFAULT_TEMPLATE_NAME",
    "MAX_NAME_LENGTH",
    "RESERVED_NAME",
    "extract_template_name",
    "validate_git_url",
    "validate_project_name",
]


CURRENT_DIRECTORY = "."
RESERVED_NAME = "TEMPLATE"
MAX_NAME_LENGTH = 214
DEFAULT_TEMPLATE_NAME = "template-project"

_NAME_PATTERN = re.compile(r"[a-zA-Z0-9\-_.]+")
_NAME_START = re.compile(r"[a-zA-Z0-9]")
_PLACEHOLDER = re.compile(r"<[^>]+>")
_GIT_URL = re.compile(r"(https?://|git@)([^\s]+)(\.git)?")
_TEMPLATE_SEGMENT = re.compile(r"/([^/]+?)(\.git)?$")

_USAGE_EXAMPLE = "make-mine https://github.com/user/repo.git my-project-name"


def validate_project_name(name: str, *, reserved: str = RESERVED_NAME) -> ValidationResult:
    """Check ``name`` against the project naming rules.

    The rules are applied in a fixed order and the first one that fails
    determines the returned :class:`Rejected` kind. ``"."`` always passes as it
    stands for the current directory.

    Parameters
    ----------
    name:
        The proposed project name.
    reserved:
        A token that may never be used as a project name.
    """

    if name == CURRENT_DIRECTORY:
        return Accepted(value=name)

    if _PLACEHOLDER.fullmatch(name):
        return Rejected(
            kind=ErrorKind.PLACEHOLDER_NAME,
            value=name,
            message=(
                f'"{name}" is a placeholder. Please replace it with your actual project name.\n'
                f"Example: {_USAGE_EXAMPLE}"
            ),
        )

    if name == reserved:
        return Rejected(
            kind=ErrorKind.RESERVED_NAME,
            value=name,
            message=f'"{reserved}" is a reserved token and cannot be used as a project name',
        )

    if not _NAME_PATTERN.fullmatch(name):
        return Rejected(
            kind=ErrorKind.INVALID_CHARACTERS,
            value=name,
            message=(
                "Invalid project name. Names can only contain letters, numbers, hyphens, "
                "underscores and dots.\n"
                'Use hyphens instead of spaces: "my-new-project" instead of "my new project"'
            ),
        )

    if not _NAME_START.match(name):
        return Rejected(
            kind=ErrorKind.INVALID_START,
            value=name,
            message="Project name must start with a letter or number",
        )

    if len(name) > MAX_NAME_LENGTH:
        return Rejected(
            kind=ErrorKind.TOO_LONG,
            value=name,
            message=f"Project name is too long (max {MAX_NAME_LENGTH} characters)",
        )

    return Accepted(value=name)


def validate_git_url(url: str) -> ValidationResult:
    """Accept ``http(s)://`` and ``git@`` repository URLs without whitespace."""

    if _GIT_URL.fullmatch(url):
        return Accepted(value=url)

    return Rejected(
        kind=ErrorKind.INVALID_URL_FORMAT,
        value=url,
        message=(
            "Invalid repository URL format. Expected format: "
            "https://github.com/user/repo.git or git@github.com:user/repo.git"
        ),
    )


def extract_template_name(url: str) -> str:
    """Return the last path segment of ``url`` without a ``.git`` suffix."""

    match = _TEMPLATE_SEGMENT.search(url)
    if match is None:
        return DEFAULT_TEMPLATE_NAME
    return match.group(1)
