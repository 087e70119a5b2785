"""Configuration shared by the project creator and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .naming import (
    CURRENT_DIRECTORY,
    extract_template_name,
    validate_git_url,
    validate_project_name,
)


@dataclass(slots=True)
class ProjectConfig:
    """Validated inputs and derived identifiers describing a new project.

    Attributes
    ----------
    repo_url:
        The template repository to clone.
    project_name:
        The name given by the user, or ``"."`` to create the project in place.
    display_name:
        The name substituted for the template name. Equal to
        :attr:`project_name`, or the base name of the target directory when
        working in place.
    template_name:
        The name of the template, derived from the last segment of
        :attr:`repo_url`.
    target_dir:
        The directory the template is cloned into.
    in_place:
        ``True`` when :attr:`target_dir` already exists and is used as-is.
    """

    repo_url: str
    project_name: str
    display_name: str
    template_name: str
    target_dir: Path
    in_place: bool = False

    @classmethod
    def from_arguments(
        cls,
        repo_url: str,
        project_name: str,
        *,
        base_dir: str | Path | None = None,
    ) -> "ProjectConfig":
        """Validate the command line arguments and derive the project layout.

        Raises :class:`~makemine.errors.InvalidInputError` when the URL, the
        project name or, for in-place projects, the directory name is
        rejected.
        """

        url = validate_git_url(repo_url).unwrap()
        name = validate_project_name(project_name).unwrap()

        base = Path(base_dir) if base_dir is not None else Path.cwd()
        base = base.expanduser().resolve()

        in_place = name == CURRENT_DIRECTORY
        if in_place:
            display_name = validate_project_name(base.name).unwrap()
            target = base
        else:
            display_name = name
            target = base / name

        return cls(
            repo_url=url,
            project_name=name,
            display_name=display_name,
            template_name=extract_template_name(url),
            target_dir=target,
            in_place=in_place,
        )
