"""Create a new project from a template repository."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .config import ProjectConfig
from .git import GitClient
from .rewrite import rewritten_files

__all__ = ["ProjectCreator", "ScaffoldResult"]


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ScaffoldResult:
    """Outcome of :meth:`ProjectCreator.create`."""

    config: ProjectConfig
    modified_files: list[Path] = field(default_factory=list)

    @property
    def modified_count(self) -> int:
        return len(self.modified_files)


@dataclass(slots=True)
class ProjectCreator:
    """Clone a template, reset its history and rename it."""

    git: GitClient
    literal: bool
    progress: Callable[[str], None]

    def __init__(
        self,
        git: GitClient | None = None,
        *,
        literal: bool = False,
        progress: Callable[[str], None] | None = None,
    ) -> None:
        self.git = git or GitClient()
        self.literal = literal
        self.progress = progress or LOGGER.info

    def create(self, config: ProjectConfig) -> ScaffoldResult:
        """Create the project described by ``config``.

        Raises :class:`FileExistsError` when the target directory already
        exists for a project that is not created in place, and
        :class:`~makemine.errors.GitCommandError` when git fails.
        """

        target = config.target_dir
        if not config.in_place:
            target.mkdir(parents=True)

        self.progress("Cloning template repository...")
        self.git.clone(config.repo_url, target)

        self.progress("Cleaning up git history...")
        self.git.strip_history(target)
        self.git.init(target)

        self.progress("Updating project files...")
        modified = rewritten_files(
            target,
            config.template_name,
            config.display_name,
            literal=self.literal,
        )
        return ScaffoldResult(config=config, modified_files=modified)
