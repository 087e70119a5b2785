"""Create new projects from template repositories.

The package validates the requested project name and repository URL, clones
the template with git, drops its history and replaces the template's name with
the new project name in the top-level files. Everything is usable both
programmatically and via the ``make-mine`` command line interface.
"""

from __future__ import annotations

from .config import ProjectConfig
from .errors import GitCommandError, InvalidInputError, MakeMineError
from .git import GitClient
from .naming import extract_template_name, validate_git_url, validate_project_name
from .rewrite import rewrite_directory, rewrite_file, rewritten_files
from .scaffold import ProjectCreator, ScaffoldResult
from .schema import Accepted, ErrorKind, Rejected, ValidationResult

__all__ = [
    "Accepted",
    "ErrorKind",
    "GitClient",
    "GitCommandError",
    "InvalidInputError",
    "MakeMineError",
    "ProjectConfig",
    "ProjectCreator",
    "Rejected",
    "ScaffoldResult",
    "ValidationResult",
    "extract_template_name",
    "rewrite_directory",
    "rewrite_file",
    "rewritten_files",
    "validate_git_url",
    "validate_project_name",
]

__version__ = "1.0.0"
