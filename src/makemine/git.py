"""Thin wrapper around the ``git`` executable."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .errors import GitCommandError

__all__ = ["GitClient"]


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class GitClient:
    """Run the git commands needed to turn a template clone into a new repository."""

    executable: str = "git"

    def _run(self, args: Sequence[str], cwd: Path, *, capture: bool) -> None:
        command = [self.executable, *args]
        LOGGER.debug("Running %s in %s", " ".join(command), cwd)
        try:
            subprocess.run(
                command,
                cwd=cwd,
                check=True,
                capture_output=capture,
                text=True,
            )
        except FileNotFoundError as exc:
            raise GitCommandError(command, None, str(exc)) from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() if capture else ""
            raise GitCommandError(command, exc.returncode, detail) from exc

    def clone(self, url: str, destination: str | Path) -> None:
        """Clone ``url`` into the existing ``destination`` directory."""

        # Progress is streamed straight to the terminal.
        self._run(["clone", url, "."], Path(destination), capture=False)

    def strip_history(self, directory: str | Path) -> None:
        """Delete the ``.git`` metadata directory of ``directory`` if present."""

        git_dir = Path(directory) / ".git"
        if git_dir.exists():
            LOGGER.debug("Removing %s", git_dir)
            shutil.rmtree(git_dir)

    def init(self, directory: str | Path) -> None:
        """Create a fresh, empty repository in ``directory``."""

        self._run(["init"], Path(directory), capture=True)
