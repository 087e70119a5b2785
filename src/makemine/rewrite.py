"""Replace the template name inside the top-level files of a project."""

from __future__ import annotations

import logging
import re
from pathlib import Path

__all__ = ["rewrite_directory", "rewrite_file", "rewritten_files"]


LOGGER = logging.getLogger(__name__)


def _compile_token(token: str, literal: bool) -> re.Pattern[str]:
    # Without ``literal`` the token is used as a regular expression as-is, so
    # characters such as ``.`` or ``+`` keep their pattern meaning.
    return re.compile(re.escape(token) if literal else token)


def rewrite_file(
    path: str | Path,
    old_token: str,
    new_token: str,
    *,
    literal: bool = False,
) -> bool:
    """Replace every match of ``old_token`` in ``path`` with ``new_token``.

    The file is decoded as UTF-8 and only written back when its content
    changed. Files that cannot be read, decoded or written are skipped with a
    warning instead of raising, so a single binary or unreadable file never
    aborts a project rewrite.

    Returns ``True`` when the file was modified.
    """

    path = Path(path)
    try:
        pattern = _compile_token(old_token, literal)
        original = path.read_bytes().decode("utf-8")
        updated = pattern.sub(lambda _match: new_token, original)
        if updated == original:
            return False
        path.write_bytes(updated.encode("utf-8"))
    except (OSError, UnicodeDecodeError, re.error) as exc:
        LOGGER.warning("Skipping %s: %s", path, exc)
        return False

    return True


def rewritten_files(
    directory: str | Path,
    old_token: str,
    new_token: str,
    *,
    literal: bool = False,
) -> list[Path]:
    """Rewrite the regular files directly inside ``directory``.

    Sub-directories (including ``.git``) and symbolic links are left alone.
    Returns the files that were modified, in name order.
    """

    directory = Path(directory)
    modified: list[Path] = []
    for entry in sorted(directory.iterdir()):
        if entry.is_symlink() or not entry.is_file():
            continue
        if rewrite_file(entry, old_token, new_token, literal=literal):
            LOGGER.info("Updated %s", entry.name)
            modified.append(entry)
    return modified


def rewrite_directory(
    directory: str | Path,
    old_token: str,
    new_token: str,
    *,
    literal: bool = False,
) -> int:
    """Return how many top-level files of ``directory`` were rewritten."""

    return len(rewritten_files(directory, old_token, new_token, literal=literal))
