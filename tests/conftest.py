from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from makemine.git import GitClient  # noqa: E402

TEMPLATE_FILES = {
    "package.json": '{\n  "name": "my-template",\n  "version": "0.0.1"\n}\n',
    "README.md": "# my-template\n\nStart hacking on my-template.\n",
    "LICENSE": "MIT\n",
    "logo.png": b"\x89PNG\r\n\x1a\n\xff\xfe",
    "src/index.js": "console.log('my-template');\n",
}


@dataclass(slots=True)
class FakeGitClient(GitClient):
    """Materialise ``files`` instead of cloning and record the calls made."""

    files: Mapping[str, str | bytes] = field(default_factory=dict)
    calls: list[tuple[str, Path]] = field(default_factory=list)

    def clone(self, url: str, destination: str | Path) -> None:
        destination = Path(destination)
        self.calls.append(("clone", destination))
        (destination / ".git").mkdir()
        (destination / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
        for relative, content in self.files.items():
            path = destination / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")

    def init(self, directory: str | Path) -> None:
        directory = Path(directory)
        self.calls.append(("init", directory))
        (directory / ".git").mkdir()


@pytest.fixture()
def fake_git() -> FakeGitClient:
    """A git client that writes a small JavaScript template instead of cloning."""

    return FakeGitClient(files=dict(TEMPLATE_FILES))
