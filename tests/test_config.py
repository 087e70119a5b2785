from __future__ import annotations

from pathlib import Path

import pytest

from makemine.config import ProjectConfig
from makemine.errors import InvalidInputError
from makemine.schema import ErrorKind


def test_from_arguments_derives_expected_fields(tmp_path: Path):
    config = ProjectConfig.from_arguments(
        "https://github.com/user/my-template.git", "cool-app", base_dir=tmp_path
    )
    assert config.repo_url == "https://github.com/user/my-template.git"
    assert config.project_name == "cool-app"
    assert config.display_name == "cool-app"
    assert config.template_name == "my-template"
    assert config.target_dir == tmp_path.resolve() / "cool-app"
    assert config.in_place is False


def test_from_arguments_uses_directory_name_in_place(tmp_path: Path):
    base = tmp_path / "my-app"
    base.mkdir()
    config = ProjectConfig.from_arguments("git@github.com:user/starter.git", ".", base_dir=base)
    assert config.in_place is True
    assert config.display_name == "my-app"
    assert config.target_dir == base.resolve()
    assert config.template_name == "starter"


def test_from_arguments_defaults_to_current_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    base = tmp_path / "here"
    base.mkdir()
    monkeypatch.chdir(base)
    config = ProjectConfig.from_arguments("https://github.com/user/starter", ".")
    assert config.display_name == "here"


def test_from_arguments_rejects_invalid_directory_name_in_place(tmp_path: Path):
    base = tmp_path / "my app"
    base.mkdir()
    with pytest.raises(InvalidInputError) as excinfo:
        ProjectConfig.from_arguments("https://github.com/user/starter.git", ".", base_dir=base)
    assert excinfo.value.kind is ErrorKind.INVALID_CHARACTERS


@pytest.mark.parametrize(
    "url, name, kind",
    [
        ("github.com/user/repo", "cool-app", ErrorKind.INVALID_URL_FORMAT),
        ("https://github.com/user/repo.git", "<project-name>", ErrorKind.PLACEHOLDER_NAME),
        ("https://github.com/user/repo.git", "TEMPLATE", ErrorKind.RESERVED_NAME),
    ],
)
def test_from_arguments_rejects_invalid_input(tmp_path: Path, url, name, kind):
    with pytest.raises(InvalidInputError) as excinfo:
        ProjectConfig.from_arguments(url, name, base_dir=tmp_path)
    assert excinfo.value.kind is kind


def test_url_is_validated_before_name(tmp_path: Path):
    with pytest.raises(InvalidInputError) as excinfo:
        ProjectConfig.from_arguments("not-a-url", "TEMPLATE", base_dir=tmp_path)
    assert excinfo.value.kind is ErrorKind.INVALID_URL_FORMAT
