# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Unit tests for configuration models and discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from codereg.config import (
    ConfigModel,
    ConfigReadError,
    InvalidConfigFileError,
    load_config,
    load_config_with_metadata,
)
from codereg.config.loader import resolve_project_root
from codereg.config.models import config_from_model
from codereg.registry import CodeRange

pytestmark = pytest.mark.unit


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(content, encoding="utf-8")
    return path


def test_model_converts_to_runtime_config() -> None:
    model = ConfigModel.model_validate(
        {
            "catalog": "  errors.json  ",
            "ranges": {"compiler": {"min": 1001, "max": 1999}},
            "marker": {"path": "MARKER.txt", "category": "compiler", "floor": 1000},
        },
    )
    config = config_from_model(model)
    assert config.catalog == "errors.json"
    assert config.ranges.get("compiler") == CodeRange(min=1001, max=1999)
    assert config.marker.path == Path("MARKER.txt")
    assert config.marker.category == "compiler"
    assert config.marker.floor == 1000


def test_load_config_defaults_when_nothing_found(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _ = (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)
    loaded = load_config_with_metadata()
    assert loaded.path is None
    assert loaded.config.catalog is None
    assert len(loaded.config.ranges) == 0
    assert loaded.config.marker.path is None


def test_load_config_resolves_paths_against_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = _write(
        tmp_path / "codereg.toml",
        'catalog = "data/errors.json"\n[marker]\npath = "data/MARKER.txt"\n[ranges.compiler]\nmin = 1001\nmax = 1999\n',
    )
    nested = tmp_path / "pkg" / "sub"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    loaded = load_config_with_metadata()
    assert loaded.path == config_path.resolve()
    assert loaded.config.catalog == str((tmp_path / "data" / "errors.json").resolve())
    assert loaded.config.marker.path == (tmp_path / "data" / "MARKER.txt").resolve()


def test_import_reference_catalog_is_not_resolved(tmp_path: Path) -> None:
    config_path = _write(tmp_path / "codereg.toml", 'catalog = "myapp.errors:ERRORS"\n')
    assert load_config(config_path).catalog == "myapp.errors:ERRORS"


def test_pyproject_tool_section(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _ = _write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "demo"\n\n[tool.codereg]\ncatalog = "errors.toml"\n[tool.codereg.ranges.compiler]\nmin = 1\nmax = 9\n',
    )
    monkeypatch.chdir(tmp_path)
    config = load_config()
    assert config.catalog == str((tmp_path / "errors.toml").resolve())
    assert config.ranges.get("compiler") == CodeRange(min=1, max=9)


def test_codereg_toml_wins_over_pyproject(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _ = _write(tmp_path / "pyproject.toml", '[tool.codereg]\ncatalog = "pyproject.json"\n')
    _ = _write(tmp_path / "codereg.toml", 'catalog = "codereg.json"\n')
    monkeypatch.chdir(tmp_path)
    assert load_config().catalog == str((tmp_path / "codereg.json").resolve())


def test_pyproject_without_section_is_ignored(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _ = _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')
    monkeypatch.chdir(tmp_path)
    assert load_config_with_metadata().path is None


def test_explicit_pyproject_without_section_is_invalid(tmp_path: Path) -> None:
    path = _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')
    with pytest.raises(InvalidConfigFileError, match=r"\[tool.codereg\]"):
        _ = load_config(path)


def test_explicit_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigReadError):
        _ = load_config(tmp_path / "absent.toml")


def test_malformed_toml_raises_read_error(tmp_path: Path) -> None:
    path = _write(tmp_path / "codereg.toml", "catalog = \n")
    with pytest.raises(ConfigReadError):
        _ = load_config(path)


@pytest.mark.parametrize(
    "content",
    [
        "[ranges.compiler]\nmin = 1999\nmax = 1001\n",
        '[ranges.compiler]\nmin = "1001"\nmax = 1999\n',
        "[ranges.compiler]\nmin = 1001\nmax = 1999\nstep = 1\n",
        "unknown_key = true\n",
        "config_version = 3\n",
        'catalog = "errors.yaml-v2"\n',
    ],
)
def test_invalid_configuration_is_rejected(tmp_path: Path, content: str) -> None:
    path = _write(tmp_path / "codereg.toml", content)
    with pytest.raises(InvalidConfigFileError):
        _ = load_config(path)


def test_resolve_project_root_walks_up(tmp_path: Path) -> None:
    _ = (tmp_path / ".git").mkdir()
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert resolve_project_root(nested) == tmp_path.resolve()
