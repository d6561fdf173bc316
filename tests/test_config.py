"""Tests for ProjectConfig (tablescaffold.config).

Tests cover:
- Default values
- Dialect and pk strategy validation
- JSON save / load round trip (project_root excluded from the file)
- from_env with and without environment variables
- from_project preferring the config file over the environment
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tablescaffold.config import CONFIG_FILE_NAME, ProjectConfig
from tablescaffold.errors import UnknownDialectError, UnknownPkStrategyError
from tablescaffold.pk_strategy import PkStrategy


pytestmark = pytest.mark.unit

ENV_VARS = ("SCAFFOLD_DIALECT", "SCAFFOLD_PK_STRATEGY", "SCAFFOLD_PLURALIZE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_defaults(self):
        config = ProjectConfig()
        assert config.dialect == "sqlite"
        assert config.pk_strategy is PkStrategy.UUIDV7
        assert config.pluralize_enabled is True
        assert config.config_path == Path(".") / CONFIG_FILE_NAME

    def test_dialect_strategy(self):
        assert ProjectConfig(dialect="mysql").dialect_strategy().table_constructor == "mysqlTable"


class TestValidation:
    def test_unknown_dialect(self):
        with pytest.raises(UnknownDialectError):
            ProjectConfig(dialect="oracle")

    def test_unknown_pk_strategy(self):
        with pytest.raises(UnknownPkStrategyError):
            ProjectConfig(pk_strategy="serial")

    def test_pk_strategy_from_string(self):
        assert ProjectConfig(pk_strategy="nanoid").pk_strategy is PkStrategy.NANOID


class TestSaveLoad:
    def test_round_trip(self, tmp_path: Path):
        config = ProjectConfig(
            dialect="postgresql",
            pk_strategy="auto_increment",
            pluralize_enabled=False,
            project_root=tmp_path,
        )
        path = config.save()
        assert path == tmp_path / CONFIG_FILE_NAME

        loaded = ProjectConfig.load(path)
        assert loaded.dialect == "postgresql"
        assert loaded.pk_strategy is PkStrategy.AUTO_INCREMENT
        assert loaded.pluralize_enabled is False
        assert loaded.project_root == tmp_path

    def test_file_excludes_paths(self, tmp_path: Path):
        path = ProjectConfig(project_root=tmp_path).save()
        data = json.loads(path.read_text())
        assert data == {"dialect": "sqlite", "pk_strategy": "uuidv7", "pluralize_enabled": True}

    def test_save_custom_path(self, tmp_path: Path):
        target = tmp_path / "nested" / "settings.json"
        assert ProjectConfig().save(target) == target
        assert target.is_file()

    def test_load_invalid_dialect(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILE_NAME
        path.write_text('{"dialect": "oracle"}')
        with pytest.raises(UnknownDialectError):
            ProjectConfig.load(path)


class TestFromEnv:
    def test_defaults(self):
        config = ProjectConfig.from_env()
        assert config.dialect == "sqlite"
        assert config.pluralize_enabled is True

    def test_reads_env(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SCAFFOLD_DIALECT", "mysql")
        monkeypatch.setenv("SCAFFOLD_PK_STRATEGY", "cuid2")
        monkeypatch.setenv("SCAFFOLD_PLURALIZE", "false")
        config = ProjectConfig.from_env(tmp_path)
        assert config.dialect == "mysql"
        assert config.pk_strategy is PkStrategy.CUID2
        assert config.pluralize_enabled is False
        assert config.project_root == tmp_path

    @pytest.mark.parametrize("value", ["0", "no", "OFF", " False "])
    def test_pluralize_false_values(self, monkeypatch, value):
        monkeypatch.setenv("SCAFFOLD_PLURALIZE", value)
        assert ProjectConfig.from_env().pluralize_enabled is False


class TestFromProject:
    def test_prefers_file(self, monkeypatch, tmp_path: Path):
        ProjectConfig(dialect="postgresql", project_root=tmp_path).save()
        monkeypatch.setenv("SCAFFOLD_DIALECT", "mysql")
        assert ProjectConfig.from_project(tmp_path).dialect == "postgresql"

    def test_falls_back_to_env(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("SCAFFOLD_DIALECT", "mysql")
        config = ProjectConfig.from_project(tmp_path)
        assert config.dialect == "mysql"
        assert config.project_root == tmp_path
