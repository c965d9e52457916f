"""Tests for presentation/pytest_plugin/fixtures.py."""

from pathlib import Path

import pytest

from classdeps.presentation.pytest_plugin.fixtures import CLASSPATH_INI, classpath_from_ini


class _FakeConfig:
    """Minimal stand-in for pytest.Config."""

    def __init__(self, value: object, rootpath: Path) -> None:
        self._value = value
        self.rootpath = rootpath

    def getini(self, name: str) -> object:
        assert name == CLASSPATH_INI
        return self._value


class TestClasspathFromIni:
    """Tests for classpath_from_ini()."""

    def test_paths_list(self, tmp_path: Path) -> None:
        config = _FakeConfig([tmp_path / "classes", tmp_path / "lib.jar"], tmp_path)
        result = classpath_from_ini(config)  # type: ignore[arg-type]
        assert result.entries == (tmp_path / "classes", tmp_path / "lib.jar")

    def test_relative_entries_resolved_against_root(self, tmp_path: Path) -> None:
        config = _FakeConfig(["build/classes"], tmp_path)
        result = classpath_from_ini(config)  # type: ignore[arg-type]
        assert result.entries == (tmp_path / "build" / "classes",)

    def test_whitespace_separated_string(self, tmp_path: Path) -> None:
        config = _FakeConfig("a  b.jar", tmp_path)
        result = classpath_from_ini(config)  # type: ignore[arg-type]
        assert result.entries == (tmp_path / "a", tmp_path / "b.jar")

    @pytest.mark.parametrize("value", [[], "", None])
    def test_unset_raises_usage_error(self, value: object, tmp_path: Path) -> None:
        config = _FakeConfig(value, tmp_path)
        with pytest.raises(pytest.UsageError, match=CLASSPATH_INI):
            classpath_from_ini(config)  # type: ignore[arg-type]
