"""Tests for library settings."""

import pytest
from pydantic import ValidationError

from gini_tree import Settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GINI_TREE_MAX_DEPTH", raising=False)
    monkeypatch.delenv("GINI_TREE_EMPTY_LABEL", raising=False)


def test_defaults():
    s = Settings()
    assert s.MAX_DEPTH == 3
    assert s.EMPTY_LABEL == 1


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("GINI_TREE_MAX_DEPTH", "5")
    monkeypatch.setenv("gini_tree_empty_label", "0")
    s = Settings()
    assert s.MAX_DEPTH == 5
    assert s.EMPTY_LABEL == 0


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("GINI_TREE_MAX_DEPTH=8\n", encoding="utf-8")
    assert Settings().MAX_DEPTH == 8


def test_environment_beats_dotenv(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("GINI_TREE_MAX_DEPTH=8\n", encoding="utf-8")
    monkeypatch.setenv("GINI_TREE_MAX_DEPTH", "4")
    assert Settings().MAX_DEPTH == 4


def test_init_beats_environment(monkeypatch):
    monkeypatch.setenv("GINI_TREE_MAX_DEPTH", "5")
    assert Settings(MAX_DEPTH=2).MAX_DEPTH == 2


@pytest.mark.parametrize(
    "name, value", [("GINI_TREE_MAX_DEPTH", "0"), ("GINI_TREE_EMPTY_LABEL", "2")]
)
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()
