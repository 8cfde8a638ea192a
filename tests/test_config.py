import os

from profile_stats import config


def test_username_falls_back_to_username_then_default(monkeypatch):
    monkeypatch.delenv("GITHUB_USERNAME", raising=False)
    monkeypatch.setenv("USERNAME", "fallback")
    assert config.resolve_username() == "fallback"

    monkeypatch.delenv("USERNAME")
    assert config.resolve_username() == config.DEFAULT_GITHUB_USERNAME


def test_readme_path_defaults_to_repository_root(monkeypatch):
    monkeypatch.delenv("README_PATH", raising=False)

    assert config.resolve_readme_path() == os.path.join(config.ROOT_DIR, "README.md")


def test_relative_readme_path_resolves_from_repository_root(monkeypatch):
    monkeypatch.setenv("README_PATH", "docs/PROFILE.md")

    assert config.resolve_readme_path() == os.path.join(config.ROOT_DIR, "docs/PROFILE.md")


def test_invalid_language_limit_falls_back_to_default(monkeypatch, capsys):
    monkeypatch.setenv("LANGUAGE_LIMIT", "lots")

    assert config.resolve_language_limit() == config.DEFAULT_LANGUAGE_LIMIT
    assert "LANGUAGE_LIMIT" in capsys.readouterr().err


def test_missing_language_limit_uses_default(monkeypatch):
    monkeypatch.delenv("LANGUAGE_LIMIT", raising=False)

    assert config.resolve_language_limit() == 8
