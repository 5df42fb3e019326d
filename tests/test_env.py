"""Tests for dotenv file selection."""

from pathlib import Path

import pytest

from blog_mastermind.core.env import _env_filename, _select_env_path


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    for name in (".env", ".env.staging", ".env.production"):
        (tmp_path / name).write_text("SERPER_API_KEY=from-file\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ENV_FILE", raising=False)
    return tmp_path


class TestEnvFilename:

    @pytest.mark.parametrize(
        "env, expected",
        [
            ("local", ".env"),
            ("staging", ".env.staging"),
            ("STAGING", ".env.staging"),
            ("prod", ".env.production"),
            ("production", ".env.production"),
            ("anything-else", ".env"),
        ],
    )
    def test_maps_env_flag(self, monkeypatch, env, expected):
        monkeypatch.setenv("ENV", env)
        assert _env_filename() == expected

    def test_defaults_to_local(self, monkeypatch):
        monkeypatch.delenv("ENV", raising=False)
        assert _env_filename() == ".env"


class TestSelectEnvPath:

    def test_staging_found_from_working_directory(self, project_dir, monkeypatch):
        monkeypatch.setenv("ENV", "staging")

        path = _select_env_path()

        assert Path(path).resolve() == (project_dir / ".env.staging").resolve()

    def test_found_from_subdirectory(self, project_dir, monkeypatch):
        monkeypatch.setenv("ENV", "production")
        nested = project_dir / "deploy" / "run"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        path = _select_env_path()

        assert Path(path).resolve() == (project_dir / ".env.production").resolve()

    def test_explicit_env_file_wins(self, project_dir, monkeypatch):
        monkeypatch.setenv("ENV", "staging")
        monkeypatch.setenv("ENV_FILE", "/etc/mastermind/custom.env")

        assert _select_env_path() == "/etc/mastermind/custom.env"
