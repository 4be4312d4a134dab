"""Tests for ``odoo_setup.config.Settings`` and the exception hierarchy."""

from pathlib import Path

import pytest

from odoo_setup import config, exceptions

_ENV_KEYS = (
    "ODOO_REPO_URL",
    "ODOO_RAW_BASE_URL",
    "LIBSASS_WHEEL_URL",
    "ODOO_ADMIN_PASSWD",
    "ODOO_DB_HOST",
    "ODOO_DB_PORT",
    "ODOO_DB_USER",
    "ODOO_DB_PASSWORD",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        # setenv first so undo also removes values load_dotenv adds
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


def test_settings_defaults(clean_env, tmp_path: Path):
    s = config.Settings.load(tmp_path)
    assert s == config.Settings()
    assert s.repo_url == config.ODOO_REPO_URL


def test_settings_from_env_file(clean_env, tmp_path: Path):
    (tmp_path / ".env").write_text(
        'ODOO_ADMIN_PASSWD="master"\nODOO_RAW_BASE_URL=https://mirror.local/odoo/\n',
        encoding="utf-8",
    )
    s = config.Settings.load(tmp_path)
    assert s.admin_passwd == "master"
    assert s.raw_base_url == "https://mirror.local/odoo"


def test_process_env_wins_over_env_file(clean_env, tmp_path: Path):
    (tmp_path / ".env").write_text("ODOO_DB_USER=fromfile\n", encoding="utf-8")
    clean_env.setenv("ODOO_DB_USER", "fromenv")
    assert config.Settings.load(tmp_path).db_user == "fromenv"


def test_exit_codes():
    assert exceptions.InstallDeclinedError("x").exit_code == 0
    assert exceptions.RestartRequiredError("x").exit_code == 0
    for cls in (
        exceptions.MissingExecutableError,
        exceptions.ToolInstallError,
        exceptions.InvalidSelectionError,
        exceptions.CloneError,
        exceptions.MissingRequirementsError,
        exceptions.VenvCreationError,
        exceptions.DependencyInstallError,
        exceptions.WheelDownloadError,
        exceptions.WheelInstallError,
    ):
        error = cls("boom", context={"k": 1})
        assert isinstance(error, exceptions.AppError)
        assert error.exit_code == 1
        assert error.to_dict()["context"] == {"k": 1}


def test_app_error_str():
    e = exceptions.CloneError("git clone failed")
    assert str(e) == "CLONE_FAILED: git clone failed"
    assert e.transient is True
