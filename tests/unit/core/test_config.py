import pytest
from pydantic import ValidationError

from admin_console.core.config.auth import PasswordPolicySettings
from admin_console.core.config.settings import Settings, create_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    # setenv first so the original value is restored even when loading .env sets it.
    for name in ("APP_ENV", "LOG_LEVEL", "PASSWORD_MIN_LENGTH", "PASSWORD_MAX_LENGTH", "BCRYPT_WORK_FACTOR", "DATABASE_URL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.mark.unit
def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.PROJECT_NAME == "admin-console"
    assert settings.PASSWORD_MIN_LENGTH == 8
    assert settings.PASSWORD_MAX_LENGTH == 128
    assert settings.BCRYPT_WORK_FACTOR == 12
    assert settings.DATABASE_URL.startswith("sqlite")


@pytest.mark.unit
def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PASSWORD_MIN_LENGTH", "12")
    monkeypatch.setenv("DATABASE_URL", "postgresql://admin@localhost/app")

    settings = Settings(_env_file=None)

    assert settings.PASSWORD_MIN_LENGTH == 12
    assert settings.DATABASE_URL == "postgresql://admin@localhost/app"


@pytest.mark.unit
def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", " debug ")

    assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"


@pytest.mark.unit
def test_min_length_above_max_is_rejected():
    with pytest.raises(ValidationError):
        PasswordPolicySettings(_env_file=None, PASSWORD_MIN_LENGTH=20, PASSWORD_MAX_LENGTH=10)


@pytest.mark.unit
@pytest.mark.parametrize("rounds", [3, 32])
def test_work_factor_bounds(rounds):
    with pytest.raises(ValidationError):
        PasswordPolicySettings(_env_file=None, BCRYPT_WORK_FACTOR=rounds)


@pytest.mark.unit
def test_app_env_from_dotenv_selects_environment_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("APP_ENV=test\n")
    (tmp_path / ".env.test").write_text("PASSWORD_MIN_LENGTH=12\nLOG_LEVEL=warning\n")
    monkeypatch.chdir(tmp_path)

    settings = create_settings()

    assert settings.APP_ENV == "test"
    assert settings.PASSWORD_MIN_LENGTH == 12
    assert settings.LOG_LEVEL == "WARNING"


@pytest.mark.unit
def test_exported_variables_win_over_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("PASSWORD_MIN_LENGTH=10\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PASSWORD_MIN_LENGTH", "14")

    assert create_settings().PASSWORD_MIN_LENGTH == 14
