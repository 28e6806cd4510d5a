"""Tests for configuration loading."""

import pytest

from config import AppConfig, DatabaseConfig, load_config
from errors import ConfigError


def test_defaults_when_environment_is_empty():
    config = load_config({})
    assert config == AppConfig()
    db = config.database
    assert (db.user, db.password, db.conn_method, db.host, db.port) == (
        "root", "root", "tcp", "rdb", "3306",
    )
    assert db.name == "ks-laboratory-backend"
    assert db.statement_timeout_ms is None


def test_environment_overrides():
    config = load_config({
        "DATABASE_USER_NAME": "app",
        "DATABASE_PASSWORD": "s3cret",
        "DATABASE_CONN_METHOD": "unix",
        "DATABASE_HOSTNAME": "/var/run/postgresql",
        "DATABASE_PORT": "5432",
        "DATABASE_NAME": "blog",
        "DATABASE_POOL_MIN": "2",
        "DATABASE_POOL_MAX": "8",
        "DATABASE_STATEMENT_TIMEOUT_MS": "1500",
        "GCP_PROJECT_ID": "lab-project",
        "LOG_LEVEL": "debug",
    })
    assert config.database == DatabaseConfig(
        user="app", password="s3cret", conn_method="unix",
        host="/var/run/postgresql", port="5432", name="blog",
        pool_min=2, pool_max=8, statement_timeout_ms=1500,
    )
    assert config.gcp_project_id == "lab-project"
    assert config.log_level == "DEBUG"


def test_empty_values_fall_back_to_defaults():
    config = load_config({"DATABASE_HOSTNAME": "", "DATABASE_PORT": ""})
    assert config.database.host == "rdb"
    assert config.database.port == "3306"


@pytest.mark.parametrize("env", [
    {"DATABASE_CONN_METHOD": "udp"},
    {"DATABASE_POOL_MAX": "many"},
    {"DATABASE_POOL_MIN": "4", "DATABASE_POOL_MAX": "2"},
    {"DATABASE_STATEMENT_TIMEOUT_MS": "0"},
])
def test_invalid_values_raise(env):
    with pytest.raises(ConfigError):
        load_config(env)


def test_reads_process_environment(monkeypatch):
    monkeypatch.setattr("config.load_dotenv", lambda: False)
    monkeypatch.setenv("DATABASE_NAME", "from-env")
    assert load_config().database.name == "from-env"
