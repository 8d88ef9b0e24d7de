"""Tests for the infrastructure.db module."""

import pytest

from profitlens.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("PROFITLENS_DB_URL", "sqlite:///example.db")

    assert db_module._get_env_var("PROFITLENS_DB_URL") == "sqlite:///example.db"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("PROFITLENS_DB_URL", raising=False)

    with pytest.raises(RuntimeError):
        db_module._get_env_var("PROFITLENS_DB_URL")


def test_resolve_db_url_falls_back_to_local_file(monkeypatch, tmp_path):
    """Without PROFITLENS_DB_URL the local data file should be used."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("PROFITLENS_DB_URL", raising=False)
    monkeypatch.setattr(db_module, "get_project_root", lambda: tmp_path)

    url = db_module.resolve_db_url()

    assert url == f"sqlite:///{tmp_path / 'data' / 'profitlens.db'}"
    assert (tmp_path / "data").is_dir()


def test_create_engine_passes_configuration(monkeypatch):
    """_create_engine should enable health checks and SQLite threading."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("sqlite:///profitlens.db")

    assert engine == "engine"
    assert captured["db_url"] == "sqlite:///profitlens.db"
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True
    assert captured["kwargs"]["connect_args"] == {"check_same_thread": False}


def test_create_engine_skips_sqlite_arguments_for_other_backends(monkeypatch):
    """Non-SQLite URLs should not receive SQLite connect arguments."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    db_module._create_engine("postgresql://profitlens")

    assert captured["kwargs"]["connect_args"] == {}


def test_get_engine_caches_engine(monkeypatch):
    """get_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("PROFITLENS_DB_URL", "sqlite:///cached.db")

    engine_one = db_module.get_engine()
    engine_two = db_module.get_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:sqlite:///cached.db"
    assert created == ["sqlite:///cached.db"]


def test_adapter_without_url_proxies_global_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the global helper."""
    monkeypatch.setattr(db_module, "get_engine", lambda: "global_engine")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_engine() == "global_engine"


def test_adapter_with_url_owns_its_engine(monkeypatch):
    """An explicit URL should create and reuse a dedicated engine."""
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter("sqlite:///own.db")

    assert adapter.get_engine() == "engine:sqlite:///own.db"
    assert adapter.get_engine() == "engine:sqlite:///own.db"
    assert created == ["sqlite:///own.db"]
