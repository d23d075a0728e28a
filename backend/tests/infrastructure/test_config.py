"""Settings — defaults and environment overrides."""

from eventgraph.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("SEED_DATA_PATH", raising=False)
    settings = Settings(_env_file=None)
    assert settings.seed_data_path is None
    assert settings.log_level == "INFO"
    assert settings.cors_origins == ["http://localhost:5173"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SEED_DATA_PATH", "/data/seed.json")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings(_env_file=None)
    assert settings.seed_data_path == "/data/seed.json"
    assert settings.log_level == "debug"


def test_blank_seed_path_is_none(monkeypatch):
    monkeypatch.setenv("SEED_DATA_PATH", "  ")
    assert Settings(_env_file=None).seed_data_path is None
