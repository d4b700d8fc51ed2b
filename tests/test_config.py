import pytest

from market_research.config import ConfigurationError, WorkspaceConfig


def test_from_env_reads_settings(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.delenv("SUPABASE_KEY", raising=False)
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
    monkeypatch.setenv("MARKET_RESEARCH_TABLE", "mr_test")
    monkeypatch.setenv("MARKET_RESEARCH_BACKEND", " Memory ")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = WorkspaceConfig.from_env(load_dotenv_file=False)

    assert config.supabase_url == "https://example.supabase.co"
    assert config.supabase_key == "anon"
    assert config.table_name == "mr_test"
    assert config.backend == "memory"
    assert config.log_level == "DEBUG"


def test_defaults(monkeypatch):
    for name in ("SUPABASE_URL", "SUPABASE_KEY", "SUPABASE_ANON_KEY", "MARKET_RESEARCH_TABLE",
                 "MARKET_RESEARCH_BACKEND", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    config = WorkspaceConfig.from_env(load_dotenv_file=False)
    assert config.table_name == "market_research"
    assert config.backend == "supabase"
    assert config.supabase_url is None


def test_unknown_backend_is_rejected():
    with pytest.raises(ConfigurationError):
        WorkspaceConfig(backend="sqlite")
