from pathlib import Path

from todo_list.config import DEFAULT_STORAGE_PATH, Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("TODO_STORAGE_PATH", raising=False)
    monkeypatch.delenv("TODO_LOG_LEVEL", raising=False)
    settings = Settings()
    assert settings.storage_path == Path("storage/todo-file.json")
    assert settings.storage_path == DEFAULT_STORAGE_PATH
    assert settings.log_level == "WARNING"


def test_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("TODO_STORAGE_PATH", str(tmp_path / "t.json"))
    get_settings.cache_clear()
    try:
        assert get_settings().storage_path == tmp_path / "t.json"
    finally:
        get_settings.cache_clear()
