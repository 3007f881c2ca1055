# tests/unit/test_config.py
import pytest

from arm_backend.core.config import clear_settings_cache, get_settings


@pytest.fixture
def fresh_settings():
    clear_settings_cache()
    yield
    clear_settings_cache()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_clear_settings_cache_reloads_environment(fresh_settings, monkeypatch):
    before = get_settings()
    monkeypatch.setenv("CHAT_HISTORY_LIMIT", "5")

    assert get_settings() is before

    clear_settings_cache()
    reloaded = get_settings()

    assert reloaded is not before
    assert reloaded.CHAT_HISTORY_LIMIT == 5


def test_cors_origins_list_splits_and_strips(monkeypatch, fresh_settings):
    monkeypatch.setenv("CORS_ORIGINS", "https://arm-mali.org, http://localhost:8081 ,")
    clear_settings_cache()

    assert get_settings().cors_origins_list == ["https://arm-mali.org", "http://localhost:8081"]
