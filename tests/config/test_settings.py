"""Tests for CollectionSettings."""

import warnings

from typedcollection import Collection, CollectionSettings, get_settings


def test_defaults(fresh_settings):
    settings = CollectionSettings()
    assert settings.mutable is False
    assert settings.warn_on_key_collision is True


def test_environment_overrides(fresh_settings, monkeypatch):
    monkeypatch.setenv("TYPEDCOLLECTION_MUTABLE", "1")
    monkeypatch.setenv("TYPEDCOLLECTION_WARN_ON_KEY_COLLISION", "false")
    settings = CollectionSettings()
    assert settings.mutable is True
    assert settings.warn_on_key_collision is False


def test_explicit_values_win(fresh_settings, monkeypatch):
    monkeypatch.setenv("TYPEDCOLLECTION_MUTABLE", "true")
    assert CollectionSettings(mutable=False).mutable is False


def test_get_settings_is_cached(fresh_settings):
    assert get_settings() is get_settings()


def test_key_collision_warning_can_be_disabled(fresh_settings, monkeypatch):
    monkeypatch.setenv("TYPEDCOLLECTION_WARN_ON_KEY_COLLISION", "false")
    get_settings.cache_clear()
    assert get_settings().warn_on_key_collision is False
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        flipped = Collection({"a": "x", "b": "x"}).flip()
    assert flipped.to_array() == {"x": "b"}
