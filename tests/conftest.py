"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from typedcollection import Collection, get_settings


@dataclass
class FixtureUser:
    id: int
    name: str
    age: int | None = None


@dataclass
class FixturePoint:
    x: int
    y: int

    def to_array(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}


@pytest.fixture
def fresh_settings(monkeypatch):
    """Isolate tests from TYPEDCOLLECTION_* variables and cached settings."""
    monkeypatch.delenv("TYPEDCOLLECTION_MUTABLE", raising=False)
    monkeypatch.delenv("TYPEDCOLLECTION_WARN_ON_KEY_COLLISION", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def user_cls():
    return FixtureUser


@pytest.fixture
def point_cls():
    return FixturePoint


@pytest.fixture
def records():
    """Immutable collection of user dicts."""
    return Collection(
        [
            {"id": 1, "name": "Al", "age": 30, "address": {"city": "Oslo"}},
            {"id": 2, "name": "Bo", "age": 25, "address": {"city": "Bergen"}},
            {"id": 3, "name": "Cy", "age": None, "address": {"city": "Oslo"}},
        ],
        dict,
    )
