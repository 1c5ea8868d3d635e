from dataclasses import dataclass

import pytest

from quadkit import storage
from quadkit.storage import TypeStorage


@dataclass
class WorldBoundaries:
    value: int


@dataclass
class Settings:
    volume: float


def test_store_and_get():
    store = TypeStorage()
    store.store(WorldBoundaries(23))
    assert store.get(WorldBoundaries).value == 23


def test_store_overwrites_same_type():
    store = TypeStorage()
    store.store(WorldBoundaries(1))
    store.store(WorldBoundaries(2))
    assert store.get(WorldBoundaries) == WorldBoundaries(2)


def test_types_are_kept_apart():
    store = TypeStorage()
    store.store(WorldBoundaries(5))
    store.store(Settings(0.5))
    assert store.get(Settings) == Settings(0.5)
    assert store.get(WorldBoundaries) == WorldBoundaries(5)


def test_try_get_missing_is_none():
    store = TypeStorage()
    assert store.try_get(Settings) is None
    assert Settings not in store


def test_get_missing_raises():
    store = TypeStorage()
    with pytest.raises(KeyError):
        store.get(Settings)


def test_stored_value_is_shared_and_mutable():
    store = TypeStorage()
    store.store(Settings(0.1))
    store.get(Settings).volume = 0.9
    assert store.get(Settings).volume == 0.9


def test_module_level_storage():
    class LocalMarker:
        def __init__(self, tag):
            self.tag = tag

    assert storage.try_get(LocalMarker) is None
    storage.store(LocalMarker("here"))
    assert storage.get(LocalMarker).tag == "here"


def test_module_level_get_missing_raises():
    class Unstored:
        pass

    with pytest.raises(KeyError):
        storage.get(Unstored)