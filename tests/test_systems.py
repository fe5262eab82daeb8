import pytest

from roseengine.systems import System, SystemManager


class Recorder(System):
    def __init__(self, tag="rec"):
        self.tag = tag
        self.calls = []

    def on_update(self, objects, scene, delta_time):
        self.calls.append((list(objects), scene, delta_time))


class Other(Recorder):
    pass


def test_system_is_abstract():
    with pytest.raises(TypeError):
        System()


def test_register_passes_arguments():
    manager = SystemManager()
    system = manager.register_system(Recorder, tag="physics")
    assert system.tag == "physics"
    assert manager.system(Recorder) is system
    assert Recorder in manager


def test_duplicate_registration_keeps_first():
    manager = SystemManager()
    first = manager.register_system(Recorder, "a")
    second = manager.register_system(Recorder, "b")
    assert second is first
    assert manager.system(Recorder).tag == "a"


def test_register_non_system_rejected():
    with pytest.raises(TypeError):
        SystemManager().register_system(dict)


def test_update_passes_sorted_objects_scene_and_delta():
    manager = SystemManager()
    system = manager.register_system(Recorder)
    for obj in (5, 1, 3):
        manager.on_object_creation(obj)
    scene = object()
    manager.on_update(scene, 0.5)
    assert system.calls == [([1, 3, 5], scene, 0.5)]


def test_object_death_removes_from_updates():
    manager = SystemManager()
    system = manager.register_system(Recorder)
    manager.on_object_creation(1)
    manager.on_object_creation(2)
    manager.on_object_death(1)
    manager.on_object_death(99)
    manager.on_update(None, 0.1)
    assert system.calls[0][0] == [2]
    assert manager.objects == frozenset({2})


def test_remove_system_stops_updates():
    manager = SystemManager()
    kept = manager.register_system(Recorder)
    removed = manager.register_system(Other)
    manager.remove_system(Other)
    manager.remove_system(Other)
    manager.on_update(None, 0.1)
    assert removed.calls == []
    assert len(kept.calls) == 1
    assert Other not in manager