import pytest

from roseengine.component_manager import ComponentManager
from roseengine.components import (
    MAX_COMPONENTS,
    ComponentFlags,
    RigidBodyComponent,
    SpriteComponent,
    TransformComponent,
    ViewComponent,
    component_name,
)


@pytest.fixture
def manager():
    m = ComponentManager()
    for component_type in (ViewComponent, TransformComponent, SpriteComponent, RigidBodyComponent):
        m.register_component(component_type)
    return m


def test_ids_follow_registration_order(manager):
    ids = manager.component_ids
    assert ids[component_name(ViewComponent)] == 0
    assert ids[component_name(TransformComponent)] == 1
    assert ids[component_name(RigidBodyComponent)] == 3


def test_duplicate_registration_rejected(manager):
    with pytest.raises(ValueError):
        manager.register_component(ViewComponent)


def test_too_many_component_types():
    m = ComponentManager()
    for i in range(MAX_COMPONENTS):
        m.register_component(type(f"Extra{i}", (), {}))
    with pytest.raises(ValueError):
        m.register_component(type("OneTooMany", (), {}))


def test_add_components_sets_flags(manager):
    flags = [ComponentFlags() for _ in range(4)]
    manager.add_components(2, flags, TransformComponent, ViewComponent)
    ids = manager.component_ids
    assert sorted(flags[2]) == sorted(
        [ids[component_name(TransformComponent)], ids[component_name(ViewComponent)]]
    )
    assert not flags[1].any()


def test_add_components_unregistered(manager):
    flags = [ComponentFlags()]
    with pytest.raises(KeyError):
        manager.add_components(0, flags, type("Unknown", (), {}))


def test_insert_get_remove(manager):
    view = ViewComponent(visible=True, layer=3)
    manager.insert_component_data(5, view)
    assert manager.get_component_data(5, ViewComponent) == view
    manager.remove_component_data(5, ViewComponent)
    with pytest.raises(KeyError):
        manager.get_component_data(5, ViewComponent)


def test_types_are_stored_separately(manager):
    manager.insert_component_data(1, SpriteComponent(texture_id=7))
    manager.insert_component_data(1, TransformComponent(rotation=30.0))
    assert manager.get_component_data(1, SpriteComponent).texture_id == 7
    assert manager.get_component_data(1, TransformComponent).rotation == 30.0


def test_on_object_death_clears_all_arrays(manager):
    manager.insert_component_data(1, SpriteComponent())
    manager.insert_component_data(1, ViewComponent())
    manager.insert_component_data(2, ViewComponent(layer=9))
    manager.on_object_death(1)
    for component_type in (SpriteComponent, ViewComponent):
        with pytest.raises(KeyError):
            manager.get_component_data(1, component_type)
    assert manager.get_component_data(2, ViewComponent).layer == 9


def test_unregistered_type_raises():
    m = ComponentManager()
    with pytest.raises(KeyError):
        m.insert_component_data(0, ViewComponent())