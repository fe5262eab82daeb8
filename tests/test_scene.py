from pathlib import Path

import numpy as np
import pytest

from roseengine.components import (
    RigidBodyComponent,
    SpriteComponent,
    TransformComponent,
    ViewComponent,
    component_name,
)
from roseengine.object_manager import ObjectManager
from roseengine.renderer import RenderSystem, model_matrix, ortho_projection
from roseengine.scene import Scene
from roseengine.systems import System
from roseengine.texture_param import TextureParameter


class RecordingScene(Scene):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.started = False
        self.updates = []

    def on_start(self):
        self.started = True

    def on_update(self, delta_time):
        self.updates.append(delta_time)


class ViewRecordingSystem(System):
    def __init__(self, tag):
        self.tag = tag
        self.calls = []

    def on_update(self, objects, scene, delta_time):
        views = [scene.get_component(obj, ViewComponent) for obj in objects]
        self.calls.append((views, scene, delta_time))


class FakeRenderer:
    def __init__(self):
        self.instances = []
        self.instance_count = 0
        self.textures = []

    def create_texture(self, path, params):
        self.textures.append((path, params))
        return 7


class FakeApp:
    def __init__(self):
        self.renderer = FakeRenderer()


def test_scene_is_abstract():
    with pytest.raises(TypeError):
        Scene()


def test_builtin_components_are_registered():
    ids = RecordingScene().component_manager.component_ids
    for component_type in (ViewComponent, TransformComponent, SpriteComponent, RigidBodyComponent):
        assert component_name(component_type) in ids


def test_created_objects_are_known_to_systems():
    scene = RecordingScene()
    reference = ObjectManager()
    first = scene.create_game_object()
    second = scene.create_game_object()
    assert (first, second) == (reference.create_game_object(), reference.create_game_object())
    assert scene.system_manager.objects == {first, second}


def test_destroy_removes_object_and_its_data():
    scene = RecordingScene()
    obj = scene.create_game_object()
    scene.insert_component_data(obj, ViewComponent(visible=True, layer=2))
    scene.destroy_game_object(obj)
    assert obj not in scene.system_manager.objects
    assert obj not in scene.object_manager
    with pytest.raises(KeyError):
        scene.get_component(obj, ViewComponent)


def test_add_components_sets_flags():
    scene = RecordingScene()
    obj = scene.create_game_object()
    scene.add_components(obj, TransformComponent, ViewComponent)
    ids = scene.component_manager.component_ids
    flags = scene.object_manager.flags[obj]
    checked = (TransformComponent, ViewComponent, SpriteComponent)
    assert [flags.test(ids[component_name(t)]) for t in checked] == [True, True, False]


def test_component_data_round_trip():
    scene = RecordingScene()
    obj = scene.create_game_object()
    transform = TransformComponent(position=(1.0, 2.0), rotation=30.0, scale=(4.0, 5.0))
    scene.insert_component_data(obj, transform)
    assert scene.get_component(obj, TransformComponent) == transform
    scene.remove_component_data(obj, TransformComponent)
    with pytest.raises(KeyError):
        scene.get_component(obj, TransformComponent)


def test_camera_view_matrix_moves_camera_to_origin():
    scene = RecordingScene()
    np.testing.assert_array_equal(scene.camera_view_matrix(), np.eye(4))
    scene.set_camera_position((3.0, 4.0))
    scene.move_camera((1.0, -2.0))
    x, y = scene.camera_position
    result = scene.camera_view_matrix() @ np.array([x, y, 0.0, 1.0])
    np.testing.assert_allclose(result, [0.0, 0.0, 0.0, 1.0])
    inverse_offset = model_matrix(TransformComponent(position=(-4.0, -2.0), rotation=0.0, scale=(1.0, 1.0)))
    np.testing.assert_allclose(scene.camera_view_matrix(), inverse_offset)


def test_camera_zoom_defaults_to_one_and_can_change():
    scene = RecordingScene()
    assert scene.camera_zoom == 1.0
    scene.set_camera_zoom(2.5)
    assert scene.camera_zoom == 2.5
    projection = ortho_projection(800, 600, scene.camera_zoom)
    corner = projection @ np.array([160.0, 120.0, 0.0, 1.0])
    np.testing.assert_allclose(corner[:2], [1.0, 1.0])


def test_one_shot_timer_fires_through_update_systems():
    scene = RecordingScene()
    obj = scene.create_game_object()
    timer_id = scene.create_timer(
        100, lambda: scene.insert_component_data(obj, SpriteComponent(texture_id=4)), False
    )
    scene.update_systems(0.5)
    with pytest.raises(KeyError):
        scene.get_component(obj, SpriteComponent)
    scene.start_timer(timer_id)
    scene.update_systems(0.5)
    assert scene.get_component(obj, SpriteComponent) == SpriteComponent(texture_id=4)
    assert timer_id not in scene.timer_manager


def test_paused_and_deleted_timers_do_not_fire():
    scene = RecordingScene()
    obj = scene.create_game_object()
    paused = scene.create_timer(10, lambda: scene.insert_component_data(obj, ViewComponent(True, 1)), True)
    deleted = scene.create_timer(10, lambda: scene.insert_component_data(obj, ViewComponent(True, 2)), True)
    scene.start_timer(paused)
    scene.start_timer(deleted)
    scene.pause_timer(paused)
    scene.delete_timer(deleted)
    scene.update_systems(1.0)
    with pytest.raises(KeyError):
        scene.get_component(obj, ViewComponent)


def test_registered_system_runs_and_can_be_removed():
    scene = RecordingScene()
    obj = scene.create_game_object()
    scene.insert_component_data(obj, ViewComponent(visible=True, layer=1))
    system = scene.register_system(ViewRecordingSystem, tag="x")
    scene.update_systems(0.25)
    assert system.calls == [([ViewComponent(visible=True, layer=1)], scene, 0.25)]
    scene.remove_system(ViewRecordingSystem)
    scene.update_systems(0.25)
    assert len(system.calls) == 1


def test_create_texture_requires_application():
    with pytest.raises(RuntimeError):
        RecordingScene().create_texture("hero.png", TextureParameter())


def test_create_texture_resolves_under_assets_textures():
    scene = RecordingScene(assets_path="assets")
    scene.app = FakeApp()
    texture_id = scene.create_texture("hero.png")
    assert texture_id == 7
    path, params = scene.app.renderer.textures[0]
    assert path == Path("assets") / "Textures" / "hero.png"
    assert params == TextureParameter()


def test_set_renderer_collects_visible_objects():
    scene = RecordingScene()
    renderer = FakeRenderer()
    scene.set_renderer(renderer)
    assert RenderSystem in scene.system_manager
    shown = scene.create_game_object()
    hidden = scene.create_game_object()
    for obj, visible in ((shown, True), (hidden, False)):
        scene.insert_component_data(obj, TransformComponent(scale=(1.0, 1.0)))
        scene.insert_component_data(obj, ViewComponent(visible=visible, layer=3))
        scene.insert_component_data(obj, SpriteComponent(texture_id=0))
    scene.update_systems(0.1)
    assert [instance.layer for instance in renderer.instances] == [3]
    assert renderer.instance_count == 1