import numpy as np
import pytest

from roseengine.application import Application
from roseengine.events import KeyPressedEvent, WindowCloseEvent
from roseengine.renderer import RenderSystem
from roseengine.scene import Scene


class FakeWindow:
    def __init__(self, close_after=1):
        self.native = object()
        self.callback = None
        self.frames = 0
        self.swaps = 0
        self.closed = False
        self.close_after = close_after
        self.clear_color = None

    def set_event_callback(self, callback):
        self.callback = callback

    def on_update(self):
        self.frames += 1
        if self.frames >= self.close_after:
            self.callback(WindowCloseEvent())

    def swap_buffers(self):
        self.swaps += 1

    def set_clear_color(self, color):
        self.clear_color = color

    def close(self):
        self.closed = True


class FakeRenderer:
    def __init__(self):
        self.initialised = False
        self.instances = []
        self.instance_count = 0
        self.renders = []

    def init(self):
        self.initialised = True

    def render_scene(self, window, view, zoom):
        self.renders.append((window, view, zoom))


class RecordingScene(Scene):
    def __init__(self):
        super().__init__()
        self.started = 0
        self.updates = []
        self.events = []

    def on_start(self):
        self.started += 1

    def on_update(self, delta_time):
        self.updates.append(delta_time)

    def on_event(self, event):
        self.events.append(event)


def make_app(close_after=1, times=None):
    clock = iter(times if times is not None else [0.0] * 100).__next__
    return Application(window=FakeWindow(close_after), renderer=FakeRenderer(), clock=clock)


def test_construction_initialises_renderer_and_hooks_events():
    app = make_app()
    assert app.renderer.initialised
    assert app.window.callback == app.on_event_core
    assert app.running


def test_close_event_stops_and_is_handled():
    app = make_app()
    event = WindowCloseEvent()
    app.on_event_core(event)
    assert app.running is False
    assert event.handled is True


def test_other_events_reach_scene_but_do_not_stop():
    app = make_app()
    scene = RecordingScene()
    app.set_active_scene(scene)
    event = KeyPressedEvent(65, 0)
    app.on_event_core(event)
    assert app.running is True
    assert event.handled is False
    assert scene.events == [event]


def test_set_active_scene_attaches_and_starts():
    app = make_app()
    scene = RecordingScene()
    app.set_active_scene(scene)
    assert scene.app is app
    assert scene.started == 1
    assert RenderSystem in scene.system_manager


def test_run_updates_scene_with_frame_times():
    app = make_app(close_after=2, times=[1.0, 1.5, 2.25])
    scene = RecordingScene()
    app.set_active_scene(scene)
    app.run()
    assert scene.updates == [pytest.approx(0.5), pytest.approx(0.75)]
    assert app.window.frames == 2
    assert app.window.swaps == 2
    assert app.window.closed is True


def test_run_renders_with_scene_camera():
    app = make_app()
    scene = RecordingScene()
    scene.set_camera_zoom(3.0)
    app.set_active_scene(scene)
    app.run()
    [(native, view, zoom)] = app.renderer.renders
    assert native is app.window.native
    assert zoom == 3.0
    np.testing.assert_array_equal(view, scene.camera_view_matrix())


def test_run_without_scene_uses_identity_view():
    app = make_app()
    app.run()
    [(_, view, zoom)] = app.renderer.renders
    np.testing.assert_array_equal(view, np.eye(4))
    assert zoom == 1.0


def test_set_clear_color_is_forwarded():
    app = make_app()
    app.set_clear_color((0.1, 0.2, 0.3, 1.0))
    assert app.window.clear_color == (0.1, 0.2, 0.3, 1.0)