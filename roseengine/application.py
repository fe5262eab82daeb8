"""The application: owns the window and renderer and runs the frame loop."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

import numpy as np

from roseengine.events import Event, EventDispatcher, WindowCloseEvent
from roseengine.renderer import Renderer
from roseengine.scene import Scene
from roseengine.window import Window, WindowAttributes

logger = logging.getLogger(__name__)


class Application:
    """Runs the active scene every frame until the window is closed."""

    def __init__(
        self,
        title: str = "Rose Engine",
        width: int = 1280,
        height: int = 720,
        *,
        window: Any = None,
        renderer: Any = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.running = True
        self.window = window if window is not None else Window(WindowAttributes(title, width, height))
        self.renderer = renderer if renderer is not None else Renderer()
        self.active_scene: Scene | None = None
        self.delta_time = 0.0
        self._clock = clock
        self._last_frame_time = clock()
        self.window.set_event_callback(self.on_event_core)
        self.renderer.init()

    def on_event_core(self, event: Event) -> None:
        """Pass an event to the application, the scene, then the close handler."""
        self.on_event(event)
        if self.active_scene is not None:
            self.active_scene.on_event(event)
        EventDispatcher(event).dispatch(WindowCloseEvent, self.on_window_close)

    def on_event(self, event: Event) -> None:
        """Hook for subclasses; called for every event."""

    def on_window_close(self, event: WindowCloseEvent) -> None:
        logger.info("Window Close Event Triggered")
        logger.info("Application Shutting Down")
        self.running = False

    def set_active_scene(self, scene: Scene) -> None:
        self.active_scene = scene
        scene.app = self
        scene.set_renderer(self.renderer)
        scene.on_start()

    def set_clear_color(self, color: tuple[float, float, float, float]) -> None:
        self.window.set_clear_color(color)

    def _update_delta_time(self) -> None:
        now = self._clock()
        self.delta_time = now - self._last_frame_time
        self._last_frame_time = now

    def run(self) -> None:
        """Run frames until the window asks to close, then close it."""
        try:
            while self.running:
                self.window.on_update()
                self._update_delta_time()
                scene = self.active_scene
                if scene is not None:
                    scene.on_update(self.delta_time)
                    scene.update_systems(self.delta_time)
                    view, zoom = scene.camera_view_matrix(), scene.camera_zoom
                else:
                    view, zoom = np.eye(4, dtype=np.float32), 1.0
                self.renderer.render_scene(self.window.native, view, zoom)
                self.window.swap_buffers()
        finally:
            self.window.close()