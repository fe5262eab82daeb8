"""Scenes: a world of game objects, their components, systems, timers and a camera."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, TypeVar

import numpy as np

from roseengine.component_manager import ComponentManager
from roseengine.components import (
    RigidBodyComponent,
    SpriteComponent,
    TransformComponent,
    ViewComponent,
)
from roseengine.events import Event
from roseengine.object_manager import ObjectManager
from roseengine.renderer import RenderSystem
from roseengine.systems import System, SystemManager
from roseengine.texture_param import TextureParameter
from roseengine.timer import TimerManager

T = TypeVar("T")
S = TypeVar("S", bound=System)


class Scene(ABC):
    """Base of user scenes; subclasses fill in :meth:`on_start` and :meth:`on_update`."""

    def __init__(self, assets_path: str | Path | None = None) -> None:
        self.app: Any = None
        self.assets_path = Path(assets_path) if assets_path is not None else None
        self.camera_zoom = 1.0
        self.camera_position: tuple[float, float] = (0.0, 0.0)

        self.timer_manager = TimerManager()
        self.object_manager = ObjectManager()
        self.component_manager = ComponentManager()
        self.system_manager = SystemManager()

        for component_type in (ViewComponent, TransformComponent, SpriteComponent, RigidBodyComponent):
            self.register_component(component_type)

    # Game objects

    def create_game_object(self) -> int:
        obj = self.object_manager.create_game_object()
        self.system_manager.on_object_creation(obj)
        return obj

    def destroy_game_object(self, obj: int) -> None:
        self.component_manager.on_object_death(obj)
        self.system_manager.on_object_death(obj)
        self.object_manager.destroy_game_object(obj)

    # Textures and rendering

    def create_texture(
        self, image_path: str | Path, params: TextureParameter | None = None
    ) -> int:
        """Load a texture through the application's renderer and return its id.

        With an ``assets_path`` the image is looked up under its ``Textures`` folder.
        """
        if self.app is None:
            raise RuntimeError("scene is not attached to an application")
        path = Path(image_path)
        if self.assets_path is not None:
            path = self.assets_path / "Textures" / path
        return self.app.renderer.create_texture(path, params or TextureParameter())

    def set_renderer(self, renderer: Any) -> None:
        self.register_system(RenderSystem, renderer)

    # Timers

    def create_timer(self, milliseconds: int, func: Callable[[], object], repeat: bool) -> int:
        return self.timer_manager.create_timer(milliseconds, func, repeat)

    def start_timer(self, timer_id: int) -> None:
        self.timer_manager.start_timer(timer_id)

    def pause_timer(self, timer_id: int) -> None:
        self.timer_manager.pause_timer(timer_id)

    def delete_timer(self, timer_id: int) -> None:
        self.timer_manager.delete_timer(timer_id)

    # Camera

    def camera_view_matrix(self) -> np.ndarray:
        """View matrix that moves the camera position to the origin."""
        x, y = self.camera_position
        matrix = np.eye(4, dtype=np.float32)
        matrix[0, 3] = -x
        matrix[1, 3] = -y
        return matrix

    def set_camera_position(self, position: tuple[float, float]) -> None:
        x, y = position
        self.camera_position = (float(x), float(y))

    def move_camera(self, delta: tuple[float, float]) -> None:
        dx, dy = delta
        x, y = self.camera_position
        self.camera_position = (x + float(dx), y + float(dy))

    def set_camera_zoom(self, zoom: float) -> None:
        self.camera_zoom = float(zoom)

    # Components

    def register_component(self, component_type: type) -> int:
        return self.component_manager.register_component(component_type)

    def add_components(self, obj: int, *args: type) -> None:
        self.component_manager.add_components(obj, self.object_manager.flags, *args)

    def insert_component_data(self, obj: int, component: Any) -> None:
        self.component_manager.insert_component_data(obj, component)

    def remove_component_data(self, obj: int, component_type: type) -> None:
        self.component_manager.remove_component_data(obj, component_type)

    def get_component(self, obj: int, component_type: type[T]) -> T:
        return self.component_manager.get_component_data(obj, component_type)

    # Systems

    def register_system(self, system_type: type[S], *args: Any, **kwargs: Any) -> S:
        return self.system_manager.register_system(system_type, *args, **kwargs)

    def remove_system(self, system_type: type[System]) -> None:
        self.system_manager.remove_system(system_type)

    def update_systems(self, delta_time: float) -> None:
        """Advance timers, then run every system once."""
        self.timer_manager.on_update(delta_time)
        self.system_manager.on_update(self, delta_time)

    # Hooks

    @abstractmethod
    def on_start(self) -> None:
        """Called once when the scene becomes active."""

    @abstractmethod
    def on_update(self, delta_time: float) -> None:
        """Called every frame with the frame time in seconds."""

    def on_event(self, event: Event) -> None:
        """Called for every window event while the scene is active."""