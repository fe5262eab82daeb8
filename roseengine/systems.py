"""Systems that act on all game objects each frame, and their registry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeVar

S = TypeVar("S", bound="System")


class System(ABC):
    """Per-frame behaviour applied to the scene's objects."""

    @abstractmethod
    def on_update(self, objects: list[int], scene: Any, delta_time: float) -> None:
        """Run once per frame; ``objects`` holds the living objects in ascending order."""


class SystemManager:
    """Keeps one instance per system type and the set of living objects."""

    def __init__(self) -> None:
        self._objects: set[int] = set()
        self._systems: dict[type[System], System] = {}

    @property
    def objects(self) -> frozenset[int]:
        return frozenset(self._objects)

    def __contains__(self, system_type: object) -> bool:
        return system_type in self._systems

    def system(self, system_type: type[S]) -> S:
        return self._systems[system_type]  # type: ignore[return-value]

    def register_system(self, system_type: type[S], *args: Any, **kwargs: Any) -> S:
        """Create and register a system; an already registered type keeps its instance."""
        if not (isinstance(system_type, type) and issubclass(system_type, System)):
            raise TypeError(f"{system_type!r} is not a System subclass")
        existing = self._systems.get(system_type)
        if existing is not None:
            return existing  # type: ignore[return-value]
        instance = system_type(*args, **kwargs)
        self._systems[system_type] = instance
        return instance

    def remove_system(self, system_type: type[System]) -> None:
        self._systems.pop(system_type, None)

    def on_update(self, scene: Any, delta_time: float) -> None:
        for system in list(self._systems.values()):
            system.on_update(sorted(self._objects), scene, delta_time)

    def on_object_creation(self, obj: int) -> None:
        self._objects.add(obj)

    def on_object_death(self, obj: int) -> None:
        self._objects.discard(obj)