"""Allocation and recycling of game object ids."""

from __future__ import annotations

from collections import deque

from roseengine.components import MAX_OBJECTS, ComponentFlags


class ObjectManager:
    """Hands out object ids first-in first-out and tracks their component flags."""

    def __init__(self, max_objects: int = MAX_OBJECTS) -> None:
        self._available: deque[int] = deque(range(max_objects))
        self._living: set[int] = set()
        self.flags: list[ComponentFlags] = [ComponentFlags() for _ in range(max_objects)]

    @property
    def living_count(self) -> int:
        return len(self._living)

    def __contains__(self, obj: object) -> bool:
        return obj in self._living

    def create_game_object(self) -> int:
        if not self._available:
            raise RuntimeError("no game object ids are left")
        obj = self._available.popleft()
        self._living.add(obj)
        return obj

    def destroy_game_object(self, obj: int) -> None:
        """Clear the object's flags and return its id to the end of the free queue."""
        if obj not in self._living:
            raise ValueError(f"game object {obj} is not alive")
        self.flags[obj].reset()
        self._living.remove(obj)
        self._available.append(obj)