"""Densely packed storage of one component type, keyed by game object."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from roseengine.components import MAX_OBJECTS

T = TypeVar("T")


class ComponentArray(Generic[T]):
    """Component data kept contiguous; removal moves the last entry into the gap."""

    def __init__(self, capacity: int = MAX_OBJECTS) -> None:
        self._capacity = capacity
        self._data: list[T] = []
        self._owners: list[int] = []
        self._index_of: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, obj: object) -> bool:
        return obj in self._index_of

    def items(self) -> Iterator[tuple[int, T]]:
        """Pairs of object and its data, in storage order."""
        return iter(list(zip(self._owners, self._data)))

    def insert_component_data(self, obj: int, component_data: T) -> None:
        """Store data for ``obj``, replacing any it already had."""
        index = self._index_of.get(obj)
        if index is not None:
            self._data[index] = component_data
            return
        if len(self._data) >= self._capacity:
            raise IndexError(f"component array is full ({self._capacity} entries)")
        self._index_of[obj] = len(self._data)
        self._data.append(component_data)
        self._owners.append(obj)

    def remove_data(self, obj: int) -> None:
        """Remove the data of ``obj``; does nothing if the array is empty."""
        if not self._data:
            return
        try:
            index = self._index_of.pop(obj)
        except KeyError:
            raise KeyError(f"object {obj} has no data in this array") from None
        last_obj = self._owners.pop()
        last_data = self._data.pop()
        if index < len(self._data):
            self._data[index] = last_data
            self._owners[index] = last_obj
            self._index_of[last_obj] = index

    def get_component_data(self, obj: int) -> T:
        try:
            return self._data[self._index_of[obj]]
        except KeyError:
            raise KeyError(f"object {obj} has no data in this array") from None

    def on_object_death(self, obj: int) -> None:
        if obj in self._index_of:
            self.remove_data(obj)