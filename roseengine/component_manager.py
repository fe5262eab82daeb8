"""Registry of component types and their storage arrays."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, MutableSequence, TypeVar

from roseengine.component_array import ComponentArray
from roseengine.components import (
    MAX_COMPONENTS,
    ComponentFlags,
    component_name,
    create_component_flags,
)

T = TypeVar("T")


class ComponentManager:
    """Gives each registered component type a flag bit and an array of data."""

    def __init__(self) -> None:
        self._next_flag = 0
        self._ids: dict[str, int] = {}
        self._arrays: dict[str, ComponentArray[Any]] = {}

    @property
    def component_ids(self) -> Mapping[str, int]:
        return MappingProxyType(self._ids)

    def register_component(self, component_type: type) -> int:
        """Register a component type and return its flag bit."""
        name = component_name(component_type)
        if name in self._ids:
            raise ValueError(f"component {name} is already registered")
        if self._next_flag >= MAX_COMPONENTS:
            raise ValueError(f"no more than {MAX_COMPONENTS} component types can be registered")
        flag = self._next_flag
        self._next_flag += 1
        self._ids[name] = flag
        self._arrays[name] = ComponentArray()
        return flag

    def add_components(
        self, obj: int, flags_array: MutableSequence[ComponentFlags], *args: type
    ) -> None:
        """Mark ``obj`` in ``flags_array`` as carrying exactly the given component types."""
        flags_array[obj] = create_component_flags(self._ids, *args)

    def insert_component_data(self, obj: int, component: Any) -> None:
        self._array(type(component)).insert_component_data(obj, component)

    def remove_component_data(self, obj: int, component_type: type) -> None:
        self._array(component_type).remove_data(obj)

    def get_component_data(self, obj: int, component_type: type[T]) -> T:
        return self._array(component_type).get_component_data(obj)

    def on_object_death(self, obj: int) -> None:
        for array in self._arrays.values():
            array.on_object_death(obj)

    def _array(self, component_type: type) -> ComponentArray[Any]:
        name = component_name(component_type)
        try:
            return self._arrays[name]
        except KeyError:
            raise KeyError(f"component {name} is not registered") from None