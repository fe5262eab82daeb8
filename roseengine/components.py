"""Built-in component types, limits of the component system and component flags."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping

MAX_COMPONENTS = 12
MAX_OBJECTS = 2000

GameObject = int
Vec2 = tuple[float, float]


@dataclass
class ViewComponent:
    """Whether an object is drawn, and on which layer."""

    visible: bool = False
    layer: int = 0


@dataclass
class TransformComponent:
    """Placement of an object in the world; rotation is in degrees."""

    position: Vec2 = (0.0, 0.0)
    rotation: float = 0.0
    scale: Vec2 = (0.0, 0.0)


@dataclass
class SpriteComponent:
    """Texture drawn for an object; 0 selects the renderer's default texture."""

    texture_id: int = 0


@dataclass
class RigidBodyComponent:
    acceleration: Vec2 = (0.0, 0.0)
    velocity: Vec2 = (0.0, 0.0)


class ComponentFlags:
    """Fixed-width bit set recording which components an object carries."""

    __slots__ = ("_bits",)
    size = MAX_COMPONENTS

    def __init__(self) -> None:
        self._bits = 0

    def _check(self, position: int) -> int:
        position = int(position)
        if not 0 <= position < self.size:
            raise IndexError(f"flag position {position} is outside 0..{self.size - 1}")
        return position

    def set(self, position: int) -> None:
        self._bits |= 1 << self._check(position)

    def reset(self) -> None:
        self._bits = 0

    def test(self, position: int) -> bool:
        return bool(self._bits >> self._check(position) & 1)

    def any(self) -> bool:
        return self._bits != 0

    def count(self) -> int:
        return bin(self._bits).count("1")

    def __iter__(self) -> Iterator[int]:
        return (position for position in range(self.size) if self._bits >> position & 1)

    def __int__(self) -> int:
        return self._bits

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComponentFlags):
            return NotImplemented
        return self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ComponentFlags({self._bits:0{self.size}b})"


def component_name(component_type: type) -> str:
    """Stable key identifying a component type."""
    return f"{component_type.__module__}.{component_type.__qualname__}"


def create_component_flags(id_map: Mapping[str, int], *args: type) -> ComponentFlags:
    """Flags with the bit of every given component type set.

    Raises KeyError if a type is missing from ``id_map``.
    """
    flags = ComponentFlags()
    for component_type in args:
        name = component_name(component_type)
        try:
            flags.set(id_map[name])
        except KeyError:
            raise KeyError(f"component {name} is not registered") from None
    return flags