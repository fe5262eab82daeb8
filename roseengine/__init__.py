"""A small 2D game engine: scenes, an entity-component-system core and instanced sprite rendering."""

__version__ = "0.1.0"