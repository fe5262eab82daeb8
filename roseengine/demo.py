"""Example applications: a blank window, or a scene holding one object."""

from __future__ import annotations

import argparse
from typing import Sequence

from roseengine.application import Application
from roseengine.components import SpriteComponent, TransformComponent, ViewComponent
from roseengine.scene import Scene


class ExampleScene(Scene):
    """A scene with a single visible square in the middle."""

    def __init__(self) -> None:
        super().__init__()
        self.object: int | None = None

    def on_start(self) -> None:
        obj = self.create_game_object()
        self.add_components(obj, TransformComponent, ViewComponent, SpriteComponent)
        self.insert_component_data(
            obj, TransformComponent(position=(0.0, 0.0), rotation=0.0, scale=(150.0, 150.0))
        )
        self.insert_component_data(obj, ViewComponent(visible=True, layer=0))
        self.insert_component_data(obj, SpriteComponent(texture_id=0))
        self.object = obj

    def on_update(self, delta_time: float) -> None:
        pass


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="roseengine-demo", description="Run an example scene.")
    parser.add_argument("--blank", action="store_true", help="open an empty window only")
    parser.add_argument("--title", help="window title")
    parser.add_argument("--width", type=_positive_int, help="window width in pixels")
    parser.add_argument("--height", type=_positive_int, help="window height in pixels")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    if args.blank:
        title, width, height = "My Application Title", 600, 600
    else:
        title, width, height = "Title", 800, 600
    app = Application(args.title or title, args.width or width, args.height or height)
    if not args.blank:
        app.set_active_scene(ExampleScene())
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())