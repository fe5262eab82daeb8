# roseengine

A small 2D game engine. A game is built from **scenes** that hold **game
objects**. Each object carries plain data **components** such as position,
size, visibility and sprite. **Systems** run over the live objects every
frame. Sprites are drawn as instanced quads with OpenGL, in a window opened
through pyglet.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Shaders and default texture

The renderer needs a vertex shader, a fragment shader and a default texture.
`roseengine.renderer.Renderer` looks for them at these paths inside the
installed `roseengine` package directory:

- `assets/shaders/default.vert`
- `assets/shaders/default.frag`
- `assets/textures/default.png`

The package does **not** include these files. You can put them at those
paths. You can also pass your own paths instead:

```python
from roseengine.application import Application
from roseengine.renderer import Renderer

renderer = Renderer("my.vert", "my.frag", "default.png")
app = Application("My Game", 800, 600, renderer=renderer)
```

The vertex shader receives these inputs:

- attribute 0: the quad position (`vec2`)
- attribute 1: the UV coordinates (`vec2`)
- attributes 2–5: the columns of a per-instance model matrix

It also receives these uniforms:

- `uProjection` and `uView` (`mat4`)
- `uTexture` (sampler unit 0)

## Trying it out

```
roseengine-demo
```

This opens an 800×600 window titled "Title" with one 150×150 square in the
middle, drawn with the default texture.

Options:

- `--blank` opens an empty 600×600 window instead.
- `--title`, `--width` and `--height` override the window title and size.

Close the window to quit. The demo needs the shader and texture files
described above.

## Writing a scene

Subclass `Scene`. Create objects in `on_start` and change them in
`on_update`.

The render system reads a `TransformComponent`, a `ViewComponent` and a
`SpriteComponent` from every live object. Give each object all three.

```python
from roseengine.application import Application
from roseengine.components import SpriteComponent, TransformComponent, ViewComponent
from roseengine.scene import Scene


class MyScene(Scene):
    def on_start(self):
        self.player = self.create_game_object()
        self.add_components(self.player, TransformComponent, ViewComponent, SpriteComponent)
        self.insert_component_data(
            self.player,
            TransformComponent(position=(0.0, 0.0), rotation=0.0, scale=(150.0, 150.0)),
        )
        self.insert_component_data(self.player, ViewComponent(visible=True, layer=0))
        self.insert_component_data(self.player, SpriteComponent(texture_id=0))

    def on_update(self, delta_time):
        transform = self.get_component(self.player, TransformComponent)
        transform.rotation += 90.0 * delta_time


app = Application("My Game", 800, 600)
app.set_active_scene(MyScene())
app.run()
```

## Running the application

`Application.run()` repeats these steps each frame until the window is
closed:

1. Process window events.
2. Call the scene's `on_update`.
3. Advance timers and run all systems.
4. Draw the frame.

The window is closed when `run()` returns.

## Parts of the engine

### Scenes

`roseengine.scene.Scene` provides:

- **Objects:** `create_game_object` and `destroy_game_object`.
- **Components:** `register_component`, `add_components`,
  `insert_component_data`, `remove_component_data` and `get_component`.
- **Systems:** `register_system` and `remove_system`.
- **Timers:** `create_timer`, `start_timer`, `pause_timer` and
  `delete_timer`.
- **Camera:** `set_camera_position`, `move_camera`, `set_camera_zoom` and
  `camera_view_matrix`.

### Components

`roseengine.components` defines the built-in components:

- `ViewComponent`
- `TransformComponent`
- `SpriteComponent`
- `RigidBodyComponent`

It also defines these limits:

- `MAX_OBJECTS` (2000 live objects)
- `MAX_COMPONENTS` (12 component types per scene)

A scene registers the four built-in component types itself.

### Systems

To write a system, subclass `roseengine.systems.System` and implement
`on_update(objects, scene, delta_time)`. Then add it with
`Scene.register_system`. `objects` holds the living object ids in ascending
order.

### Timers

`roseengine.timer.TimerManager` runs timers measured in milliseconds. A timer
either fires once and is removed, or repeats.

Timers start paused. Call `start_timer` to run one.

### Input

`roseengine.input.Input.is_key_down(KeyCode.KEY_SPACE)` polls the keyboard
state. Key codes are listed in `roseengine.keycodes.KeyCode`.

### Events

`roseengine.events` defines these events:

- `WindowCloseEvent`
- `WindowResizeEvent`
- `KeyPressedEvent`
- `KeyReleasedEvent`
- `MouseMovedEvent`
- `MouseButtonPressedEvent`

To react to them, override `Scene.on_event` or `Application.on_event`.
`EventDispatcher(event).dispatch(EventClass, handler)` calls the handler only
when the event is of that class.

### Textures

`Scene.create_texture(path, params)` loads an image through the
application's renderer and returns its texture id. Put that id on a
`SpriteComponent` to draw the image; id 0 means the default texture.

If the scene was created with `assets_path`, images are looked up in that
directory's `Textures` folder.

`roseengine.texture_param.TextureParameter` chooses the wrap and filter
modes.

### Lower-level graphics

These modules wrap the OpenGL objects used by the renderer:

- `roseengine.buffer`
- `roseengine.shader`
- `roseengine.texture`
- `roseengine.image`

## What it does not do

The engine does not provide:

- physics: `RigidBodyComponent` is stored, but no system uses it;
- audio;
- window resizing;
- events for mouse button releases or scrolling.