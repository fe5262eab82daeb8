"""Instanced quad renderer and the system that feeds it from the scene."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import groupby
from pathlib import Path
from typing import Any, Iterable, Iterator

import numpy as np

from roseengine.buffer import BufferType, IndexBuffer, VertexArray, VertexAttribute, VertexBuffer
from roseengine.components import MAX_OBJECTS, SpriteComponent, TransformComponent, ViewComponent
from roseengine.paths import create_path
from roseengine.shader import Shader
from roseengine.systems import System
from roseengine.texture import Texture
from roseengine.texture_param import TextureParameter

_FLOAT = 4
_MAT4_BYTES = 16 * _FLOAT


@dataclass(frozen=True)
class Vertex:
    position: tuple[float, float]
    uv: tuple[float, float]


QUAD_VERTICES = (
    Vertex((-1.0, -1.0), (0.0, 0.0)),
    Vertex((1.0, -1.0), (1.0, 0.0)),
    Vertex((1.0, 1.0), (1.0, 1.0)),
    Vertex((-1.0, 1.0), (0.0, 1.0)),
)
QUAD_INDICES = (0, 1, 2, 0, 2, 3)


@dataclass
class InstanceData:
    transform: np.ndarray
    layer: int
    texture_id: int


def model_matrix(transform: TransformComponent) -> np.ndarray:
    """Translate, then rotate about Z (degrees), then scale."""
    x, y = transform.position
    sx, sy = transform.scale
    angle = math.radians(transform.rotation)
    c, s = math.cos(angle), math.sin(angle)
    translate = np.eye(4, dtype=np.float32)
    translate[0, 3], translate[1, 3] = x, y
    rotate = np.eye(4, dtype=np.float32)
    rotate[:2, :2] = [[c, -s], [s, c]]
    scale = np.diag([sx, sy, 1.0, 1.0]).astype(np.float32)
    return translate @ rotate @ scale


def ortho_projection(width: float, height: float, zoom: float) -> np.ndarray:
    """Orthographic projection centred on the origin, depth range -1..1."""
    if zoom == 0:
        raise ValueError("zoom must not be zero")
    right = width / 2.0 / zoom
    top = height / 2.0 / zoom
    left, bottom, near, far = -right, -top, -1.0, 1.0
    matrix = np.eye(4, dtype=np.float32)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -2.0 / (far - near)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(far + near) / (far - near)
    return matrix


def batch_instances(
    instances: Iterable[InstanceData], default_texture_id: int
) -> Iterator[tuple[int, list[np.ndarray]]]:
    """Group instances, ordered by layer, into runs sharing one texture.

    Texture id 0 stands for the default texture.
    """
    ordered = sorted(instances, key=lambda instance: instance.layer)
    resolve = lambda instance: instance.texture_id or default_texture_id  # noqa: E731
    for texture_id, run in groupby(ordered, key=resolve):
        yield texture_id, [instance.transform for instance in run]


def _column_major(matrices: Iterable[np.ndarray]) -> np.ndarray:
    return np.ascontiguousarray(
        [np.asarray(m, dtype=np.float32).T for m in matrices], dtype=np.float32
    ).reshape(-1)


class Renderer:
    """Draws textured quads in instanced batches."""

    def __init__(
        self,
        vertex_shader_path: str | Path | None = None,
        fragment_shader_path: str | Path | None = None,
        default_texture_path: str | Path | None = None,
    ) -> None:
        self.vertex_shader_path = vertex_shader_path or create_path("assets/shaders/default.vert")
        self.fragment_shader_path = fragment_shader_path or create_path("assets/shaders/default.frag")
        self.default_texture_path = default_texture_path or create_path("assets/textures/default.png")
        self.instances: list[InstanceData] = []
        self.instance_count = 0
        self.default_texture_id = 0
        self._textures: dict[int, Texture] = {}
        self._shader = Shader()
        self._vao = VertexArray()
        self._vbo = VertexBuffer()
        self._instance_vbo = VertexBuffer()
        self._ebo = IndexBuffer()

    def init(self) -> None:
        self._shader.create(self.vertex_shader_path, self.fragment_shader_path)
        self.default_texture_id = self.create_texture(self.default_texture_path)

        self._vao.generate()
        self._vao.bind()
        self._vbo.generate(BufferType.STATIC)
        vertices = np.array([(*v.position, *v.uv) for v in QUAD_VERTICES], dtype=np.float32)
        self._vbo.add_data(vertices)
        stride = 4 * _FLOAT
        self._vao.add_attribute(VertexAttribute(index=0, size=2, stride=stride, offset=0))
        self._vao.add_attribute(VertexAttribute(index=1, size=2, stride=stride, offset=2 * _FLOAT))

        self._ebo.generate()
        self._ebo.add_indices(QUAD_INDICES)

        self._instance_vbo.generate(BufferType.DYNAMIC)
        self._instance_vbo.add_data(None, _MAT4_BYTES * MAX_OBJECTS)
        for column in range(4):
            self._vao.add_instanced_attribute(
                VertexAttribute(index=2 + column, size=4, stride=_MAT4_BYTES, offset=4 * _FLOAT * column)
            )

    def create_texture(self, path: str | Path, params: TextureParameter | None = None) -> int:
        texture = Texture()
        texture.generate(path, params)
        assert texture.id is not None
        self._textures[texture.id] = texture
        return texture.id

    def buffer_quads(self, transforms: Iterable[np.ndarray], instance_count: int) -> None:
        self.instance_count = instance_count
        self._instance_vbo.update_data(_column_major(transforms))

    def render_scene(self, window: Any, view: np.ndarray, zoom: float) -> None:
        from pyglet import gl

        self._shader.use()
        gl.glActiveTexture(gl.GL_TEXTURE0)
        width, height = window.get_framebuffer_size()
        self._shader.set_uniform_mat4("uProjection", ortho_projection(width, height, zoom))
        self._shader.set_uniform_mat4("uView", view)
        self._shader.set_int("uTexture", 0)
        self._vao.bind()
        for texture_id, transforms in batch_instances(self.instances, self.default_texture_id):
            self._textures[texture_id].bind()
            self.buffer_quads(transforms, len(transforms))
            gl.glDrawElementsInstanced(
                gl.GL_TRIANGLES, len(QUAD_INDICES), gl.GL_UNSIGNED_INT, None, len(transforms)
            )


class RenderSystem(System):
    """Collects the visible objects of a scene into the renderer's instance list."""

    def __init__(self, renderer: Any) -> None:
        self.renderer = renderer

    def on_update(self, objects: Iterable[int], scene: Any, delta_time: float) -> None:
        self.renderer.instances.clear()
        for obj in objects:
            transform = scene.get_component(obj, TransformComponent)
            view = scene.get_component(obj, ViewComponent)
            sprite = scene.get_component(obj, SpriteComponent)
            if not view.visible:
                continue
            self.renderer.instances.append(
                InstanceData(model_matrix(transform), view.layer, sprite.texture_id)
            )
        self.renderer.instance_count = len(self.renderer.instances)