"""GPU vertex, index and vertex-array buffers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

GL_FLOAT = 0x1406


def _gl() -> Any:
    from pyglet import gl

    return gl


class BufferType(Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"


@dataclass(frozen=True)
class VertexAttribute:
    """Layout of one vertex attribute inside a buffer; stride and offset are in bytes."""

    index: int
    size: int
    type: int = GL_FLOAT
    normalized: bool = False
    stride: int = 0
    offset: int = 0


def _payload(array: np.ndarray | None) -> bytes | None:
    if array is None:
        return None
    return array.tobytes()


def _byte_count(array: np.ndarray | None, size: int | None) -> int:
    if size is None:
        if array is None:
            raise ValueError("size is required when no data is given")
        return array.nbytes
    if size < 0 or (array is not None and size > array.nbytes):
        raise ValueError(f"size {size} does not fit the data given")
    return size


def _generate_buffer() -> int:
    gl = _gl()
    handle = gl.GLuint()
    gl.glGenBuffers(1, handle)
    return handle.value


class _GLObject:
    _kind = "buffer"

    def __init__(self) -> None:
        self.id: int | None = None

    def _require(self) -> int:
        if self.id is None:
            raise RuntimeError(f"{self._kind} has not been generated")
        return self.id


class VertexBuffer(_GLObject):
    """A GL_ARRAY_BUFFER of 32-bit floats."""

    _kind = "vertex buffer"

    def __init__(self) -> None:
        super().__init__()
        self.buffer_type = BufferType.STATIC

    def generate(self, buffer_type: BufferType) -> None:
        self.id = _generate_buffer()
        self.buffer_type = buffer_type

    def add_data(self, data: Any, size: int | None = None) -> None:
        """Allocate the buffer with ``size`` bytes, filled from ``data`` if given."""
        self._require()
        array = None if data is None else np.ascontiguousarray(data, dtype=np.float32)
        count = _byte_count(array, size)
        gl = _gl()
        self.bind()
        usage = gl.GL_STATIC_DRAW if self.buffer_type is BufferType.STATIC else gl.GL_DYNAMIC_DRAW
        gl.glBufferData(gl.GL_ARRAY_BUFFER, count, _payload(array), usage)

    def update_data(self, data: Any, size: int | None = None) -> None:
        """Overwrite the start of the buffer with ``data``."""
        self._require()
        array = np.ascontiguousarray(data, dtype=np.float32)
        count = _byte_count(array, size)
        gl = _gl()
        self.bind()
        gl.glBufferSubData(gl.GL_ARRAY_BUFFER, 0, count, _payload(array))

    def bind(self) -> None:
        gl = _gl()
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self._require())

    def unbind(self) -> None:
        gl = _gl()
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)

    def delete(self) -> None:
        if self.id is not None:
            gl = _gl()
            gl.glDeleteBuffers(1, gl.GLuint(self.id))
            self.id = None


class IndexBuffer(_GLObject):
    """A GL_ELEMENT_ARRAY_BUFFER of unsigned 32-bit indices."""

    _kind = "index buffer"

    def generate(self) -> None:
        self.id = _generate_buffer()

    def add_indices(self, indices: Any) -> None:
        self._require()
        array = np.ascontiguousarray(indices, dtype=np.uint32)
        gl = _gl()
        self.bind()
        gl.glBufferData(gl.GL_ELEMENT_ARRAY_BUFFER, array.nbytes, _payload(array), gl.GL_STATIC_DRAW)

    def bind(self) -> None:
        gl = _gl()
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self._require())

    def unbind(self) -> None:
        gl = _gl()
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, 0)

    def delete(self) -> None:
        if self.id is not None:
            gl = _gl()
            gl.glDeleteBuffers(1, gl.GLuint(self.id))
            self.id = None


class VertexArray(_GLObject):
    """A vertex array object recording attribute layouts."""

    _kind = "vertex array"

    def generate(self) -> None:
        gl = _gl()
        handle = gl.GLuint()
        gl.glGenVertexArrays(1, handle)
        self.id = handle.value

    def bind(self) -> None:
        _gl().glBindVertexArray(self._require())

    def unbind(self) -> None:
        _gl().glBindVertexArray(0)

    def _set_pointer(self, attribute: VertexAttribute) -> Any:
        self.bind()
        gl = _gl()
        gl.glVertexAttribPointer(
            attribute.index,
            attribute.size,
            attribute.type,
            gl.GL_TRUE if attribute.normalized else gl.GL_FALSE,
            attribute.stride,
            attribute.offset,
        )
        gl.glEnableVertexAttribArray(attribute.index)
        return gl

    def add_attribute(self, attribute: VertexAttribute) -> None:
        self._require()
        self._set_pointer(attribute)

    def add_instanced_attribute(self, attribute: VertexAttribute) -> None:
        """Add an attribute that advances once per instance."""
        self._require()
        self._set_pointer(attribute).glVertexAttribDivisor(attribute.index, 1)

    def delete(self) -> None:
        if self.id is not None:
            gl = _gl()
            gl.glDeleteVertexArrays(1, gl.GLuint(self.id))
            self.id = None