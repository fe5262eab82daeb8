"""Compiling, linking and feeding GLSL shader programs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np


def _shader_module() -> Any:
    from pyglet.graphics import shader

    return shader


class ShaderError(RuntimeError):
    """A shader failed to compile or link."""


def read_shader_file(path: str | Path) -> str:
    """Whole text of a shader source file."""
    return Path(path).read_text(encoding="utf-8")


class Shader:
    """A linked vertex and fragment shader program."""

    def __init__(self) -> None:
        self.program: int | None = None
        self._program: Any = None

    def _require(self) -> Any:
        if self._program is None:
            raise RuntimeError("shader program has not been created")
        return self._program

    def create(self, vertex_path: str | Path, frag_path: str | Path) -> None:
        vertex_source = read_shader_file(vertex_path)
        frag_source = read_shader_file(frag_path)
        module = _shader_module()
        try:
            vertex = module.Shader(vertex_source, "vertex")
            fragment = module.Shader(frag_source, "fragment")
            program = module.ShaderProgram(vertex, fragment)
        except module.ShaderException as exc:
            raise ShaderError(f"shader build failure:\n{exc}") from exc
        self._program = program
        self.program = program.id

    def use(self) -> None:
        self._require().use()

    def _set(self, name: str, value: Any) -> None:
        program = self._require()
        module = _shader_module()
        try:
            program[name] = value
        except module.ShaderException:
            # An unknown uniform is ignored, as GL does for location -1.
            pass

    def set_uniform_mat4(self, name: str, matrix: Any) -> None:
        """Upload a 4x4 matrix (row-major numpy convention) to a uniform."""
        array = np.asarray(matrix, dtype=np.float32)
        if array.shape != (4, 4):
            raise ValueError("matrix must be 4x4")
        self._set(name, tuple(float(v) for v in array.T.ravel()))

    def set_int(self, name: str, value: int) -> None:
        self._set(name, int(value))

    def delete(self) -> None:
        if self._program is not None:
            self._program.delete()
            self._program = None
            self.program = None