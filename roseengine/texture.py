"""2D textures uploaded from image files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from roseengine.image import Image
from roseengine.texture_param import TextureParameter


def _gl() -> Any:
    from pyglet import gl

    return gl


class Texture:
    """A GL_TEXTURE_2D with mipmaps, created from an image file."""

    def __init__(self) -> None:
        self.id: int | None = None
        self.image = Image()

    def generate(self, image_path: str | Path, params: TextureParameter | None = None) -> None:
        params = params or TextureParameter()
        image = Image(image_path)
        gl = _gl()
        handle = gl.GLuint()
        gl.glGenTextures(1, handle)
        self.id = handle.value
        self.image = image
        self.bind()
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, TextureParameter.to_gl_wrap(params.wrap_s))
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, TextureParameter.to_gl_wrap(params.wrap_t))
        gl.glTexParameteri(
            gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, TextureParameter.to_gl_filter(params.minify_filter)
        )
        gl.glTexParameteri(
            gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, TextureParameter.to_gl_filter(params.magnify_filter)
        )
        pixel_format = gl.GL_RGBA if image.channels == 4 else gl.GL_RGB
        data = image.data or b""
        pixels = (gl.GLubyte * len(data)).from_buffer_copy(data)
        gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D, 0, pixel_format, image.width, image.height, 0,
            pixel_format, gl.GL_UNSIGNED_BYTE, pixels,
        )
        gl.glGenerateMipmap(gl.GL_TEXTURE_2D)

    def bind(self) -> None:
        if self.id is None:
            raise RuntimeError("texture has not been generated")
        gl = _gl()
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.id)

    def delete(self) -> None:
        if self.id is not None:
            gl = _gl()
            gl.glDeleteTextures(1, gl.GLuint(self.id))
            self.id = None