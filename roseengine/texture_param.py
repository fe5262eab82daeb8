"""Texture sampling parameters and their OpenGL enum values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

GL_REPEAT = 0x2901
GL_MIRRORED_REPEAT = 0x8370
GL_CLAMP_TO_EDGE = 0x812F
GL_CLAMP_TO_BORDER = 0x812D

GL_NEAREST = 0x2600
GL_LINEAR = 0x2601
GL_NEAREST_MIPMAP_NEAREST = 0x2700
GL_LINEAR_MIPMAP_NEAREST = 0x2701
GL_NEAREST_MIPMAP_LINEAR = 0x2702
GL_LINEAR_MIPMAP_LINEAR = 0x2703


class WrapMode(Enum):
    REPEAT = "repeat"
    MIRRORED_REPEAT = "mirrored_repeat"
    CLAMP_TO_EDGE = "clamp_to_edge"
    CLAMP_TO_BORDER = "clamp_to_border"


class FilterMode(Enum):
    NEAREST = "nearest"
    LINEAR = "linear"
    NEAREST_MIPMAP_NEAREST = "nearest_mipmap_nearest"
    LINEAR_MIPMAP_NEAREST = "linear_mipmap_nearest"
    NEAREST_MIPMAP_LINEAR = "nearest_mipmap_linear"
    LINEAR_MIPMAP_LINEAR = "linear_mipmap_linear"


_GL_WRAP = {
    WrapMode.REPEAT: GL_REPEAT,
    WrapMode.MIRRORED_REPEAT: GL_MIRRORED_REPEAT,
    WrapMode.CLAMP_TO_EDGE: GL_CLAMP_TO_EDGE,
    WrapMode.CLAMP_TO_BORDER: GL_CLAMP_TO_BORDER,
}

_GL_FILTER = {
    FilterMode.NEAREST: GL_NEAREST,
    FilterMode.LINEAR: GL_LINEAR,
    FilterMode.NEAREST_MIPMAP_NEAREST: GL_NEAREST_MIPMAP_NEAREST,
    FilterMode.LINEAR_MIPMAP_NEAREST: GL_LINEAR_MIPMAP_NEAREST,
    FilterMode.NEAREST_MIPMAP_LINEAR: GL_NEAREST_MIPMAP_LINEAR,
    FilterMode.LINEAR_MIPMAP_LINEAR: GL_LINEAR_MIPMAP_LINEAR,
}


@dataclass(frozen=True)
class TextureParameter:
    """How a texture wraps and filters when sampled."""

    wrap_s: WrapMode = WrapMode.REPEAT
    wrap_t: WrapMode = WrapMode.REPEAT
    minify_filter: FilterMode = FilterMode.LINEAR_MIPMAP_LINEAR
    magnify_filter: FilterMode = FilterMode.LINEAR

    @staticmethod
    def to_gl_wrap(mode: WrapMode) -> int:
        """OpenGL value for a wrap mode; anything unknown maps to GL_REPEAT."""
        return _GL_WRAP.get(mode, GL_REPEAT)

    @staticmethod
    def to_gl_filter(mode: FilterMode) -> int:
        """OpenGL value for a filter mode; anything unknown maps to GL_LINEAR."""
        return _GL_FILTER.get(mode, GL_LINEAR)