import pytest

from roseengine.texture import Texture


def test_new_texture_is_empty():
    texture = Texture()
    assert texture.id is None
    assert texture.image.data is None


def test_bind_before_generate_raises():
    with pytest.raises(RuntimeError):
        Texture().bind()


def test_generate_missing_image_raises_without_allocating(tmp_path):
    texture = Texture()
    with pytest.raises(OSError):
        texture.generate(tmp_path / "absent.png")
    assert texture.id is None


def test_delete_without_generate_keeps_none():
    texture = Texture()
    texture.delete()
    assert texture.id is None