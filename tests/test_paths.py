from pathlib import Path

import roseengine.paths as paths
from roseengine.paths import create_path, project_src_dir


def test_project_src_dir_is_package_directory():
    root = project_src_dir()
    assert root.is_dir()
    assert root == Path(paths.__file__).resolve().parent


def test_create_path_joins_under_root():
    relative = Path("assets") / "shaders" / "default_vert.glsl"
    result = create_path(relative)
    assert result == project_src_dir() / relative
    assert result.relative_to(project_src_dir()) == relative


def test_create_path_accepts_strings():
    assert create_path("a/b.txt") == project_src_dir() / "a" / "b.txt"


def test_create_path_keeps_absolute_path(tmp_path):
    assert create_path(tmp_path) == tmp_path


def test_existing_module_found():
    assert create_path("paths.py").is_file()