"""Locating files that ship inside the engine package."""

from __future__ import annotations

from pathlib import Path


def project_src_dir() -> Path:
    """Directory that holds the engine's sources and bundled assets."""
    return Path(__file__).resolve().parent


def create_path(relative: str | Path) -> Path:
    """Resolve ``relative`` against the engine source directory."""
    return project_src_dir() / relative