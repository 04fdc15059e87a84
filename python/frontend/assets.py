"""Locates the picture the puzzle is cut from."""

from __future__ import annotations

from pathlib import Path

IMAGE_NAME = "image.jpeg"
IMAGE_SUFFIXES = (".jpeg", ".jpg", ".png")


def find_image(assets_dir: Path) -> Path | None:
    """Return ``image.jpeg`` if present, else the first image in *assets_dir*."""
    preferred = assets_dir / IMAGE_NAME
    if preferred.is_file():
        return preferred
    if not assets_dir.is_dir():
        return None
    for path in sorted(assets_dir.iterdir()):
        if path.suffix.lower() in IMAGE_SUFFIXES:
            return path
    return None
