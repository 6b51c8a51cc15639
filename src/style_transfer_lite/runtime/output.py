"""Helpers for output locations and the saved stylized image."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import style_transfer_lite.image_io as stl_image_io
from style_transfer_lite.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable

    from PIL import Image

FALLBACK_OUTPUT_DIR = "style_transfer_output"


def setup_output_directory(
    output_path: str,
    path_factory: Callable[[str], Path] = Path,
) -> Path:
    """
    Create the output directory if needed and return it.

    Falls back to ``style_transfer_output`` in the working directory when
    the requested location cannot be created.
    """
    resolved_path = path_factory(output_path)
    try:
        resolved_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Failed to create output directory %s: %s",
                     resolved_path, e)
        fallback_path = path_factory(FALLBACK_OUTPUT_DIR)
        fallback_path.mkdir(parents=True, exist_ok=True)
        logger.info("Using fallback directory: %s", fallback_path)
        return fallback_path
    return resolved_path


def _canonical_stem(path: Path) -> str:
    """Return a filesystem-safe stem (spaces mapped to underscores)."""
    return path.stem.replace(" ", "_")


def stylized_image_path_from_paths(
    output_dir: Path,
    content_path: Path,
    style_path: Path,
) -> Path:
    """Return ``stylized_<content>_x_<style>.png`` inside output_dir."""
    return output_dir / (
        f"stylized_{_canonical_stem(content_path)}"
        f"_x_{_canonical_stem(style_path)}.png"
    )


def save_stylized_image(image: Image.Image, path: Path) -> Path:
    """Persist the engine's result and log where it went."""
    saved = stl_image_io.save_image(image, path)
    logger.info("Stylized image saved to: %s", saved)
    return saved
