"""
Style thumbnail catalog.

Enumerates the style images shipped in a directory so users can pick one
by name. The engine itself never browses styles; it only receives the
chosen image.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from style_transfer_lite.constants import STYLE_IMAGE_SUFFIXES
from style_transfer_lite.image_io import load_image

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator

    from PIL import Image


class StyleCatalog:
    """Style images found in one directory, addressed by file stem."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def _entries(self) -> dict[str, Path]:
        if not self.directory.is_dir():
            return {}
        return {
            path.stem: path
            for path in sorted(self.directory.iterdir())
            if path.is_file() and path.suffix.lower() in STYLE_IMAGE_SUFFIXES
        }

    def names(self) -> list[str]:
        """Sorted style names (file stems)."""
        return sorted(self._entries())

    def path_for(self, name: str) -> Path:
        """
        Resolve a style by stem (``starry_night``) or file name.

        Raises:
            FileNotFoundError: If no such style exists.

        """
        entries = self._entries()
        stem = Path(name).stem if Path(name).suffix else name
        if stem not in entries:
            msg = f"Style '{name}' not found in {self.directory}"
            raise FileNotFoundError(msg)
        return entries[stem]

    def load(self, name: str) -> Image.Image:
        """Load the named style image in RGB."""
        return load_image(self.path_for(name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._entries()

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._entries())
