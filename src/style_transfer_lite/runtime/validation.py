"""Input validation helpers for the command-line runner."""

from __future__ import annotations

from pathlib import Path

from style_transfer_lite.catalog import StyleCatalog


def validate_input_paths(content_path: str, style_path: str) -> None:
    """Ensure the provided content and style paths point to files."""
    if not Path(content_path).is_file():
        msg = f"Content image not found: {content_path}"
        raise FileNotFoundError(msg)
    if not Path(style_path).is_file():
        msg = f"Style image not found: {style_path}"
        raise FileNotFoundError(msg)


def resolve_style_path(style: str, styles_dir: str) -> str:
    """
    Turn a style argument into an image path.

    An existing file is used as-is; anything else is looked up by name in
    the style catalog at ``styles_dir``.

    Raises:
        FileNotFoundError: If neither lookup finds an image.

    """
    if Path(style).is_file():
        return style
    return str(StyleCatalog(styles_dir).path_for(style))
