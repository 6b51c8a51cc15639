"""Loading and saving images at the edge of the pipeline."""
from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageOps

from style_transfer_lite.constants import COLOR_MODE_RGB


def load_image(path: str | Path) -> Image.Image:
    """
    Load an image from disk, upright and in RGB.

    Camera photos often carry their rotation in EXIF metadata rather
    than in the pixel layout; that orientation is applied here so the
    engine always sees the picture the way it was taken.

    Args:
        path: Path to the image file

    Returns:
        PIL Image in RGB mode

    Raises:
        FileNotFoundError: If the image file does not exist
        OSError: If the image cannot be opened or decoded

    """
    try:
        with Image.open(path) as img:
            upright = ImageOps.exif_transpose(img)
            return upright.convert(COLOR_MODE_RGB)
    except FileNotFoundError as e:
        msg = f"Image file not found: '{path}'"
        raise FileNotFoundError(msg) from e
    except OSError as e:
        msg = f"Error loading image '{path}': {e!s}"
        raise OSError(msg) from e


def save_image(image: Image.Image, path: str | Path) -> Path:
    """Write an image, creating parent directories as needed."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(out_path)
    return out_path
