"""Tests for the style thumbnail catalog."""
from pathlib import Path

import pytest

from style_transfer_lite.catalog import StyleCatalog
from style_transfer_lite.constants import COLOR_MODE_RGB


def test_names_are_sorted_image_stems(styles_dir: Path) -> None:
    catalog = StyleCatalog(styles_dir)
    assert catalog.names() == ["starry night", "wave"]
    assert list(catalog) == ["starry night", "wave"]
    assert len(catalog) == 2  # noqa: PLR2004


def test_contains(styles_dir: Path) -> None:
    catalog = StyleCatalog(styles_dir)
    assert "wave" in catalog
    assert "README" not in catalog
    assert 3 not in catalog


@pytest.mark.parametrize("name", ["wave", "wave.png"])
def test_path_for_by_stem_or_filename(styles_dir: Path, name: str) -> None:
    assert StyleCatalog(styles_dir).path_for(name) == styles_dir / "wave.png"


def test_path_for_unknown(styles_dir: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Style 'monet' not found"):
        StyleCatalog(styles_dir).path_for("monet")


def test_load(styles_dir: Path) -> None:
    img = StyleCatalog(str(styles_dir)).load("starry night")
    assert img.mode == COLOR_MODE_RGB
    assert img.size == (64, 32)


def test_missing_directory_is_empty(tmp_path: Path) -> None:
    catalog = StyleCatalog(tmp_path / "nowhere")
    assert catalog.names() == []
    assert len(catalog) == 0
