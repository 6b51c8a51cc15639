"""
Test configuration and shared fixtures for style_transfer_lite.

Provides in-memory and on-disk images, a temporary model asset directory
populated with tiny scripted models, ready-made engines and config
builders.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from PIL import Image
from tiny_models import TinyStylePredict, TinyStyleTransfer, save_scripted

from style_transfer_lite.config import StyleTransferConfig
from style_transfer_lite.config_defaults import (
    DEFAULT_STYLE_PREDICT_MODEL,
    DEFAULT_STYLE_TRANSFER_MODEL,
)
from style_transfer_lite.constants import COLOR_MODE_RGB
from style_transfer_lite.engine import StyleTransferEngine
from style_transfer_lite.logging_utils import logger
from style_transfer_lite.models import ModelAssetStore


@pytest.fixture
def content_image() -> Image.Image:
    """A 512x512 solid red content photo."""
    return Image.new(COLOR_MODE_RGB, (512, 512), color="red")


@pytest.fixture
def style_image() -> Image.Image:
    """A 128 wide, 256 tall solid blue style image."""
    return Image.new(COLOR_MODE_RGB, (128, 256), color="blue")


@pytest.fixture
def content_image_file(tmp_path: Path, content_image: Image.Image) -> Path:
    """Save the content image as PNG and return its path."""
    path = tmp_path / "content.png"
    content_image.save(path)
    return path


@pytest.fixture
def style_image_file(tmp_path: Path, style_image: Image.Image) -> Path:
    """Save the style image as PNG and return its path."""
    path = tmp_path / "style.png"
    style_image.save(path)
    return path


@pytest.fixture(scope="session")
def model_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Directory holding scripted tiny predict and transfer models."""
    root = tmp_path_factory.mktemp("models")
    save_scripted(TinyStylePredict(), root / DEFAULT_STYLE_PREDICT_MODEL)
    save_scripted(TinyStyleTransfer(), root / DEFAULT_STYLE_TRANSFER_MODEL)
    return root


@pytest.fixture
def asset_store(model_dir: Path) -> ModelAssetStore:
    """Asset store over the tiny model directory."""
    return ModelAssetStore(model_dir)


@pytest.fixture
def engine(
    asset_store: ModelAssetStore,
) -> Generator[StyleTransferEngine, None, None]:
    """A READY engine on CPU, closed after the test."""
    with StyleTransferEngine(asset_store, device="cpu") as ready_engine:
        yield ready_engine


@pytest.fixture
def styles_dir(tmp_path: Path) -> Path:
    """A style catalog directory with two thumbnails and one stray file."""
    root = tmp_path / "thumbnails"
    root.mkdir()
    Image.new(COLOR_MODE_RGB, (64, 64), color="blue").save(root / "wave.png")
    Image.new(COLOR_MODE_RGB, (64, 32), color="orange").save(
        root / "starry night.jpg",
    )
    (root / "README.txt").write_text("not a style", encoding="utf-8")
    return root


@pytest.fixture
def make_style_transfer_config(
    tmp_path: Path,
    model_dir: Path,
    styles_dir: Path,
) -> Callable[..., StyleTransferConfig]:
    """
    Build StyleTransferConfig instances with optional section overrides.

    Defaults point at the tiny model directory, the test style catalog,
    a per-test output directory and the CPU.
    """
    default_output = tmp_path / "stl_outputs"

    def _build(**sections: dict[str, Any]) -> StyleTransferConfig:
        data: dict[str, dict[str, Any]] = {
            "models": {"asset_dir": str(model_dir)},
            "hardware": {"device": "cpu"},
            "catalog": {"styles_dir": str(styles_dir)},
            "output": {"output": str(default_output)},
        }
        for section, values in sections.items():
            data.setdefault(section, {}).update(values)
        return StyleTransferConfig.model_validate(data)

    return _build


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the package logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)
