"""Public package exports for style-transfer-lite."""

from __future__ import annotations

from .engine import EngineState, StyleTransferEngine
from .errors import (
    InvalidImageError,
    ModelUnavailableError,
    NoStyleSelectedError,
    ShapeMismatchError,
    StyleTransferError,
)
from .image_transforms import postprocess, preprocess
from .models import ModelAssetStore, ModelHandle

__all__ = [
    "EngineState",
    "InvalidImageError",
    "ModelAssetStore",
    "ModelHandle",
    "ModelUnavailableError",
    "NoStyleSelectedError",
    "ShapeMismatchError",
    "StyleTransferEngine",
    "StyleTransferError",
    "postprocess",
    "preprocess",
]
