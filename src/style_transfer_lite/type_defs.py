"""
Defines shared type aliases for style-transfer-lite.

Centralizes reusable type hints to improve consistency and readability.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Union

import torch

# (1, 1, 1, STYLE_BOTTLENECK_SIZE) float32 tensor
StyleDescriptor = torch.Tensor
TensorShape = tuple[int, ...]
ModelOutput = Union[
    torch.Tensor,
    Sequence[torch.Tensor],
    Mapping[str, torch.Tensor],
]


@dataclass(slots=True)
class InputPaths:
    """Content image path and style image path (or catalog name)."""

    content_path: str
    style_path: str
