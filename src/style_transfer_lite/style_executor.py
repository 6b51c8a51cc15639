"""
Style transfer stage: content tensor + style descriptor -> stylized tensor.

The transfer model takes two inputs and may expose several outputs
(a tuple, a list or a mapping of named tensors). Only the first output
is consumed; the rest are dropped without being inspected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import torch

from style_transfer_lite.constants import (
    PREDICT_OUTPUT_SHAPE,
    TRANSFER_INPUT_SHAPE,
    TRANSFER_OUTPUT_SHAPE,
)
from style_transfer_lite.errors import ModelUnavailableError, ShapeMismatchError
from style_transfer_lite.models import first_output

if TYPE_CHECKING:  # pragma: no cover
    from style_transfer_lite.models import ModelHandle
    from style_transfer_lite.type_defs import StyleDescriptor


class StyleTransferExecutor:
    """Runs the style transfer model on a content tensor and descriptor."""

    def __init__(self, handle: ModelHandle | None) -> None:
        self.handle = handle

    def execute(
        self,
        content_tensor: torch.Tensor,
        style_descriptor: StyleDescriptor,
    ) -> torch.Tensor:
        """
        Stylize a preprocessed content image.

        Args:
            content_tensor: Tensor of shape (1, 384, 384, 3).
            style_descriptor: Tensor of shape (1, 1, 1, 100).

        Returns:
            The model's first output, shape (1, 384, 384, 3).

        Raises:
            ModelUnavailableError: If the transfer model never loaded.
            ShapeMismatchError: If an input or the output has the wrong
                shape.

        """
        if self.handle is None:
            msg = "Style transfer model is not available"
            raise ModelUnavailableError(msg)
        _check_shape("content input", content_tensor, TRANSFER_INPUT_SHAPE)
        _check_shape("style descriptor", style_descriptor, PREDICT_OUTPUT_SHAPE)

        outputs = self.handle.run(content_tensor, style_descriptor)
        stylized = first_output(outputs)
        _check_shape("style transfer output", stylized, TRANSFER_OUTPUT_SHAPE)
        return stylized


def _check_shape(
    what: str,
    tensor: torch.Tensor,
    expected: tuple[int, ...],
) -> None:
    if tuple(tensor.shape) != expected:
        raise ShapeMismatchError(what, expected, tuple(tensor.shape))
