"""Style prediction stage: style image tensor -> style descriptor."""

from __future__ import annotations

from typing import TYPE_CHECKING

import torch

from style_transfer_lite.constants import (
    PREDICT_INPUT_SHAPE,
    PREDICT_OUTPUT_SHAPE,
    STYLE_BOTTLENECK_SIZE,
)
from style_transfer_lite.errors import ModelUnavailableError, ShapeMismatchError
from style_transfer_lite.models import first_output

if TYPE_CHECKING:  # pragma: no cover
    from style_transfer_lite.models import ModelHandle
    from style_transfer_lite.type_defs import StyleDescriptor


class StyleEncoder:
    """
    Runs the style prediction model.

    Maps a (1, 256, 256, 3) style tensor to a (1, 1, 1, 100) descriptor
    in a single forward pass. Nothing is cached between calls.
    """

    def __init__(self, handle: ModelHandle | None) -> None:
        self.handle = handle

    def encode(self, style_tensor: torch.Tensor) -> StyleDescriptor:
        """
        Encode a preprocessed style image.

        Raises:
            ModelUnavailableError: If the prediction model never loaded.
            ShapeMismatchError: If the input or output shape is wrong.

        """
        if self.handle is None:
            msg = "Style prediction model is not available"
            raise ModelUnavailableError(msg)
        if tuple(style_tensor.shape) != PREDICT_INPUT_SHAPE:
            raise ShapeMismatchError(
                "style prediction input",
                PREDICT_INPUT_SHAPE,
                tuple(style_tensor.shape),
            )

        output = first_output(self.handle.run(style_tensor))
        if output.numel() != STYLE_BOTTLENECK_SIZE:
            raise ShapeMismatchError(
                "style prediction output",
                PREDICT_OUTPUT_SHAPE,
                tuple(output.shape),
            )
        return output.to(torch.float32).reshape(PREDICT_OUTPUT_SHAPE)
