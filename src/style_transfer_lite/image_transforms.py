"""
Image transform stage around the two models.

Converts 8-bit PIL images into the float32 NHWC tensors the models
consume (center crop to a square, bilinear resize, scale to [0, 1]) and
turns the transfer model's output tensor back into an RGB image.
"""
from __future__ import annotations

import torch
from PIL import Image
from torchvision.transforms import InterpolationMode
from torchvision.transforms import functional as tv_functional

from style_transfer_lite.constants import (
    COLOR_MODE_RGB,
    PIXEL_MAX,
    SUPPORTED_IMAGE_MODES,
)
from style_transfer_lite.errors import InvalidImageError, ShapeMismatchError

_NHWC_RANK = 4
_RGB_CHANNELS = 3
# Placeholder for free dimensions in reported shapes
_ANY = -1


def validate_image(image: Image.Image) -> None:
    """
    Reject images the transform stage cannot turn into a tensor.

    Raises:
        InvalidImageError: If the object is not a PIL image, has a zero
            width or height, or uses an unsupported pixel mode.

    """
    if not isinstance(image, Image.Image):
        msg = f"Expected a PIL image, got {type(image).__name__}"
        raise InvalidImageError(msg)
    if image.width <= 0 or image.height <= 0:
        msg = f"Image has degenerate size {image.width}x{image.height}"
        raise InvalidImageError(msg)
    if image.mode not in SUPPORTED_IMAGE_MODES:
        msg = (f"Unsupported pixel format '{image.mode}'. "
               f"Supported: {', '.join(sorted(SUPPORTED_IMAGE_MODES))}")
        raise InvalidImageError(msg)


def image_to_chw(image: Image.Image) -> torch.Tensor:
    """Convert an image to a float32 [3, H, W] tensor in [0, 255]."""
    if image.mode != COLOR_MODE_RGB:
        image = image.convert(COLOR_MODE_RGB)
    return tv_functional.pil_to_tensor(image).to(torch.float32)


def center_crop_square(tensor: torch.Tensor) -> torch.Tensor:
    """
    Center-crop a [C, H, W] tensor to a square of side min(H, W).

    The crop is taken symmetrically from whichever axis is longer; the
    shorter axis is left untouched.
    """
    height, width = tensor.shape[-2:]
    crop_size = min(int(height), int(width))
    return tv_functional.center_crop(tensor, [crop_size, crop_size])


def resize_bilinear(
    tensor: torch.Tensor,
    target_height: int,
    target_width: int,
) -> torch.Tensor:
    """Resize a [C, H, W] tensor with plain (non-antialiased) bilinear."""
    return tv_functional.resize(
        tensor,
        [target_height, target_width],
        interpolation=InterpolationMode.BILINEAR,
        antialias=False,
    )


def normalize(tensor: torch.Tensor) -> torch.Tensor:
    """Map pixel values from [0, 255] to [0.0, 1.0]."""
    return tensor.div(PIXEL_MAX).clamp(0.0, 1.0)


def denormalize(tensor: torch.Tensor) -> torch.Tensor:
    """Map model output back to [0, 255], rounding and clamping."""
    # The transfer model is not strictly bounded and may overshoot.
    tensor = torch.nan_to_num(tensor, nan=0.0, posinf=1.0, neginf=0.0)
    return tensor.mul(PIXEL_MAX).round().clamp(0, PIXEL_MAX)


def preprocess(
    image: Image.Image,
    target_height: int,
    target_width: int,
) -> torch.Tensor:
    """
    Turn an image into a model input tensor.

    Args:
        image: Source image; any supported mode is converted to RGB.
        target_height: Output height in pixels.
        target_width: Output width in pixels.

    Returns:
        A float32 tensor of shape (1, target_height, target_width, 3)
        with values in [0.0, 1.0].

    Raises:
        InvalidImageError: If the image is empty or of an unsupported
            format.

    """
    validate_image(image)
    chw = image_to_chw(image)
    chw = center_crop_square(chw)
    chw = resize_bilinear(chw, target_height, target_width)
    chw = normalize(chw)
    return chw.permute(1, 2, 0).unsqueeze(0).contiguous()


def postprocess(tensor: torch.Tensor) -> Image.Image:
    """
    Turn a (1, H, W, 3) model output tensor into an H x W RGB image.

    Raises:
        ShapeMismatchError: If the tensor is not a single NHWC RGB image.

    """
    shape = tuple(tensor.shape)
    if len(shape) != _NHWC_RANK or shape[0] != 1 or shape[-1] != _RGB_CHANNELS:
        raise ShapeMismatchError(
            "postprocess input", (1, _ANY, _ANY, _RGB_CHANNELS), shape,
        )
    pixels = (
        denormalize(tensor.detach().cpu().to(torch.float32))
        .squeeze(0)
        .to(torch.uint8)
        .contiguous()
        .numpy()
    )
    return Image.fromarray(pixels)
