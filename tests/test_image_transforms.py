"""
Tests for the image transform stage.

Covers:
- preprocess shape and value range for assorted sizes and modes
- center crop geometry
- postprocess scaling, clamping and shape checks
- rejection of degenerate images
"""

import numpy as np
import pytest
import torch
from PIL import Image

import style_transfer_lite.image_transforms as stl_transforms
from style_transfer_lite.constants import COLOR_MODE_RGB
from style_transfer_lite.errors import InvalidImageError, ShapeMismatchError


class TestPreprocess:
    """Shape, range and mode handling of preprocess()."""

    @pytest.mark.parametrize(
        ("size", "target"),
        [
            ((512, 512), (384, 384)),
            ((128, 256), (256, 256)),
            ((640, 480), (384, 384)),
            ((7, 3), (256, 256)),
            ((1, 1), (10, 20)),
        ],
    )
    def test_shape_and_range(
        self,
        size: tuple[int, int],
        target: tuple[int, int],
    ) -> None:
        """Output is (1, H, W, 3) float32 in [0, 1] for any valid size."""
        rng = np.random.default_rng(0)
        pixels = rng.integers(0, 256, size=(size[1], size[0], 3),
                              dtype=np.uint8)
        img = Image.fromarray(pixels)

        tensor = stl_transforms.preprocess(img, *target)

        assert tuple(tensor.shape) == (1, target[0], target[1], 3)
        assert tensor.dtype == torch.float32
        assert tensor.min() >= 0.0
        assert tensor.max() <= 1.0

    def test_solid_color_is_normalized(self) -> None:
        """A solid image maps to exact channel / 255 values."""
        img = Image.new(COLOR_MODE_RGB, (300, 200), color=(255, 0, 51))
        tensor = stl_transforms.preprocess(img, 16, 16)
        expected = torch.tensor([1.0, 0.0, 0.2])
        assert torch.allclose(tensor[0, 5, 5], expected)
        assert torch.allclose(tensor[0, 0, 0], tensor[0, 15, 15])

    @pytest.mark.parametrize("mode", ["RGBA", "L", "P", "LA"])
    def test_other_modes_are_converted(self, mode: str) -> None:
        """Greyscale, palette and alpha images come out with 3 channels."""
        img = Image.new(COLOR_MODE_RGB, (40, 30), color="green").convert(mode)
        tensor = stl_transforms.preprocess(img, 8, 8)
        assert tuple(tensor.shape) == (1, 8, 8, 3)

    @pytest.mark.parametrize("size", [(0, 10), (10, 0), (0, 0)])
    def test_zero_sized_image_rejected(self, size: tuple[int, int]) -> None:
        """Degenerate images fail fast instead of reaching a model."""
        img = Image.new(COLOR_MODE_RGB, size)
        with pytest.raises(InvalidImageError, match="degenerate size"):
            stl_transforms.preprocess(img, 384, 384)

    def test_unsupported_mode_rejected(self) -> None:
        """Float and 16-bit modes are not silently squashed to 8 bits."""
        img = Image.new("F", (10, 10))
        with pytest.raises(InvalidImageError, match="Unsupported pixel"):
            stl_transforms.preprocess(img, 8, 8)

    def test_non_image_rejected(self) -> None:
        """Passing a tensor instead of an image is an InvalidImageError."""
        with pytest.raises(InvalidImageError, match="Expected a PIL image"):
            stl_transforms.preprocess(torch.zeros(3, 4, 4), 8, 8)

    def test_invalid_image_is_value_error(self) -> None:
        """InvalidImageError can also be caught as ValueError."""
        with pytest.raises(ValueError):
            stl_transforms.validate_image(Image.new(COLOR_MODE_RGB, (0, 4)))


class TestCenterCrop:
    """Geometry of center_crop_square()."""

    def test_wide_image_cropped_horizontally(self) -> None:
        """A 200x100 image keeps columns 50..149 and every row."""
        columns = torch.arange(200, dtype=torch.float32)
        chw = columns.expand(3, 100, 200).clone()

        cropped = stl_transforms.center_crop_square(chw)

        assert tuple(cropped.shape) == (3, 100, 100)
        assert cropped[0, 0, 0].item() == 50  # noqa: PLR2004
        assert cropped[0, 0, -1].item() == 149  # noqa: PLR2004
        assert torch.equal(cropped[:, 0], cropped[:, -1])

    def test_tall_image_cropped_vertically(self) -> None:
        """A 100x200 (w x h) image keeps rows 50..149."""
        rows = torch.arange(200, dtype=torch.float32).unsqueeze(1)
        chw = rows.expand(200, 100).expand(3, 200, 100).clone()

        cropped = stl_transforms.center_crop_square(chw)

        assert tuple(cropped.shape) == (3, 100, 100)
        assert cropped[0, 0, 0].item() == 50  # noqa: PLR2004
        assert cropped[0, -1, 0].item() == 149  # noqa: PLR2004

    def test_square_image_untouched(self) -> None:
        """Square input passes through unchanged."""
        chw = torch.rand(3, 64, 64)
        assert torch.equal(stl_transforms.center_crop_square(chw), chw)


def test_resize_bilinear_blends_neighbours() -> None:
    """Upscaling a two-pixel ramp produces intermediate values."""
    chw = torch.tensor([[[0.0, 255.0]]]).expand(3, 1, 2).clone()
    resized = stl_transforms.resize_bilinear(chw, 1, 4)
    row = resized[0, 0]
    assert row[0].item() == pytest.approx(0.0)
    assert row[-1].item() == pytest.approx(255.0)
    assert 0.0 < row[1].item() < row[2].item() < 255.0  # noqa: PLR2004


class TestPostprocess:
    """Conversion of model output back into an RGB image."""

    def test_output_size_and_mode(self) -> None:
        """The image size follows the tensor's H and W."""
        tensor = torch.rand(1, 48, 64, 3)
        img = stl_transforms.postprocess(tensor)
        assert img.size == (64, 48)
        assert img.mode == COLOR_MODE_RGB

    def test_values_are_scaled_and_rounded(self) -> None:
        """[0, 1] floats become rounded 8-bit values."""
        tensor = torch.tensor([0.0, 0.5, 1.0]).reshape(1, 1, 1, 3)
        pixel = stl_transforms.postprocess(tensor).getpixel((0, 0))
        assert pixel == (0, 128, 255)

    def test_overshoot_is_clamped(self) -> None:
        """Out-of-range and non-finite outputs clamp to [0, 255]."""
        tensor = torch.tensor(
            [-0.5, 1.7, float("nan")],
        ).reshape(1, 1, 1, 3)
        pixel = stl_transforms.postprocess(tensor).getpixel((0, 0))
        assert pixel == (0, 255, 0)

    def test_repeat_postprocess_is_stable(self) -> None:
        """Re-preprocessing a postprocessed image at its own size and
        postprocessing again yields the same pixels (no double scaling).
        """
        first = stl_transforms.postprocess(torch.rand(1, 32, 32, 3))
        again = stl_transforms.postprocess(
            stl_transforms.preprocess(first, 32, 32),
        )
        assert np.array_equal(np.asarray(first), np.asarray(again))

    @pytest.mark.parametrize(
        "shape",
        [(384, 384, 3), (2, 8, 8, 3), (1, 8, 8, 4), (1, 3, 8, 8)],
    )
    def test_bad_shape_rejected(self, shape: tuple[int, ...]) -> None:
        """Anything but a single NHWC RGB image is a ShapeMismatchError."""
        with pytest.raises(ShapeMismatchError):
            stl_transforms.postprocess(torch.zeros(shape))
