"""
Style transfer engine.

Owns the style prediction and style transfer model handles and sequences
one transfer: preprocess both images, encode the style, run the transfer
model, postprocess the result.

Both models are loaded once, side by side, when the engine is built. A
load failure leaves the engine in the FAILED state for good; every later
``transfer`` reports it as ``ModelUnavailableError``.

The engine is not reentrant. Callers must serialize ``transfer`` calls on
a given instance, and should run them off any interactive thread.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import TYPE_CHECKING

import style_transfer_lite.image_transforms as stl_transforms
from style_transfer_lite.config_defaults import (
    DEFAULT_DEVICE,
    DEFAULT_NUM_THREADS,
    DEFAULT_STYLE_PREDICT_MODEL,
    DEFAULT_STYLE_TRANSFER_MODEL,
)
from style_transfer_lite.constants import (
    MODEL_LOAD_WORKERS,
    PREDICT_INPUT_HEIGHT,
    PREDICT_INPUT_WIDTH,
    TRANSFER_INPUT_HEIGHT,
    TRANSFER_INPUT_WIDTH,
)
from style_transfer_lite.errors import (
    ModelUnavailableError,
    NoStyleSelectedError,
)
from style_transfer_lite.logging_utils import logger
from style_transfer_lite.models import ModelAssetStore
from style_transfer_lite.style_encoder import StyleEncoder
from style_transfer_lite.style_executor import StyleTransferExecutor

if TYPE_CHECKING:  # pragma: no cover
    from types import TracebackType

    import torch
    from PIL import Image

    from style_transfer_lite.config import StyleTransferConfig
    from style_transfer_lite.models import ModelHandle, ModelSource


class EngineState(Enum):
    """Lifecycle of a StyleTransferEngine."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    FAILED = "failed"
    CLOSED = "closed"


class StyleTransferEngine:
    """
    Applies the style of one reference image to content images.

    Typical use::

        engine = StyleTransferEngine(ModelAssetStore("assets/models"))
        engine.set_style_image(style)
        stylized = engine.transfer(photo)

    Attributes:
        state: Current EngineState.
        failure: The load error that put the engine in FAILED, if any.

    """

    def __init__(  # noqa: PLR0913
        self,
        store: ModelSource,
        *,
        style_predict_name: str = DEFAULT_STYLE_PREDICT_MODEL,
        style_transfer_name: str = DEFAULT_STYLE_TRANSFER_MODEL,
        num_threads: int = DEFAULT_NUM_THREADS,
        device: torch.device | str = DEFAULT_DEVICE,
    ) -> None:
        self.state = EngineState.UNINITIALIZED
        self.failure: ModelUnavailableError | None = None
        self._style_image: Image.Image | None = None
        self._encoder = StyleEncoder(None)
        self._executor = StyleTransferExecutor(None)
        self._setup_models(
            store,
            (style_predict_name, style_transfer_name),
            num_threads=num_threads,
            device=device,
        )

    @classmethod
    def from_config(
        cls,
        config: StyleTransferConfig,
        device: torch.device | str | None = None,
    ) -> StyleTransferEngine:
        """Build an engine backed by the configured asset directory."""
        return cls(
            ModelAssetStore(config.models.asset_dir),
            style_predict_name=config.models.style_predict,
            style_transfer_name=config.models.style_transfer,
            num_threads=config.hardware.num_threads,
            device=device if device is not None else config.hardware.device,
        )

    def _setup_models(
        self,
        store: ModelSource,
        names: tuple[str, str],
        *,
        num_threads: int,
        device: torch.device | str,
    ) -> None:
        """Load both models concurrently and settle the engine state."""
        with ThreadPoolExecutor(
            max_workers=MODEL_LOAD_WORKERS,
            thread_name_prefix="model-load",
        ) as pool:
            futures = [
                pool.submit(
                    store.load_model,
                    name,
                    num_threads=num_threads,
                    device=device,
                )
                for name in names
            ]

        handles: list[ModelHandle] = []
        for future in futures:
            try:
                handles.append(future.result())
            except ModelUnavailableError as e:
                if self.failure is None:
                    self.failure = e

        if self.failure is not None:
            for handle in handles:
                handle.release()
            self.state = EngineState.FAILED
            logger.error("Style transfer models unavailable: %s", self.failure)
            return

        predict_handle, transfer_handle = handles
        self._encoder = StyleEncoder(predict_handle)
        self._executor = StyleTransferExecutor(transfer_handle)
        self.state = EngineState.READY
        logger.info(
            "Loaded models %s and %s (device=%s, threads=%d)",
            predict_handle.name,
            transfer_handle.name,
            predict_handle.device,
            num_threads,
        )

    @property
    def style_image(self) -> Image.Image | None:
        """The currently selected style image, if any."""
        return self._style_image

    def set_style_image(self, image: Image.Image) -> None:
        """
        Select the style reference for later transfers.

        Only records the image. Validation and encoding happen inside
        ``transfer``.
        """
        self._style_image = image

    def _require_ready(self) -> None:
        if self.state is EngineState.READY:
            return
        if self.state is EngineState.FAILED:
            msg = f"Style transfer models failed to load: {self.failure}"
            raise ModelUnavailableError(msg) from self.failure
        msg = f"Style transfer engine is {self.state.value}"
        raise ModelUnavailableError(msg)

    def transfer(self, content_image: Image.Image) -> Image.Image:
        """
        Stylize a content image with the selected style.

        The style descriptor is recomputed on every call.

        Returns:
            A 384x384 RGB image, whatever the input aspect ratios.

        Raises:
            NoStyleSelectedError: If no style image has been set.
            ModelUnavailableError: If the models failed to load or the
                engine has been closed.
            InvalidImageError: If either image is empty or of an
                unsupported format.
            ShapeMismatchError: If a model disagrees with the expected
                tensor shapes.

        """
        if self._style_image is None:
            msg = "No style image selected; call set_style_image() first"
            raise NoStyleSelectedError(msg)
        self._require_ready()

        content_tensor = stl_transforms.preprocess(
            content_image,
            TRANSFER_INPUT_HEIGHT,
            TRANSFER_INPUT_WIDTH,
        )
        style_tensor = stl_transforms.preprocess(
            self._style_image,
            PREDICT_INPUT_HEIGHT,
            PREDICT_INPUT_WIDTH,
        )

        style_descriptor = self._encoder.encode(style_tensor)
        stylized = self._executor.execute(content_tensor, style_descriptor)
        return stl_transforms.postprocess(stylized)

    def close(self) -> None:
        """Release both model handles. The engine cannot be reused."""
        for handle in (self._encoder.handle, self._executor.handle):
            if handle is not None:
                handle.release()
        self._encoder = StyleEncoder(None)
        self._executor = StyleTransferExecutor(None)
        self.state = EngineState.CLOSED

    def __enter__(self) -> StyleTransferEngine:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
