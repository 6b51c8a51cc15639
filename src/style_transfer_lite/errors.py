"""
Error taxonomy for the style transfer engine.

Every failure the engine can report derives from ``StyleTransferError``
so callers can handle the whole family with one ``except`` clause while
still distinguishing the individual cases.
"""

from __future__ import annotations


class StyleTransferError(Exception):
    """Base class for all engine errors."""


class ModelUnavailableError(StyleTransferError, RuntimeError):
    """
    A model asset failed to load, or its handle has been released.

    Fatal for the lifetime of the engine that owns the handle.
    """


class NoStyleSelectedError(StyleTransferError):
    """``transfer`` was called before a style image was set."""


class InvalidImageError(StyleTransferError, ValueError):
    """An image has zero width/height or an unsupported pixel format."""


class ShapeMismatchError(StyleTransferError):
    """
    A tensor does not match the shape a model expects or produced.

    Indicates a configuration bug (wrong resolution constants or a model
    that does not match them), not a recoverable runtime condition.
    """

    def __init__(
        self,
        what: str,
        expected: tuple[int, ...],
        actual: tuple[int, ...],
    ) -> None:
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{what}: expected shape {expected}, got {actual}",
        )
