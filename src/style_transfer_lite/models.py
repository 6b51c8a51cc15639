"""
Model loading and invocation.

A ``ModelHandle`` wraps one loaded TorchScript network together with the
device and intra-op thread count it runs with. ``ModelAssetStore``
resolves model names inside an asset directory and turns load failures
into ``ModelUnavailableError`` so the engine can record them instead of
crashing mid-construction.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

import torch

from style_transfer_lite.config_defaults import DEFAULT_DEVICE, DEFAULT_NUM_THREADS
from style_transfer_lite.errors import ModelUnavailableError

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Iterator

    from style_transfer_lite.type_defs import ModelOutput


@contextmanager
def intra_op_threads(num_threads: int) -> Iterator[None]:
    """
    Pin torch's intra-op thread pool size for the duration of a block.

    The previous setting is restored on exit, including on error.
    """
    previous = torch.get_num_threads()
    torch.set_num_threads(num_threads)
    try:
        yield
    finally:
        torch.set_num_threads(previous)


def first_output(output: ModelOutput) -> torch.Tensor:
    """
    Return output index 0 of a model result.

    Accepts a bare tensor, a sequence of tensors, or a mapping of named
    tensors (first entry in insertion order). Other outputs are ignored.
    """
    if isinstance(output, torch.Tensor):
        return output
    if isinstance(output, Mapping):
        values = list(output.values())
    elif isinstance(output, Sequence):
        values = list(output)
    else:
        msg = f"Unsupported model output type: {type(output).__name__}"
        raise TypeError(msg)
    if not values:
        msg = "Model produced no outputs"
        raise ValueError(msg)
    return values[0]


class ModelHandle:
    """
    A loaded, ready-to-run network.

    Attributes:
        name: Asset name the model was loaded from.
        num_threads: Worker threads used by numeric kernels per call.
        device: Device the module and its inputs live on.

    """

    def __init__(
        self,
        name: str,
        module: Callable[..., ModelOutput],
        *,
        num_threads: int = DEFAULT_NUM_THREADS,
        device: torch.device | str = DEFAULT_DEVICE,
    ) -> None:
        if num_threads < 1:
            msg = f"num_threads must be positive, got {num_threads}"
            raise ValueError(msg)
        self.name = name
        self.num_threads = num_threads
        self.device = torch.device(device)
        self._module: Callable[..., ModelOutput] | None = module

    @property
    def loaded(self) -> bool:
        """Whether the handle still holds its module."""
        return self._module is not None

    def run(self, *inputs: torch.Tensor) -> ModelOutput:
        """
        Run one forward pass and return the raw model output.

        Raises:
            ModelUnavailableError: If the handle has been released.

        """
        if self._module is None:
            msg = f"Model '{self.name}' has been released"
            raise ModelUnavailableError(msg)
        with intra_op_threads(self.num_threads), torch.inference_mode():
            return self._module(*(t.to(self.device) for t in inputs))

    def release(self) -> None:
        """Drop the underlying module so its memory can be reclaimed."""
        self._module = None

    def __repr__(self) -> str:
        state = "loaded" if self.loaded else "released"
        return (f"ModelHandle(name={self.name!r}, device={self.device}, "
                f"num_threads={self.num_threads}, {state})")


class ModelSource(Protocol):
    """Anything that can turn a model name into a ModelHandle."""

    def load_model(
        self,
        name: str,
        *,
        num_threads: int = ...,
        device: torch.device | str = ...,
    ) -> ModelHandle:
        """Load ``name`` or raise ModelUnavailableError."""
        ...


class ModelAssetStore:
    """Loads serialized TorchScript models from a directory by name."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def path_for(self, name: str) -> Path:
        """Return the on-disk location of a model asset."""
        return self.root / name

    def load_model(
        self,
        name: str,
        *,
        num_threads: int = DEFAULT_NUM_THREADS,
        device: torch.device | str = DEFAULT_DEVICE,
    ) -> ModelHandle:
        """
        Load a model asset and wrap it in a ModelHandle.

        Raises:
            ModelUnavailableError: If the asset is missing or cannot be
                deserialized.

        """
        path = self.path_for(name)
        if not path.is_file():
            msg = f"Model asset not found: {path}"
            raise ModelUnavailableError(msg)
        try:
            module = torch.jit.load(str(path), map_location=torch.device(device))
        except (RuntimeError, ValueError, OSError) as e:
            msg = f"Error loading model '{name}' from {path}: {e!s}"
            raise ModelUnavailableError(msg) from e
        module.eval()
        return ModelHandle(
            name,
            module,
            num_threads=num_threads,
            device=device,
        )
