"""Execution device selection."""

from __future__ import annotations

import torch

from style_transfer_lite.logging_utils import logger


def setup_device(device_name: str) -> torch.device:
    """
    Return the torch device the models should run on.

    Requests for CUDA or MPS on a machine without them fall back to the
    CPU with a warning instead of failing the run.
    """
    if device_name.startswith("cuda") and not torch.cuda.is_available():
        logger.warning(
            "CUDA requested but not available. Falling back to CPU.",
        )
        device = torch.device("cpu")
    elif device_name == "mps" and not torch.backends.mps.is_available():
        logger.warning(
            "MPS requested but not available. Falling back to CPU.",
        )
        device = torch.device("cpu")
    else:
        device = torch.device(device_name)

    logger.info("Using device: %s", device)
    return device
