"""Top-level orchestration for a single file-to-file style transfer."""

import time
from pathlib import Path

import style_transfer_lite.image_io as stl_image_io
import style_transfer_lite.runtime as stl_runtime
from style_transfer_lite.config import StyleTransferConfig
from style_transfer_lite.engine import StyleTransferEngine
from style_transfer_lite.logging_utils import logger
from style_transfer_lite.type_defs import InputPaths


def style_transfer(
    paths: InputPaths,
    config: StyleTransferConfig,
) -> Path:
    """
    Stylize the content image with the style image and save the result.

    ``paths.style_path`` may be an image file or the name of a style in
    the configured catalog.

    Returns:
        Path of the saved stylized image.

    Raises:
        FileNotFoundError: If an input image or style cannot be found.
        StyleTransferError: If the engine cannot produce a result.

    """
    style_path = stl_runtime.resolve_style_path(
        paths.style_path,
        config.catalog.styles_dir,
    )
    stl_runtime.validate_input_paths(paths.content_path, style_path)

    device = stl_runtime.setup_device(config.hardware.device)
    content_img = stl_image_io.load_image(paths.content_path)
    style_img = stl_image_io.load_image(style_path)

    start_time = time.perf_counter()
    with StyleTransferEngine.from_config(config, device=device) as engine:
        engine.set_style_image(style_img)
        stylized = engine.transfer(content_img)
    elapsed = time.perf_counter() - start_time

    output_dir = stl_runtime.setup_output_directory(config.output.output)
    final_path = stl_runtime.stylized_image_path_from_paths(
        output_dir,
        Path(paths.content_path),
        Path(style_path),
    )
    stl_runtime.save_stylized_image(stylized, final_path)
    logger.info("Style transfer completed in %.2f seconds", elapsed)
    return final_path
