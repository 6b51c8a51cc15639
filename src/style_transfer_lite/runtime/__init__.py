"""Runtime utilities for device, output, validation, and version helpers."""

from .device import setup_device
from .output import (
    save_stylized_image,
    setup_output_directory,
    stylized_image_path_from_paths,
)
from .validation import resolve_style_path, validate_input_paths
from .version import resolve_project_version

__all__ = [
    "resolve_project_version",
    "resolve_style_path",
    "save_stylized_image",
    "setup_device",
    "setup_output_directory",
    "stylized_image_path_from_paths",
    "validate_input_paths",
]
