"""
Configuration schema and loader for style-transfer-lite.

Defines Pydantic models for each config section and a TOML-based
loader with validation. CLI values are merged on top of a loaded file
by ``build_config_from_cli``.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, Field

from style_transfer_lite.config_defaults import (
    DEFAULT_ASSET_DIR,
    DEFAULT_DEVICE,
    DEFAULT_NUM_THREADS,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_STYLE_PREDICT_MODEL,
    DEFAULT_STYLE_TRANSFER_MODEL,
    DEFAULT_STYLES_DIR,
)


class ModelConfig(BaseModel):
    """Locate the two bundled model assets."""

    asset_dir: str = Field(DEFAULT_ASSET_DIR)
    style_predict: str = Field(DEFAULT_STYLE_PREDICT_MODEL, min_length=1)
    style_transfer: str = Field(DEFAULT_STYLE_TRANSFER_MODEL, min_length=1)


class HardwareConfig(BaseModel):
    """Select the execution device and kernel thread count."""

    device: str = Field(DEFAULT_DEVICE)
    num_threads: int = Field(DEFAULT_NUM_THREADS, ge=1)


class CatalogConfig(BaseModel):
    """Where style thumbnails are looked up by name."""

    styles_dir: str = Field(DEFAULT_STYLES_DIR)


class OutputConfig(BaseModel):
    """Configure the output directory."""

    output: str = Field(DEFAULT_OUTPUT_DIR)


class StyleTransferConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml.
    """

    # model_validate({}) lets Pydantic fill every section from its Field
    # defaults while keeping pyright happy about required arguments.
    models: ModelConfig = Field(
        default_factory=lambda: ModelConfig.model_validate({}),
    )
    hardware: HardwareConfig = Field(
        default_factory=lambda: HardwareConfig.model_validate({}),
    )
    catalog: CatalogConfig = Field(
        default_factory=lambda: CatalogConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> StyleTransferConfig:
        """
        Load a style transfer configuration from a TOML file.

        Raises:
            FileNotFoundError: If ``path`` is not a file.
            pydantic.ValidationError: If a value is out of range.

        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return StyleTransferConfig.model_validate(doc.unwrap())


# CLI argument name -> (config section, field)
CLI_FIELD_MAP: dict[str, tuple[str, str]] = {
    "models_dir": ("models", "asset_dir"),
    "device": ("hardware", "device"),
    "threads": ("hardware", "num_threads"),
    "styles_dir": ("catalog", "styles_dir"),
    "output": ("output", "output"),
}


def build_config_from_cli(
    args: Mapping[str, Any],
    base_config: StyleTransferConfig | None = None,
) -> StyleTransferConfig:
    """
    Overlay command-line values on a base configuration.

    Arguments that are absent or ``None`` leave the base value in place;
    everything else wins over the config file.
    """
    base = base_config or StyleTransferConfig.model_validate({})
    data = base.model_dump()
    for arg_name, (section, field) in CLI_FIELD_MAP.items():
        value = args.get(arg_name)
        if value is not None:
            data[section][field] = value
    return StyleTransferConfig.model_validate(data)
