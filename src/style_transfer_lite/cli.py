"""CLI argument parsing and main entry point."""

import argparse
import sys
from pathlib import Path

import style_transfer_lite.config as stl_config
import style_transfer_lite.main as stl_main
from style_transfer_lite.catalog import StyleCatalog
from style_transfer_lite.errors import StyleTransferError
from style_transfer_lite.logging_utils import logger, set_verbosity
from style_transfer_lite.runtime.version import resolve_project_version
from style_transfer_lite.type_defs import InputPaths


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        description="Fast arbitrary style transfer with two pretrained models",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            f"Examples:\n"
            f"python {Path(__file__).name} --content cat.jpg "
            f"--style starry_night.jpg\n"
            f"python {Path(__file__).name} --content cat.jpg "
            f"--style starry_night --styles-dir assets/thumbnails\n"
            f"python {Path(__file__).name} --list-styles\n"
        ),
    )
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")
    p.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging")

    required = p.add_argument_group("required arguments")
    required.add_argument(
        "--content", type=str, help="Path to content image")
    required.add_argument(
        "--style", type=str,
        help="Path to style image, or the name of a style in --styles-dir")

    output = p.add_argument_group("output")
    output.add_argument(
        "--output", type=str, help="Output directory")

    models = p.add_argument_group("models")
    models.add_argument(
        "--models-dir", type=str,
        help="Directory holding style_predict.pt and style_transfer.pt")

    styles = p.add_argument_group("styles")
    styles.add_argument(
        "--styles-dir", type=str,
        help="Directory of style thumbnails addressable by name")
    styles.add_argument(
        "--list-styles", action="store_true",
        help="Print the style names found in --styles-dir and exit")

    hw = p.add_argument_group("hardware")
    hw.add_argument(
        "--device", type=str,
        help="Device to run on (e.g., 'cpu' or 'cuda')")
    hw.add_argument(
        "--threads", type=int,
        help="Worker threads per model invocation")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without running style transfer")

    return p


def log_parameters(
    paths: InputPaths,
    cfg: stl_config.StyleTransferConfig,
    args: argparse.Namespace,
) -> None:
    """Log the effective run parameters."""
    logger.info("Content image: %s", paths.content_path)
    logger.info("Style image: %s", paths.style_path)
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Models Directory: %s", cfg.models.asset_dir)
    logger.info("Styles Directory: %s", cfg.catalog.styles_dir)
    logger.info("Output Directory: %s", cfg.output.output)
    logger.info("Device: %s", cfg.hardware.device)
    logger.info("Threads: %d", cfg.hardware.num_threads)


def list_styles(cfg: stl_config.StyleTransferConfig) -> list[str]:
    """Print available catalog style names, one per line."""
    catalog = StyleCatalog(cfg.catalog.styles_dir)
    names = catalog.names()
    if not names:
        logger.warning("No styles found in %s", catalog.directory)
    for name in names:
        print(name)  # noqa: T201
    return names


def run_from_args(args: argparse.Namespace) -> Path | None:
    """Run style transfer from command-line arguments."""
    base_cfg: stl_config.StyleTransferConfig | None = None
    if args.config:
        base_cfg = stl_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            sys.exit(0)

    elif args.validate_config_only:
        logger.info("No --config given; nothing to validate.")
        sys.exit(0)

    cfg = stl_config.build_config_from_cli(vars(args), base_config=base_cfg)

    if args.list_styles:
        list_styles(cfg)
        return None

    paths = InputPaths(content_path=args.content, style_path=args.style)
    log_parameters(paths, cfg, args)
    return stl_main.style_transfer(paths, cfg)


def main() -> None:
    """Run the command-line interface for style transfer execution."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args()
    set_verbosity(verbose=args.verbose)
    needs_inputs = not (args.validate_config_only or args.list_styles)
    if needs_inputs and (not args.content or not args.style):
        arg_parser.error("the following arguments are required: --content,"
                         " --style")

    try:
        run_from_args(args)
    except (StyleTransferError, FileNotFoundError) as e:
        logger.error("Style transfer failed: %s", e)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
