# src/main.py - v3
"""CLI entry point: generate, inspect commands.

Usage:
    faviconcache generate <logo> [options]
    faviconcache inspect <cache_file> [--logo <logo>] [-c <config.json>]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from faviconcache.version import __version__

if TYPE_CHECKING:
    from faviconcache.api.models import TransformOutput

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return asyncio.run(args.func(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="faviconcache",
        description=f"faviconcache v{__version__} - cached favicon generation",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- generate ---
    p_generate = subparsers.add_parser(
        "generate", help="Generate icons for a source image",
    )
    p_generate.add_argument("logo", type=Path, help="Path to source image")
    p_generate.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Output directory (default: FAVICONS_OUTPUT_PATH or ./dist)",
    )
    p_generate.add_argument(
        "-c", "--config", type=Path, default=None,
        help="Icon configuration JSON (icons, background, manifest)",
    )
    p_generate.add_argument(
        "--generator", default=None,
        help="Icon generator class path (default: FAVICONS_ICON_GENERATOR)",
    )
    p_generate.add_argument(
        "--prefix", default=None,
        help="Output prefix template (default: icons-[hash]/)",
    )
    p_generate.add_argument(
        "--public-path", default=None,
        help="Public path prepended to HTML hrefs",
    )
    p_generate.add_argument(
        "--no-cache", action="store_true",
        help="Disable the persistent cache",
    )
    p_generate.add_argument(
        "--emit-stats", action="store_true",
        help="Write the result JSON to the stats file",
    )
    p_generate.set_defaults(func=_cmd_generate)

    # --- inspect ---
    p_inspect = subparsers.add_parser(
        "inspect", help="Show a cache record and whether it is still valid",
    )
    p_inspect.add_argument("cache_file", type=Path, help="Path to a .cache file")
    p_inspect.add_argument(
        "--logo", type=Path, default=None,
        help="Source image to validate the record against",
    )
    p_inspect.add_argument(
        "-c", "--config", type=Path, default=None,
        help="Icon configuration JSON to validate the record against",
    )
    p_inspect.set_defaults(func=_cmd_inspect)

    return parser


async def _cmd_generate(args: argparse.Namespace) -> int:
    """Run the cached transform for one source image."""
    from faviconcache.api.facade import transform_file
    from faviconcache.config.settings import load_icon_config, load_settings
    from faviconcache.generation.generator_factory import create_generator
    from faviconcache.logging.logger import setup_logging
    from faviconcache.storage.writer_factory import create_writer

    logo: Path = args.logo
    if not logo.is_file():
        logger.error("File not found: %s", logo)
        return 1

    overrides: dict[str, object] = {}
    if args.output is not None:
        overrides["output_path"] = args.output
    if args.prefix is not None:
        overrides["output_file_prefix"] = args.prefix
    if args.public_path is not None:
        overrides["public_path"] = args.public_path
    if args.no_cache:
        overrides["persistent_cache"] = False
    if args.emit_stats:
        overrides["emit_stats"] = True
    if args.verbose:
        overrides["log_level"] = "DEBUG"

    settings = load_settings(**overrides)
    setup_logging(
        level=settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )

    config = load_icon_config(args.config)
    generator = create_generator(settings, args.generator)
    writer = create_writer(settings)

    output = await transform_file(logo, config, writer, generator, settings=settings)
    _print_result_summary(output)
    return 0


async def _cmd_inspect(args: argparse.Namespace) -> int:
    """Print a cache record, validating it when a logo is given."""
    from faviconcache.cache.fingerprint import compute_fingerprint
    from faviconcache.cache.json_store import JsonCacheStore
    from faviconcache.cache.validator import check_record
    from faviconcache.config.settings import load_icon_config, load_settings
    from faviconcache.storage.local_writer import LocalWriter

    cache_file: Path = args.cache_file
    store = JsonCacheStore(LocalWriter())
    record = await store.load(str(cache_file))
    if record is None:
        logger.error("No valid cache record at %s", cache_file)
        return 1

    print(f"\nCache record {cache_file}:")
    print(f"  Version:      {record.version}")
    print(f"  Fingerprint:  {record.file_hash}")
    print(f"  Prefix:       {record.result.output_file_prefix}")
    print(f"  Files:        {len(record.result.files)}")
    print(f"  Mode:         {'artifact' if record.assets is not None else 'descriptor'}")

    if args.logo is not None:
        if not args.logo.is_file():
            logger.error("File not found: %s", args.logo)
            return 1
        settings = load_settings()
        config = load_icon_config(args.config)
        fingerprint = compute_fingerprint(
            args.logo.read_bytes(), config, settings.fingerprint_length
        )
        check = check_record(
            record, fingerprint, config, __version__, settings.cache_mode
        )
        status = "valid" if check.is_valid else f"stale ({check.reason})"
        print(f"  Status:       {status}")
    return 0


def _print_result_summary(output: TransformOutput) -> None:
    """Print a human-readable summary of a TransformOutput."""
    result = output.result
    print(f"\nIcons {'replayed from cache' if output.cache_hit else 'generated'}:")
    print(f"  Fingerprint:  {output.fingerprint}")
    print(f"  Prefix:       {result.output_file_prefix}")
    print(f"  Files:        {len(result.files)}")
    print(f"  Cache file:   {output.cache_file}")
    for entry in result.html:
        print(f"  {entry}")


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI usage before settings are loaded."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("boto3").setLevel(logging.WARNING)


if __name__ == "__main__":
    sys.exit(main())
