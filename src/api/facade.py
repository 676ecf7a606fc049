# src/api/facade.py - v3
"""Public API facade: the cached icon transform.

Usage:
    from faviconcache.api.facade import transform
    output = await transform(content, config, writer, generator, settings)

Control flow:
  1. Compute the output prefix and the fingerprint of (content, config)
  2. Load `<prefix>.cache` and validate it against the current request
  3. On a hit, replay the record and return the cached result
  4. On a miss, run the generator, emit every file, persist a new record
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from faviconcache.api.models import TransformOutput
from faviconcache.cache.fingerprint import compute_fingerprint
from faviconcache.cache.json_store import JsonCacheStore
from faviconcache.cache.models import CachedAsset, CacheRecord
from faviconcache.cache.replay import replay
from faviconcache.cache.validator import check_record
from faviconcache.config.settings import Settings
from faviconcache.core.errors import (
    CacheWriteError,
    ConfigError,
    GenerationError,
    OutputWriteError,
)
from faviconcache.core.models import GenerationResult, GeneratorOutput, IconConfig
from faviconcache.logging.context import clear_context, set_asset_context, set_phase
from faviconcache.storage.naming import interpolate_name
from faviconcache.version import __version__

if TYPE_CHECKING:
    from faviconcache.cache.base_cache_store import BaseCacheStore
    from faviconcache.generation.base_generator import BaseIconGenerator
    from faviconcache.storage.base_output_writer import BaseOutputWriter

logger = logging.getLogger(__name__)

_HREF_RE = re.compile(r"(href=[\"'])")


async def transform(
    content: bytes,
    config: IconConfig,
    writer: BaseOutputWriter | None,
    generator: BaseIconGenerator | None,
    settings: Settings | None = None,
    cache_store: BaseCacheStore | None = None,
    resource_path: str | Path | None = None,
    tool_version: str = __version__,
) -> TransformOutput:
    """Produce icons for `content`, reusing the persisted cache when valid.

    Args:
        content: Raw source image bytes.
        config: Validated icon configuration.
        writer: Output writer receiving every emitted file.
        generator: Icon generator, only invoked on a cache miss.
        settings: Global settings. Loaded from .env if None.
        cache_store: Record store. Defaults to a JSON store on `writer`.
        resource_path: Source file path, used for [name]/[ext] placeholders.
        tool_version: Version stamped into and checked against records.

    Returns:
        TransformOutput with the (fresh or replayed) GenerationResult.

    Raises:
        ConfigError: If the writer or the generator is missing.
        GenerationError: If the generator fails.
        OutputWriteError: If an icon file cannot be written.
    """
    if writer is None:
        raise ConfigError("An output writer is required to emit icon files")
    if generator is None:
        raise ConfigError("An icon generator is required")

    settings = settings or Settings()
    store = cache_store or JsonCacheStore(writer)

    path_prefix = interpolate_name(settings.output_file_prefix, content, resource_path)
    fingerprint = compute_fingerprint(content, config, settings.fingerprint_length)
    cache_file = path_prefix + ".cache"

    set_asset_context(str(resource_path or path_prefix), fingerprint)
    try:
        if settings.persistent_cache:
            set_phase("lookup")
            record = await store.load(cache_file)
            check = check_record(
                record, fingerprint, config, tool_version, settings.cache_mode
            )
            if check.is_valid:
                set_phase("replay")
                result = await replay(record, writer)
                logger.info(
                    "Cache hit for %s, replayed %d files", cache_file, len(result.files)
                )
                await _emit_stats(writer, settings, result)
                return TransformOutput(
                    result=result,
                    cache_hit=True,
                    fingerprint=fingerprint,
                    cache_file=cache_file,
                )
            logger.info("Cache miss for %s (%s)", cache_file, check.reason)

        set_phase("generate")
        generated = await _generate(generator, content, config)
        result, assets = await _emit_generated(
            generated, path_prefix, settings.normalized_public_path, writer
        )
        logger.info(
            "Generated %d files with %s under %s",
            len(result.files), generator.name, path_prefix,
        )

        if settings.persistent_cache:
            set_phase("persist")
            record = CacheRecord(
                version=tool_version,
                file_hash=fingerprint,
                options=config.relevant_options(),
                result=result,
                assets=assets if settings.cache_mode == "artifact" else None,
            )
            try:
                await store.save(cache_file, record)
            except CacheWriteError as e:
                logger.warning("Icons generated but cache not persisted: %s", e)

        await _emit_stats(writer, settings, result)
        return TransformOutput(
            result=result,
            cache_hit=False,
            fingerprint=fingerprint,
            cache_file=cache_file,
        )
    finally:
        clear_context()


async def transform_file(
    source: Path,
    config: IconConfig,
    writer: BaseOutputWriter,
    generator: BaseIconGenerator,
    settings: Settings | None = None,
) -> TransformOutput:
    """Read `source` from disk and run transform() on its bytes."""
    try:
        content = source.read_bytes()
    except OSError as e:
        raise ConfigError(f"Cannot read source image {source}: {e}") from e
    return await transform(
        content, config, writer, generator, settings=settings, resource_path=source
    )


def render_module(result: GenerationResult) -> str:
    """Module source whose default export is the result JSON."""
    return "module.exports = " + json.dumps(result.to_json_dict())


def rewrite_html(html: list[str], public_path: str, path_prefix: str) -> list[str]:
    """Point every href at `<public_path><path_prefix><original>`."""
    target = public_path + path_prefix
    return [_HREF_RE.sub(lambda m: m.group(1) + target, entry) for entry in html]


async def _generate(
    generator: BaseIconGenerator, content: bytes, config: IconConfig
) -> GeneratorOutput:
    """Run the generator, wrapping any failure in GenerationError."""
    try:
        return await generator.generate(content, config.to_generator_options())
    except GenerationError:
        raise
    except Exception as e:
        raise GenerationError(f"Icon generation failed in {generator.name}: {e}") from e


async def _emit_generated(
    generated: GeneratorOutput,
    path_prefix: str,
    public_path: str,
    writer: BaseOutputWriter,
) -> tuple[GenerationResult, list[CachedAsset]]:
    """Emit images then files under the prefix, in generator order."""
    files: list[str] = []
    assets: list[CachedAsset] = []
    for item in [*generated.images, *generated.files]:
        path = path_prefix + item.name
        try:
            await writer.write(path, item.contents)
        except Exception as e:
            raise OutputWriteError(f"Failed to emit {path}: {e}") from e
        files.append(path)
        assets.append(CachedAsset.from_bytes(path, item.contents))

    result = GenerationResult(
        output_file_prefix=path_prefix,
        html=rewrite_html(generated.html, public_path, path_prefix),
        files=files,
    )
    return result, assets


async def _emit_stats(
    writer: BaseOutputWriter, settings: Settings, result: GenerationResult
) -> None:
    if not settings.emit_stats:
        return
    try:
        await writer.write(
            settings.stats_filename, json.dumps(result.to_json_dict(), indent=2)
        )
    except Exception as e:
        raise OutputWriteError(f"Failed to write stats {settings.stats_filename}: {e}") from e
    logger.debug("Stats written to %s", settings.stats_filename)
