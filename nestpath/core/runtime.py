"""
Runtime context and configuration for the nestpath command line.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
import random
from typing import Any

# registers the built-in document adapters
import nestpath.adapters  # pylint: disable=unused-import

from nestpath.core import paths
from nestpath.core.adapters import detect_format, dump_document, load_document
from nestpath.core.settings import load_settings, save_settings, Settings
from nestpath.utils.dict_path import accessible


@dataclass
class Runtime:
    """Settings and logging shared by every CLI command."""
    settings_dir: Path
    settings: Settings
    logger: logging.Logger
    input_format: str | None = None  # overrides extension detection
    output_format: str | None = None  # overrides settings.output_format

    def rng(self, seed: int | None = None) -> random.Random:
        """A generator for one call; falls back to the configured seed."""
        return random.Random(seed if seed is not None else self.settings.seed)

    # --- Documents ---

    def load(self, source: str | Path, fmt: str | None = None) -> Any:
        self.logger.debug("Loading document from %s", source)
        return load_document(source, fmt or self.input_format)

    def dump(self, data: Any, fmt: str | None = None) -> str:
        """Render a result in the configured output format. Scalars print bare."""
        if isinstance(data, str):
            return data
        fmt = fmt or self.output_format or self.settings.output_format
        if not accessible(data) and fmt in {"json", "jsonl", "ndjson", "yaml"}:
            return dump_document(data, "json")
        return dump_document(data, fmt, indent=self.settings.indent, sort_keys=self.settings.sort_keys)

    def write(self, target: str | Path, data: Any, fmt: str | None = None) -> Path:
        """Write a document back to disk in the format its extension names."""
        path = Path(target)
        fmt = fmt or detect_format(path)
        text = dump_document(data, fmt, indent=self.settings.indent, sort_keys=self.settings.sort_keys)
        path.write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")
        self.logger.debug("Wrote %s", path)
        return path

    # --- Settings ---

    def save_settings(self) -> Path:
        return save_settings(self.settings_dir, self.settings)

# --- Runtime management ---

def build_runtime(
    *,
    settings_dir: Path | None = None,
    verbose: bool = False,
    input_format: str | None = None,
    output_format: str | None = None,
) -> Runtime:
    """Builds and returns a Runtime object for nestpath."""
    # 1. Settings
    if settings_dir is not None:
        settings_dir = settings_dir.expanduser().resolve()
    elif env := os.getenv(paths.SETTINGS_DIR_ENV):
        settings_dir = Path(env).expanduser().resolve()
    else:
        settings_dir = paths.default_settings_dir()
    settings = load_settings(settings_dir)
    verbose = verbose or settings.verbose
    # 2. Logging
    logger = logging.getLogger("nestpath")
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    # 3. Create context
    return Runtime(
        settings_dir=settings_dir,
        settings=settings,
        logger=logger,
        input_format=input_format,
        output_format=output_format,
    )
