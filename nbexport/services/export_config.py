"""
Export Configuration Service - Manages settings from nbexport_config.json.

This module handles loading and accessing the nbexport_config.json file which
controls cell marker recognition, the directory-change cell added on export,
and the console's input history size.

If the file doesn't exist the built-in defaults are used.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Any

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "nbexport_config.json"

DEFAULT_CODE_REGEX = r"^(#\s*%%|#\s*\<codecell\>|#\s*In\[\d*?\]|#\s*In\[ \])"
DEFAULT_MARKDOWN_REGEX = r"^(#\s*%%\s*\[markdown\]|#\s*\<markdowncell\>)"

# Default configuration - used when no config file is present
DEFAULT_CONFIG = {
    "cells": {
        "code_regex": DEFAULT_CODE_REGEX,
        "markdown_regex": DEFAULT_MARKDOWN_REGEX,
        "default_marker": "# %%",
        "comment": "Regular expressions recognising cell markers at the top of a code block"
    },
    "export": {
        "change_directory": True,
        "locale": "en",
        "default_major_version": 3,
        "comment": "change_directory adds a cell that cds back to the workspace root on export"
    },
    "history": {
        "max_entries": 500,
        "comment": "Number of submitted inputs kept for up/down recall"
    }
}


@dataclass
class CellsConfig:
    """Cell marker recognition."""
    code_regex: str = DEFAULT_CODE_REGEX
    markdown_regex: str = DEFAULT_MARKDOWN_REGEX
    default_marker: str = "# %%"


@dataclass
class ExportSettings:
    """Notebook export behaviour."""
    change_directory: bool = True
    locale: str = "en"
    default_major_version: int = 3


@dataclass
class HistoryConfig:
    max_entries: int = 500


@dataclass
class ExportConfig:
    """Parsed nbexport configuration."""
    cells: CellsConfig = field(default_factory=CellsConfig)
    export: ExportSettings = field(default_factory=ExportSettings)
    history: HistoryConfig = field(default_factory=HistoryConfig)

    # Raw config for reference
    raw_config: Dict[str, Any] = field(default_factory=dict)


# Module-level cached config
_config: Optional[ExportConfig] = None
_config_path: Optional[Path] = None


def _parse_config(raw: Dict[str, Any]) -> ExportConfig:
    """Parse raw JSON config into ExportConfig."""
    config = ExportConfig(raw_config=raw)

    cells = raw.get("cells", {})
    config.cells = CellsConfig(
        code_regex=cells.get("code_regex", DEFAULT_CODE_REGEX),
        markdown_regex=cells.get("markdown_regex", DEFAULT_MARKDOWN_REGEX),
        default_marker=cells.get("default_marker", "# %%"),
    )

    export = raw.get("export", {})
    config.export = ExportSettings(
        change_directory=bool(export.get("change_directory", True)),
        locale=export.get("locale", "en"),
        default_major_version=int(export.get("default_major_version", 3)),
    )

    history = raw.get("history", {})
    config.history = HistoryConfig(max_entries=int(history.get("max_entries", 500)))

    return config


def load_config(config_path: Optional[Path] = None, force_reload: bool = False) -> ExportConfig:
    """
    Load export configuration from JSON file.

    Args:
        config_path: Path to config file. Defaults to ./nbexport_config.json
        force_reload: If True, reload from disk even if cached

    Returns:
        Parsed ExportConfig
    """
    global _config, _config_path

    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME
    config_path = Path(config_path)

    # Return cached if available and path matches
    if _config is not None and not force_reload and _config_path == config_path:
        return _config

    _config_path = config_path

    if not config_path.exists():
        logger.info(f"No {CONFIG_FILENAME} at {config_path}, using defaults")
        raw = DEFAULT_CONFIG
    else:
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            logger.info(f"Loaded {CONFIG_FILENAME} from {config_path}")
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse {CONFIG_FILENAME}: {e}")
            raw = DEFAULT_CONFIG
        except OSError as e:
            logger.error(f"Failed to load {CONFIG_FILENAME}: {e}")
            raw = DEFAULT_CONFIG

    _config = _parse_config(raw)
    return _config


def get_config() -> ExportConfig:
    """Get the current config, loading if necessary."""
    if _config is None:
        return load_config()
    return _config


def reset_config_cache() -> None:
    """Reset cached config (useful for testing)."""
    global _config, _config_path
    _config = None
    _config_path = None
