# -*- coding: utf-8 -*-
"""
Configuration Module - Configurable defaults for the gadget browser.

Provides a BrowserConfig dataclass with default values for the page
grid, the "new" recency window, the search debounce delay and the
default language. Loads from ~/.gadget_browser/browser_config.json if
it exists, otherwise uses sensible defaults.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
import json
import logging
from dataclasses import dataclass, asdict
from datetime import timedelta
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_CONFIG_DIR = Path.home() / ".gadget_browser"
_CONFIG_FILE = _CONFIG_DIR / "browser_config.json"


@dataclass
class BrowserConfig:
    """Global gadget browser configuration with defaults.

    Attributes
    ----------
    plugin_rows : int
        Gadget grid rows per page.
    plugin_columns : int
        Gadget grid columns per page.
    new_plugin_days : int
        Gadgets updated within this many days are listed as "new".
    search_delay_ms : int
        Search-box debounce interval in milliseconds.
    default_language : str
        Language selected when the browser opens.
    """

    plugin_rows: int = 3
    plugin_columns: int = 4
    new_plugin_days: int = 60
    search_delay_ms: int = 500
    default_language: str = "en"

    @property
    def plugins_per_page(self) -> int:
        return self.plugin_rows * self.plugin_columns

    @property
    def new_plugin_period(self) -> timedelta:
        return timedelta(days=self.new_plugin_days)

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to JSON file."""
        path = path or _CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self), f, indent=2)


def load_config(path: Optional[Path] = None) -> BrowserConfig:
    """Load configuration from file, or return defaults.

    Parameters
    ----------
    path : Optional[Path]
        Config file path. Defaults to
        ~/.gadget_browser/browser_config.json.

    Returns
    -------
    BrowserConfig
        Loaded or default configuration.
    """
    path = path or _CONFIG_FILE
    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return BrowserConfig(**{
                k: v for k, v in data.items()
                if k in BrowserConfig.__dataclass_fields__
            })
        except Exception as e:
            logger.warning("Failed to load config from %s: %s", path, e)

    return BrowserConfig()
