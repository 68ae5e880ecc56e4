# -*- coding: utf-8 -*-
"""
Metadata Path Resolver - Locate the gadget metadata snapshot.

Resolves the snapshot path using a priority chain:
1. GADGET_BROWSER_METADATA environment variable (highest priority)
2. ~/.gadget_browser/config.json "metadata_path" field
3. ~/.gadget_browser/metadata.json (default fallback)

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
import os
from pathlib import Path


_ENV_VAR = "GADGET_BROWSER_METADATA"
_CONFIG_DIR = ".gadget_browser"
_CONFIG_FILE = "config.json"
_DEFAULT_SNAPSHOT = "metadata.json"


def resolve_metadata_path() -> Path:
    """Resolve the metadata snapshot path.

    Priority:
    1. ``GADGET_BROWSER_METADATA`` environment variable
    2. ``~/.gadget_browser/config.json`` → ``metadata_path`` field
    3. ``~/.gadget_browser/metadata.json`` (default)

    Returns
    -------
    Path
        Resolved path to the snapshot file.
    """
    env_path = os.environ.get(_ENV_VAR)
    if env_path:
        return Path(env_path)

    config_dir = Path.home() / _CONFIG_DIR

    config_path = config_dir / _CONFIG_FILE
    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
            metadata_path = config.get('metadata_path')
            if metadata_path:
                return Path(metadata_path)
        except (json.JSONDecodeError, OSError, AttributeError):
            pass

    return config_dir / _DEFAULT_SNAPSHOT
