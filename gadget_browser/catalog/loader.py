# -*- coding: utf-8 -*-
"""
Metadata Loader - Read gadget metadata snapshots from disk.

Supplies the raw record list the catalog index is built from. A
snapshot is a JSON or YAML document holding either a list of gadget
entries or a mapping with a ``gadgets`` list. Each entry is a mapping
with an ``attributes`` mapping and optional ``titles``,
``descriptions`` and ``updated_date`` fields. A flat entry without an
``attributes`` key is treated as the attributes themselves.

Dependencies
------------
pyyaml

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
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

# Third-party
import yaml

logger = logging.getLogger(__name__)

# Gadget browser internal
from gadget_browser.catalog.resolver import resolve_metadata_path


_YAML_SUFFIXES = ('.yaml', '.yml')


def normalize_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    """Bring one snapshot entry into the raw-record shape.

    Parameters
    ----------
    entry : Dict[str, Any]

    Returns
    -------
    Dict[str, Any]
        Mapping with ``attributes``, ``titles``, ``descriptions`` and
        ``updated_date`` keys.
    """
    if 'attributes' in entry:
        attributes = dict(entry.get('attributes') or {})
    else:
        attributes = {
            k: v for k, v in entry.items()
            if k not in ('titles', 'descriptions', 'updated_date')
        }
    raw = {
        'attributes': attributes,
        'titles': dict(entry.get('titles') or {}),
        'descriptions': dict(entry.get('descriptions') or {}),
        'updated_date': entry.get(
            'updated_date', attributes.get('updated_date')
        ),
    }
    if 'id' in entry:
        raw['id'] = entry['id']
    return raw


def parse_snapshot(data: Any) -> List[Dict[str, Any]]:
    """Extract the raw record list from a decoded snapshot document.

    Parameters
    ----------
    data : Any
        Decoded JSON/YAML document.

    Returns
    -------
    List[Dict[str, Any]]

    Raises
    ------
    ValueError
        If the document holds no gadget list.
    """
    if isinstance(data, dict):
        data = data.get('gadgets')
    if not isinstance(data, list):
        raise ValueError(
            "Metadata snapshot must be a list of gadgets or a mapping "
            "with a 'gadgets' list"
        )

    records: List[Dict[str, Any]] = []
    for position, entry in enumerate(data):
        if not isinstance(entry, dict):
            logger.warning(
                "Skipping snapshot entry %d: expected a mapping, got %s",
                position, type(entry).__name__,
            )
            continue
        records.append(normalize_entry(entry))
    return records


def load_metadata(
    path: Optional[Union[str, Path]] = None,
) -> List[Dict[str, Any]]:
    """Load raw gadget records from a JSON or YAML snapshot.

    Parameters
    ----------
    path : Optional[Union[str, Path]]
        Snapshot file. If None, resolved via the metadata path priority
        chain (env var > config > default).

    Returns
    -------
    List[Dict[str, Any]]
        Raw records, in file order.

    Raises
    ------
    FileNotFoundError
        If the snapshot does not exist.
    ValueError
        If the snapshot cannot be decoded or has the wrong shape.
    """
    path = Path(path) if path is not None else resolve_metadata_path()
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()

    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValueError(f"Cannot decode metadata snapshot {path}: {e}") from e

    records = parse_snapshot(data)
    logger.info("Loaded %d gadget entries from %s", len(records), path)
    return records
