# -*- coding: utf-8 -*-
"""
Gadget Updates - Detect catalog gadgets newer than the installed copies.

Compares the catalog version of each gadget against the version the
host reports as installed, to populate the "updates" category.

Dependencies
------------
packaging

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
import logging
from typing import Iterable, List, Mapping

# Third-party
from packaging.version import InvalidVersion, Version

logger = logging.getLogger(__name__)

# Gadget browser internal
from gadget_browser.catalog.models import GadgetRecord


def is_newer(current: str, latest: str) -> bool:
    """Compare version strings.

    Parameters
    ----------
    current : str
        Installed version.
    latest : str
        Catalog version.

    Returns
    -------
    bool
        True if latest is newer than current. Unparsable versions are
        never considered newer.
    """
    try:
        return Version(latest) > Version(current)
    except InvalidVersion:
        logger.debug("Cannot compare versions %r and %r", current, latest)
        return False


def find_updates(
    records: Iterable[GadgetRecord],
    installed_versions: Mapping[str, str],
) -> List[GadgetRecord]:
    """Select records whose catalog version is newer than the installed one.

    Parameters
    ----------
    records : Iterable[GadgetRecord]
    installed_versions : Mapping[str, str]
        Installed version keyed by record id.

    Returns
    -------
    List[GadgetRecord]
        Matching records, in input order.
    """
    updates: List[GadgetRecord] = []
    for record in records:
        installed = installed_versions.get(record.id)
        if installed and record.version and is_newer(installed, record.version):
            updates.append(record)
    return updates
