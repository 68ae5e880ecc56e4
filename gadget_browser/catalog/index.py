# -*- coding: utf-8 -*-
"""
Catalog Index - Two-level language/category index over gadget records.

Builds the index once from a full metadata snapshot and answers bucket
lookups for the selection session. Buckets are sorted lazily, at most
once, the first time they are selected.

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
import math
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

# Gadget browser internal
from gadget_browser.catalog.models import (
    CATEGORY_ALL,
    CATEGORY_NEW,
    CATEGORY_RECENTLY_USED,
    CATEGORY_UPDATES,
    IMPLICIT_CATEGORIES,
    PRIMARY_CATEGORIES,
    SECONDARY_CATEGORIES,
    SUPPORTED_LANGUAGES,
    Bucket,
    GadgetRecord,
    to_utc,
)
from gadget_browser.catalog.updates import find_updates


NEW_PLUGIN_PERIOD = timedelta(days=60)


def _rank_key(record: GadgetRecord) -> Tuple[int, float]:
    # NaN ranks get the lowest key so they land last in descending order.
    if math.isnan(record.rank):
        return (0, 0.0)
    return (1, record.rank)


def _date_key(record: GadgetRecord) -> Tuple[int, float]:
    if record.updated_at is None:
        return (0, 0.0)
    return (1, record.updated_at.timestamp())


def sort_records(records: List[GadgetRecord], category: str) -> None:
    """Sort a bucket's records in place for the given category.

    "new" sorts by update time, "recently_used" keeps the host-supplied
    order, everything else sorts by rank. Orders are descending and
    stable, so ties keep insertion order.
    """
    if category == CATEGORY_RECENTLY_USED:
        return
    key = _date_key if category == CATEGORY_NEW else _rank_key
    records.sort(key=key, reverse=True)


class CatalogIndex:
    """Language -> category -> Bucket index of gadget records.

    Parameters
    ----------
    buckets : Dict[str, Dict[str, Bucket]]
        The two-level index.
    built_at : datetime
        Time the index was built; the "new" bucket is relative to it.
    """

    def __init__(
        self,
        buckets: Dict[str, Dict[str, Bucket]],
        built_at: datetime,
    ) -> None:
        self._buckets = buckets
        self.built_at = built_at
        # Search scans "all" in build order, which selecting "all" re-sorts.
        self._build_order = {
            language: list(language_buckets[CATEGORY_ALL].records)
            for language, language_buckets in buckets.items()
        }

    @classmethod
    def build(
        cls,
        raw_records: Iterable[Any],
        now: Optional[datetime] = None,
        new_period: timedelta = NEW_PLUGIN_PERIOD,
        recently_used: Optional[Sequence[str]] = None,
        installed_versions: Optional[Mapping[str, str]] = None,
    ) -> 'CatalogIndex':
        """Build the index from a full metadata snapshot.

        Parameters
        ----------
        raw_records : Iterable[Any]
            Raw metadata mappings or already-built GadgetRecord objects.
        now : Optional[datetime]
            Build time. Defaults to the current UTC time.
        new_period : timedelta
            Recency window for the "new" category. Default 60 days.
        recently_used : Optional[Sequence[str]]
            Record ids in most-recently-used order.
        installed_versions : Optional[Mapping[str, str]]
            Installed versions keyed by record id, used to fill "updates".

        Returns
        -------
        CatalogIndex
        """
        built_at = to_utc(now) if now is not None else datetime.now(timezone.utc)
        buckets: Dict[str, Dict[str, Bucket]] = {}
        accepted: List[GadgetRecord] = []
        skipped = 0

        logger.debug("Begin loading metadata")
        for raw in raw_records:
            record = (
                raw if isinstance(raw, GadgetRecord)
                else GadgetRecord.from_raw(raw)
            )
            if not record.sidebar_eligible:
                skipped += 1
                continue
            accepted.append(record)

            is_new = (
                record.updated_at is not None
                and built_at - record.updated_at < new_period
            )
            for language in sorted(record.languages):
                language_buckets = buckets.get(language)
                if language_buckets is None:
                    language_buckets = buckets[language] = {
                        category: Bucket(category)
                        for category in IMPLICIT_CATEGORIES
                    }
                language_buckets[CATEGORY_ALL].append(record)
                if is_new:
                    language_buckets[CATEGORY_NEW].append(record)
                for category in sorted(record.categories):
                    bucket = language_buckets.get(category)
                    if bucket is None:
                        bucket = language_buckets[category] = Bucket(category)
                    bucket.append(record)

        if recently_used:
            by_id = {record.id: record for record in accepted}
            for record_id in recently_used:
                record = by_id.get(record_id)
                if record is None:
                    continue
                for language in record.languages:
                    bucket = buckets[language][CATEGORY_RECENTLY_USED]
                    if record not in bucket:
                        bucket.append(record)

        if installed_versions:
            for record in find_updates(accepted, installed_versions):
                for language in record.languages:
                    buckets[language][CATEGORY_UPDATES].append(record)

        logger.debug("Finished loading metadata")
        logger.info(
            "Indexed %d gadgets in %d languages (%d skipped as not for desktop)",
            len(accepted), len(buckets), skipped,
        )
        return cls(buckets, built_at)

    @property
    def languages(self) -> List[str]:
        """Languages with at least one record.

        Supported languages come first in their canonical order, any
        others follow alphabetically.
        """
        known = [lang for lang in SUPPORTED_LANGUAGES if lang in self._buckets]
        extra = sorted(lang for lang in self._buckets if lang not in known)
        return known + extra

    def has_language(self, language: str) -> bool:
        return language in self._buckets

    def bucket(self, language: str, category: str) -> Optional[Bucket]:
        """Return the raw bucket, or None if the pair is unknown."""
        return self._buckets.get(language, {}).get(category)

    def sorted_records(self, language: str, category: str) -> List[GadgetRecord]:
        """Return the bucket's records, sorting them on first access.

        Parameters
        ----------
        language : str
        category : str

        Returns
        -------
        List[GadgetRecord]
            The bucket's own list (not a copy), or an empty list if the
            language or category is unknown.
        """
        bucket = self.bucket(language, category)
        if bucket is None:
            return []
        if not bucket.sorted:
            logger.debug("Begin sorting %s/%s", language, category)
            sort_records(bucket.records, category)
            bucket.sorted = True
            logger.debug("End sorting %s/%s", language, category)
        return bucket.records

    def all_records(self, language: str) -> List[GadgetRecord]:
        """Records of the "all" bucket in build order (a copy)."""
        return list(self._build_order.get(language, ()))

    def categories(self, language: str) -> Tuple[List[str], List[str]]:
        """Non-empty categories for a language, split into display groups.

        Parameters
        ----------
        language : str

        Returns
        -------
        Tuple[List[str], List[str]]
            (primary, secondary) category codes in display order.
        """
        language_buckets = self._buckets.get(language, {})

        def present(group: Sequence[str]) -> List[str]:
            return [
                category for category in group
                if len(language_buckets.get(category, ())) > 0
            ]

        return present(PRIMARY_CATEGORIES), present(SECONDARY_CATEGORIES)

    def __repr__(self) -> str:
        return f"CatalogIndex(languages={self.languages!r})"
