# -*- coding: utf-8 -*-
"""
Catalog Models - Data models for gadget catalog entries.

Defines the GadgetRecord, Bucket, PageSlot and Page data models used by
the catalog index, the selection session and the pager.

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
from datetime import date, datetime, timezone
from typing import Any, Dict, FrozenSet, Iterator, List, Optional

logger = logging.getLogger(__name__)


DEFAULT_LANGUAGE = "en"
IGOOGLE_FEED_MODULE_ID = "25"

PLUGIN_TYPE_IGOOGLE = "igoogle"

CATEGORY_ALL = "all"
CATEGORY_NEW = "new"
CATEGORY_RECOMMENDATIONS = "recommendations"
CATEGORY_GOOGLE = "google"
CATEGORY_RECENTLY_USED = "recently_used"
CATEGORY_UPDATES = "updates"

# Present in every language bucket, possibly empty.
IMPLICIT_CATEGORIES = (
    CATEGORY_ALL, CATEGORY_NEW, CATEGORY_RECENTLY_USED, CATEGORY_UPDATES,
)

PRIMARY_CATEGORIES = (
    CATEGORY_ALL, CATEGORY_NEW, CATEGORY_RECOMMENDATIONS, CATEGORY_GOOGLE,
    CATEGORY_RECENTLY_USED, CATEGORY_UPDATES,
)

SECONDARY_CATEGORIES = (
    "news", "sports", "lifestyle", "tools", "finance", "fun_games",
    "technology", "communication", "holiday",
)

SUPPORTED_LANGUAGES = (
    "bg", "ca", "cs", "da", "de", "el", "en", "en-gb", "es", "fi", "fr", "hi",
    "hr", "hu", "id", "it", "ja", "ko", "nl", "no", "pl", "pt-br", "pt-pt",
    "ro", "ru", "sk", "sl", "sv", "th", "tr", "zh-cn", "zh-tw",
)


def split_values(src: Optional[str]) -> List[str]:
    """Split a comma-separated attribute, dropping empty entries."""
    if not src:
        return []
    return [v.strip() for v in str(src).split(",") if v.strip()]


def parse_rank(value: Any) -> float:
    """Parse a rank attribute, returning NaN when it is malformed."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def to_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_updated_date(value: Any) -> Optional[datetime]:
    """Parse an ``updated_date`` value into an aware UTC datetime.

    Accepts a ``datetime``, a ``date``, epoch milliseconds (int, float or
    digit string) or an ISO-8601 string. Returns None for anything else.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return to_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)) or (
        isinstance(value, str) and value.strip().isdigit()
    ):
        try:
            return datetime.fromtimestamp(float(value) / 1000.0, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return to_utc(datetime.fromisoformat(text))
        except ValueError:
            return None
    return None


def is_sidebar_eligible(attributes: Dict[str, Any]) -> bool:
    """Whether a raw record may be listed in the desktop gadget browser.

    Records marked ``sidebar="false"`` are skipped, except iGoogle feed
    gadgets, which are supported regardless.
    """
    sidebar = attributes.get("sidebar")
    # YAML snapshots decode an unquoted false to a bool.
    if sidebar != "false" and sidebar is not False:
        return True
    return (
        str(attributes.get("module_id", "")) == IGOOGLE_FEED_MODULE_ID
        and attributes.get("type") == PLUGIN_TYPE_IGOOGLE
    )


class GadgetRecord:
    """Metadata for one gadget in the catalog.

    Parameters
    ----------
    id : str
        Opaque unique identifier.
    attributes : Dict[str, Any]
        Raw string-typed attributes as supplied by the metadata provider
        (``name``, ``author``, ``version``, ``size_kilobytes``,
        ``download_url``, ``info_url``, ``keywords``, ...).
    languages : FrozenSet[str]
        Language codes the gadget is listed under.
    categories : FrozenSet[str]
        Category codes the gadget declares. May be empty.
    rank : float
        Relevance rank. NaN when the source value was malformed.
    updated_at : Optional[datetime]
        Last update time, or None if absent or unparsable.
    titles : Optional[Dict[str, str]]
        Localized titles keyed by language code.
    descriptions : Optional[Dict[str, str]]
        Localized descriptions keyed by language code.
    sidebar_eligible : bool
        Whether the gadget passed the desktop eligibility filter.
    """

    def __init__(
        self,
        id: str,
        attributes: Optional[Dict[str, Any]] = None,
        languages: Optional[FrozenSet[str]] = None,
        categories: Optional[FrozenSet[str]] = None,
        rank: float = math.nan,
        updated_at: Optional[datetime] = None,
        titles: Optional[Dict[str, str]] = None,
        descriptions: Optional[Dict[str, str]] = None,
        sidebar_eligible: bool = True,
    ) -> None:
        self.id = id
        self.attributes = dict(attributes or {})
        self.languages = frozenset(languages or (DEFAULT_LANGUAGE,))
        self.categories = frozenset(categories or ())
        self.rank = rank
        self.updated_at = to_utc(updated_at) if updated_at is not None else None
        self.titles = dict(titles or {})
        self.descriptions = dict(descriptions or {})
        self.sidebar_eligible = sidebar_eligible
        self._searchable: Dict[str, str] = {}

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> 'GadgetRecord':
        """Build a record from a raw metadata entry.

        Parameters
        ----------
        raw : Dict[str, Any]
            Mapping with an ``attributes`` mapping, an optional parsed
            ``updated_date`` and optional ``titles``/``descriptions``.

        Returns
        -------
        GadgetRecord
        """
        attrs = dict(raw.get("attributes") or {})
        record_id = str(
            raw.get("id") or attrs.get("id") or attrs.get("uuid")
            or attrs.get("name", "")
        )
        languages = split_values(attrs.get("language")) or [DEFAULT_LANGUAGE]
        rank = parse_rank(attrs.get("rank"))
        if math.isnan(rank) and attrs.get("rank") not in (None, ""):
            logger.warning(
                "Malformed rank %r for gadget '%s'", attrs.get("rank"),
                record_id,
            )
        raw_date = raw.get("updated_date")
        if raw_date is None:
            raw_date = attrs.get("updated_date")
        updated_at = parse_updated_date(raw_date)
        if updated_at is None and raw_date not in (None, ""):
            logger.warning(
                "Malformed updated_date %r for gadget '%s'", raw_date,
                record_id,
            )
        return cls(
            id=record_id,
            attributes=attrs,
            languages=frozenset(languages),
            categories=frozenset(split_values(attrs.get("category"))),
            rank=rank,
            updated_at=updated_at,
            titles=raw.get("titles"),
            descriptions=raw.get("descriptions"),
            sidebar_eligible=is_sidebar_eligible(attrs),
        )

    @property
    def version(self) -> str:
        return str(self.attributes.get("version") or "")

    def title(self, language: str) -> str:
        """Localized title, falling back to the ``name`` attribute."""
        return self.titles.get(language) or str(self.attributes.get("name") or "")

    def description(self, language: str) -> str:
        """Localized description, falling back to ``product_summary``."""
        return (
            self.descriptions.get(language)
            or str(self.attributes.get("product_summary") or "")
        )

    def formatted_date(self) -> str:
        """Update date at day granularity, or an empty string."""
        if self.updated_at is None:
            return ""
        return self.updated_at.strftime("%Y-%m-%d")

    def searchable_text(self, language: str) -> str:
        """Case-folded text matched by search, computed once per language."""
        text = self._searchable.get(language)
        if text is None:
            attrs = self.attributes
            text = " ".join([
                str(attrs.get("author") or ""),
                self.formatted_date(),
                str(attrs.get("download_url") or ""),
                str(attrs.get("info_url") or ""),
                str(attrs.get("keywords") or ""),
                self.title(language),
                self.description(language),
            ]).casefold()
            self._searchable[language] = text
        return text

    def __repr__(self) -> str:
        return (
            f"GadgetRecord(id={self.id!r}, name="
            f"{self.attributes.get('name')!r}, rank={self.rank!r})"
        )


class Bucket:
    """Records listed under one (language, category) pair.

    Parameters
    ----------
    category : str
        Category code the bucket belongs to.
    records : Optional[List[GadgetRecord]]
        Initial records, in insertion order.
    """

    def __init__(
        self,
        category: str,
        records: Optional[List[GadgetRecord]] = None,
    ) -> None:
        self.category = category
        self.records: List[GadgetRecord] = list(records or [])
        self.sorted = False

    def append(self, record: GadgetRecord) -> None:
        self.records.append(record)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[GadgetRecord]:
        return iter(self.records)

    def __contains__(self, record: object) -> bool:
        return record in self.records

    def __repr__(self) -> str:
        return (
            f"Bucket({self.category!r}, {len(self.records)} records, "
            f"sorted={self.sorted})"
        )


class PageSlot:
    """A record placed on the page grid.

    Parameters
    ----------
    record : GadgetRecord
    index : int
        Position of the record in the selected list.
    row : int
    column : int
    """

    def __init__(
        self,
        record: GadgetRecord,
        index: int,
        row: int,
        column: int,
    ) -> None:
        self.record = record
        self.index = index
        self.row = row
        self.column = column

    def __repr__(self) -> str:
        return (
            f"PageSlot({self.record.id!r}, index={self.index}, "
            f"row={self.row}, column={self.column})"
        )


class Page:
    """One page of the selected list, ready for the rendering host.

    Parameters
    ----------
    number : int
        Zero-based page number.
    total : int
        Total number of pages (at least 1).
    slots : List[PageSlot]
        Grid-placed records on this page.
    """

    def __init__(self, number: int, total: int, slots: List[PageSlot]) -> None:
        self.number = number
        self.total = total
        self.slots = slots

    @property
    def records(self) -> List[GadgetRecord]:
        return [slot.record for slot in self.slots]

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def has_next(self) -> bool:
        return self.number < self.total - 1

    def __len__(self) -> int:
        return len(self.slots)

    def __repr__(self) -> str:
        return f"Page({self.number + 1} of {self.total}, {len(self.slots)} records)"
