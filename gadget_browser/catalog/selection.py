# -*- coding: utf-8 -*-
"""
Selection - Per-view browsing session over a CatalogIndex.

Holds the current language, category, selected record list and page
number for one browsing surface. Several selections may share one
index; the index itself is never mutated after build, apart from the
one-time sort of each bucket.

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
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

# Gadget browser internal
from gadget_browser.catalog import pager
from gadget_browser.catalog.index import CatalogIndex
from gadget_browser.catalog.models import (
    CATEGORY_ALL,
    DEFAULT_LANGUAGE,
    GadgetRecord,
    Page,
)
from gadget_browser.catalog.search import is_blank_query, search_records


class Selection:
    """Browsing state for a single view.

    Every query method returns the selection itself so calls can be
    chained.

    Parameters
    ----------
    index : CatalogIndex
        The catalog to browse.
    rows : int
        Grid rows per page. Default 3.
    columns : int
        Grid columns per page. Default 4.
    language : str
        Initial language. Default 'en'.
    placeholder : Optional[str]
        Search-box placeholder text; searching for it is a no-op.
    """

    def __init__(
        self,
        index: CatalogIndex,
        rows: int = 3,
        columns: int = 4,
        language: str = DEFAULT_LANGUAGE,
        placeholder: Optional[str] = None,
    ) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError(
                f"rows and columns must be positive, got {rows}x{columns}"
            )
        self.index = index
        self.rows = rows
        self.columns = columns
        self.placeholder = placeholder
        self.language = language
        self.category: Optional[str] = None
        self.records: List[GadgetRecord] = []
        self.page_number = 0

    @property
    def page_size(self) -> int:
        return self.rows * self.columns

    @property
    def in_search_mode(self) -> bool:
        return self.category is None

    @property
    def total_pages(self) -> int:
        return pager.total_pages(self.records, self.page_size)

    def languages(self) -> List[str]:
        return self.index.languages

    def categories(self) -> Tuple[List[str], List[str]]:
        """(primary, secondary) categories for the current language."""
        return self.index.categories(self.language)

    def select_language(self, language: str) -> 'Selection':
        """Set the current language. Select a category afterwards."""
        self.language = language
        return self

    def open_language(self, language: str) -> 'Selection':
        """Switch language and show its "all" category."""
        return self.select_language(language).select_category(CATEGORY_ALL)

    def select_category(self, category: Optional[str]) -> 'Selection':
        """Select a category of the current language.

        Parameters
        ----------
        category : Optional[str]
            Category code, or None to enter search mode with an empty
            list until results are shown.

        Returns
        -------
        Selection
        """
        self.category = category
        if category is None:
            self.records = []
        else:
            self.records = self.index.sorted_records(self.language, category)
            logger.debug(
                "Selected %s/%s (%d gadgets)",
                self.language, category, len(self.records),
            )
        self.page_number = 0
        return self

    def show_results(self, records: List[GadgetRecord]) -> 'Selection':
        """Show an ad-hoc list (search results) in search mode."""
        self.select_category(None)
        self.records = records
        return self

    def search(self, text: Optional[str]) -> 'Selection':
        """Search the current language's "all" list.

        Empty text and the placeholder are ignored.

        Parameters
        ----------
        text : Optional[str]
            Search-box text.

        Returns
        -------
        Selection
        """
        if is_blank_query(text, self.placeholder):
            return self
        results = search_records(
            self.index.all_records(self.language), text, self.language,
        )
        return self.show_results(results)

    def select_page(self, page_number: int) -> Page:
        """Move to ``page_number``, clamped to the valid range."""
        self.page_number = pager.clamp_page(
            page_number, self.records, self.page_size,
        )
        return self.current_page()

    def next_page(self) -> Page:
        return self.select_page(self.page_number + 1)

    def previous_page(self) -> Page:
        return self.select_page(self.page_number - 1)

    def current_page(self) -> Page:
        return pager.page(self.records, self.page_number, self.rows, self.columns)

    def __repr__(self) -> str:
        return (
            f"Selection(language={self.language!r}, category={self.category!r}, "
            f"records={len(self.records)}, page={self.page_number})"
        )
