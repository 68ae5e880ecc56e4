# -*- coding: utf-8 -*-
"""
Catalog Search - Substring search over gadget records.

A linear scan of a language's "all" list; every whitespace-separated
term must occur, case-insensitively, somewhere in a record's searchable
text (author, date, URLs, keywords, title, description).

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
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

# Gadget browser internal
from gadget_browser.catalog.models import GadgetRecord


def is_blank_query(text: Optional[str], placeholder: Optional[str] = None) -> bool:
    """Whether ``text`` is empty or just the search-box placeholder.

    Whitespace-only text is a real query: it has no terms, so it matches
    every record.
    """
    if not text:
        return True
    return placeholder is not None and text == placeholder


def split_terms(text: str) -> List[str]:
    """Case-folded, non-empty search terms."""
    return [term.casefold() for term in text.split() if term]


def matches(record: GadgetRecord, terms: List[str], language: str) -> bool:
    """AND of substring matches of ``terms`` against the record."""
    text = record.searchable_text(language)
    return all(term in text for term in terms)


def search_records(
    records: Iterable[GadgetRecord],
    query: str,
    language: str,
) -> List[GadgetRecord]:
    """Filter ``records`` down to those matching every term of ``query``.

    Parameters
    ----------
    records : Iterable[GadgetRecord]
        Candidates, usually the language's "all" list in build order.
    query : str
        Raw search-box text.
    language : str
        Language whose titles and descriptions are searched.

    Returns
    -------
    List[GadgetRecord]
        Matching records in input order.
    """
    terms = split_terms(query)
    logger.debug("Search begins: %r (%s)", terms, language)
    results = [record for record in records if matches(record, terms, language)]
    logger.debug("Search ends: %d matches", len(results))
    return results
