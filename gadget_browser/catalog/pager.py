# -*- coding: utf-8 -*-
"""
Pager - Fixed-size, grid-placed pages over a selected record list.

Pages are computed on demand from whatever list is currently selected
and are never cached.

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
import math
from typing import List, Sequence

# Gadget browser internal
from gadget_browser.catalog.models import GadgetRecord, Page, PageSlot


def total_pages(records: Sequence[GadgetRecord], page_size: int) -> int:
    """Number of pages needed for ``records``.

    An empty list still reports one page, to avoid showing "1 of 0".

    Parameters
    ----------
    records : Sequence[GadgetRecord]
    page_size : int

    Returns
    -------
    int
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if not records:
        return 1
    return math.ceil(len(records) / page_size)


def clamp_page(page_number: int, records: Sequence[GadgetRecord], page_size: int) -> int:
    """Clamp a page number to ``[0, total_pages - 1]``."""
    return max(0, min(page_number, total_pages(records, page_size) - 1))


def page(
    records: Sequence[GadgetRecord],
    page_number: int,
    rows: int,
    columns: int,
) -> Page:
    """Slice one page out of ``records`` and place it on a grid.

    Placement is row-major. Emission stops entirely once the records
    run out, so a short last page has no gaps before its final slot.

    Parameters
    ----------
    records : Sequence[GadgetRecord]
        The selected list.
    page_number : int
        Zero-based page number.
    rows : int
        Grid rows per page.
    columns : int
        Grid columns per page.

    Returns
    -------
    Page
    """
    if rows <= 0 or columns <= 0:
        raise ValueError(
            f"rows and columns must be positive, got {rows}x{columns}"
        )
    if page_number < 0:
        raise ValueError(f"page_number must be non-negative, got {page_number}")
    page_size = rows * columns
    total = total_pages(records, page_size)
    if not records:
        return Page(number=0, total=total, slots=[])

    slots: List[PageSlot] = []
    start = page_number * page_size
    for row in range(rows):
        for column in range(columns):
            index = start + column
            if index >= len(records):
                return Page(number=page_number, total=total, slots=slots)
            slots.append(PageSlot(records[index], index, row, column))
        start += columns
    return Page(number=page_number, total=total, slots=slots)
