# -*- coding: utf-8 -*-
"""
Tests for gadget_browser.catalog.pager — page counts and grid placement.

Created
-------
2026-10-18
"""

import pytest

from gadget_browser.catalog.models import GadgetRecord
from gadget_browser.catalog.pager import clamp_page, page, total_pages


def _records(n):
    return [GadgetRecord(id=str(i)) for i in range(n)]


class TestTotalPages:

    def test_empty_list_has_one_page(self):
        assert total_pages([], 12) == 1

    def test_rounds_up(self):
        assert total_pages(_records(37), 12) == 4

    def test_exact_multiple(self):
        assert total_pages(_records(24), 12) == 2

    def test_invalid_page_size(self):
        with pytest.raises(ValueError):
            total_pages(_records(3), 0)


class TestClampPage:

    def test_clamps_both_ends(self):
        records = _records(13)
        assert clamp_page(-1, records, 12) == 0
        assert clamp_page(5, records, 12) == 1
        assert clamp_page(1, records, 12) == 1

    def test_empty_list(self):
        assert clamp_page(3, [], 12) == 0


class TestPage:

    def test_first_page_row_major(self):
        records = _records(13)
        first = page(records, 0, rows=3, columns=4)
        assert len(first) == 12
        assert first.total == 2
        placements = [(s.index, s.row, s.column) for s in first.slots]
        assert placements == [
            (r * 4 + c, r, c) for r in range(3) for c in range(4)
        ]
        assert first.has_previous is False
        assert first.has_next is True

    def test_thirteenth_record_on_second_page(self):
        records = _records(13)
        second = page(records, 1, rows=3, columns=4)
        assert len(second) == 1
        slot = second.slots[0]
        assert (slot.index, slot.row, slot.column) == (12, 0, 0)
        assert slot.record is records[12]
        assert second.has_previous is True
        assert second.has_next is False

    def test_stops_when_records_run_out(self):
        second = page(_records(18), 1, rows=3, columns=4)
        assert [(s.row, s.column) for s in second.slots] == [
            (0, 0), (0, 1), (0, 2), (0, 3), (1, 0), (1, 1),
        ]

    def test_empty_list(self):
        empty = page([], 0, rows=3, columns=4)
        assert empty.slots == []
        assert empty.total == 1
        assert empty.has_next is False

    def test_records_property(self):
        records = _records(2)
        assert page(records, 0, rows=1, columns=4).records == records

    def test_invalid_grid(self):
        with pytest.raises(ValueError):
            page(_records(3), 0, rows=0, columns=4)

    def test_negative_page(self):
        with pytest.raises(ValueError):
            page(_records(3), -1, rows=3, columns=4)
