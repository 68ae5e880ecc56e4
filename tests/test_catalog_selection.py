# -*- coding: utf-8 -*-
"""
Tests for gadget_browser.catalog.selection — Selection session.

Created
-------
2026-10-18
"""

import pytest

from gadget_browser.catalog.index import CatalogIndex
from gadget_browser.catalog.selection import Selection


def _ids(records):
    return [r.id for r in records]


@pytest.fixture
def selection(index):
    return Selection(index, placeholder="Search gadgets").open_language("en")


@pytest.fixture
def big_selection(gadget_factory, now):
    raws = [
        gadget_factory(f"g{i:02d}", f"Gadget {i}", rank=str(1 - i / 100))
        for i in range(30)
    ]
    return Selection(CatalogIndex.build(raws, now=now)).open_language("en")


class TestSelectCategory:

    def test_open_language_selects_all(self, selection):
        assert selection.category == "all"
        assert _ids(selection.records) == ["gf", "feed", "yw", "clock"]
        assert selection.page_number == 0

    def test_select_language_only_sets_language(self, selection):
        records = selection.records
        selection.select_language("fr")
        assert selection.language == "fr"
        assert selection.records is records

    def test_select_category_resets_page(self, big_selection):
        big_selection.select_page(2)
        big_selection.select_category("new")
        assert big_selection.page_number == 0

    def test_same_list_object_on_reselect(self, selection):
        first = selection.select_category("all").records
        selection.select_category("news")
        second = selection.select_category("all").records
        assert first is second

    def test_unknown_category_is_empty(self, selection):
        selection.select_category("holiday")
        assert selection.records == []
        assert selection.total_pages == 1

    def test_unknown_language_is_empty(self, selection):
        selection.open_language("xx")
        assert selection.records == []
        assert selection.categories() == ([], [])

    def test_none_enters_search_mode(self, selection):
        selection.select_category(None)
        assert selection.in_search_mode
        assert selection.records == []

    def test_independent_selections(self, index):
        english = Selection(index).open_language("en")
        french = Selection(index).open_language("fr")
        english.select_category("news")
        assert _ids(french.records) == ["meteo"]
        assert _ids(english.records) == ["feed", "yw"]


class TestSearch:

    def test_search_results_in_build_order(self, selection):
        selection.search("news google")
        # No record matches both terms.
        assert selection.records == []
        selection.search("o")
        assert _ids(selection.records) == ["gf", "yw", "clock", "feed"]
        assert selection.in_search_mode

    def test_search_goo(self, selection):
        selection.search("goo")
        assert _ids(selection.records) == ["gf", "feed"]

    def test_empty_and_placeholder_are_noops(self, selection):
        selection.select_category("news")
        selection.search("")
        selection.search("Search gadgets")
        assert selection.category == "news"

    def test_whitespace_lists_every_record(self, selection):
        selection.select_category("news").search("   ")
        assert selection.category is None
        assert _ids(selection.records) == ["gf", "yw", "clock", "feed"]
        assert selection.page_number == 0

    def test_search_resets_page(self, big_selection):
        big_selection.select_page(2)
        big_selection.search("gadget")
        assert big_selection.page_number == 0
        assert len(big_selection.records) == 30

    def test_search_does_not_touch_index(self, selection, index):
        before = list(index.bucket("en", "all").records)
        selection.search("yahoo")
        assert index.bucket("en", "all").records == before

    def test_search_scoped_to_language(self, selection):
        selection.select_language("fr").search("météo")
        assert _ids(selection.records) == ["meteo"]


class TestPaging:

    def test_total_pages(self, big_selection):
        assert big_selection.total_pages == 3

    def test_next_and_previous_clamp(self, big_selection):
        assert big_selection.previous_page().number == 0
        big_selection.next_page()
        big_selection.next_page()
        last = big_selection.next_page()
        assert last.number == 2
        assert big_selection.page_number == 2
        assert len(last) == 6
        assert last.has_next is False

    def test_current_page_grid(self, big_selection):
        current = big_selection.current_page()
        assert len(current) == 12
        assert current.slots[5].row == 1
        assert current.slots[5].column == 1

    def test_custom_grid(self, index):
        selection = Selection(index, rows=1, columns=2).open_language("en")
        assert selection.page_size == 2
        assert selection.total_pages == 2

    def test_invalid_grid(self, index):
        with pytest.raises(ValueError):
            Selection(index, rows=0)
