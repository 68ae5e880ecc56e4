# -*- coding: utf-8 -*-
"""
Tests for gadget_browser.core.display — labels and gadget strings.

Created
-------
2026-10-18
"""

from datetime import datetime, timezone

import pytest

from gadget_browser.catalog.models import (
    PRIMARY_CATEGORIES,
    SECONDARY_CATEGORIES,
    GadgetRecord,
    Page,
)
from gadget_browser.core.display import (
    StringTable,
    describe,
    other_data,
    page_label,
)


@pytest.fixture
def strings():
    return StringTable()


class TestStringTable:

    def test_language_labels(self, strings):
        assert strings.language("en") == "English"
        assert strings.language("zh-cn") == "中文 (简体)"

    def test_category_labels(self, strings):
        assert strings.category("fun_games") == "Fun & Games"
        assert strings.category("recently_used") == "Recently used"

    def test_every_fixed_category_has_a_label(self, strings):
        for code in PRIMARY_CATEGORIES + SECONDARY_CATEGORIES:
            assert strings.category(code) != code

    def test_unknown_code_falls_back_to_code(self, strings):
        assert strings.language("xx") == "xx"
        assert strings.category("weird") == "weird"

    def test_overrides(self):
        strings = StringTable({'CATEGORY_NEWS': "Nachrichten"})
        assert strings.category("news") == "Nachrichten"
        assert strings.category("tools") == "Tools"


class TestOtherData:

    def test_all_segments(self, strings):
        record = GadgetRecord(
            id="x",
            attributes={
                'version': "1.2", 'size_kilobytes': "40", 'author': "Google",
            },
            updated_at=datetime(2026, 10, 1, tzinfo=timezone.utc),
        )
        assert other_data(record, strings) == (
            "• Version 1.2 | 40KB | 2026-10-01 | Google"
        )

    def test_missing_segments_skipped(self, strings):
        record = GadgetRecord(id="x", attributes={'author': "Yahoo"})
        assert other_data(record, strings) == "• Yahoo"

    def test_empty_has_no_bullet(self, strings):
        assert other_data(GadgetRecord(id="x"), strings) == ""
        assert other_data(None, strings) == ""

    def test_custom_separator(self):
        strings = StringTable({'PLUGIN_DATA_SEPARATOR': " / "})
        record = GadgetRecord(
            id="x", attributes={'version': "2", 'author': "A"},
        )
        assert other_data(record, strings) == "• Version 2 / A"


class TestPageLabel:

    def test_label(self, strings):
        assert page_label(Page(number=1, total=4, slots=[]), strings) == "2 of 4"


class TestDescribe:

    def test_localized(self, strings):
        record = GadgetRecord(
            id="x",
            attributes={'name': "Weather", 'product_summary': "Forecasts"},
            titles={'de': "Wetter"},
        )
        info = describe(record, "de", strings)
        assert info['title'] == "Wetter"
        assert info['description'] == "Forecasts"
        assert info['other_data'] == ""

    def test_none(self, strings):
        assert describe(None, "en", strings) == {
            'title': "", 'description': "", 'other_data': "",
        }
