# -*- coding: utf-8 -*-
"""
Shared fixtures for gadget browser tests.

Provides a fixed build time and a small, varied metadata snapshot.

Created
-------
2026-10-18
"""

from datetime import datetime, timedelta, timezone

import pytest

from gadget_browser.catalog.index import CatalogIndex


NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def make_raw(
    id,
    name,
    rank="0.5",
    language="en",
    category="",
    days_old=None,
    **attrs,
):
    """Build one raw metadata entry as the loader would return it."""
    attributes = {
        'id': id,
        'name': name,
        'rank': rank,
        'language': language,
        'category': category,
        'sidebar': 'true',
    }
    attributes.update(attrs)
    updated = NOW - timedelta(days=days_old) if days_old is not None else None
    return {
        'attributes': attributes,
        'titles': {},
        'descriptions': {},
        'updated_date': updated,
    }


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def gadget_factory():
    return make_raw


@pytest.fixture
def raw_gadgets():
    return [
        make_raw(
            "gf", "Google Finance", rank="0.9", language="en,de",
            category="finance,google", days_old=1, author="Google",
            version="1.2", size_kilobytes="40",
            product_summary="Stock quotes and charts",
        ),
        make_raw(
            "yw", "Yahoo Weather", rank="0.1", category="news",
            days_old=100, author="Yahoo", version="1.0",
            keywords="forecast rain",
        ),
        make_raw(
            "clock", "Analog Clock", rank="n/a", category="tools",
            days_old=10,
        ),
        make_raw(
            "toolbar", "Toolbar Button", rank="0.7", sidebar="false",
            days_old=1,
        ),
        make_raw(
            "feed", "Feed Reader", rank="0.5", language="", category="news",
            days_old=30, sidebar="false", module_id="25", type="igoogle",
            download_url="http://desktop.google.com/feed_reader.gg",
        ),
        make_raw(
            "meteo", "Météo", rank="0.3", language="fr", category="news",
        ),
    ]


@pytest.fixture
def index(raw_gadgets):
    return CatalogIndex.build(raw_gadgets, now=NOW)