# -*- coding: utf-8 -*-
"""
Tests for gadget_browser.__main__ — command-line browsing.

Created
-------
2026-10-18
"""

import json
from unittest import mock

import pytest

from gadget_browser.__main__ import main


@pytest.fixture
def snapshot(tmp_path):
    entries = [
        {
            'attributes': {
                'id': str(i), 'name': f"Gadget {i}", 'rank': str(i / 100),
                'category': "tools" if i % 2 else "news",
                'author': "Acme" if i == 3 else "",
            },
        }
        for i in range(14)
    ]
    path = tmp_path / "metadata.json"
    path.write_text(json.dumps(entries))
    return path


@pytest.fixture(autouse=True)
def _default_config(tmp_path):
    with mock.patch(
        'gadget_browser.core.config._CONFIG_FILE', tmp_path / "none.json",
    ):
        yield


class TestCli:

    def test_lists_first_page(self, snapshot, capsys):
        assert main([str(snapshot)]) == 0
        out = capsys.readouterr().out
        assert "en (English)" in out
        assert "News, Tools" in out
        assert "[0,0] Gadget 13" in out
        assert "1 of 2" in out

    def test_page_is_clamped(self, snapshot, capsys):
        assert main([str(snapshot), "--page", "9"]) == 0
        out = capsys.readouterr().out
        assert "2 of 2" in out
        assert "[0,1] Gadget 0" in out

    def test_category(self, snapshot, capsys):
        assert main([str(snapshot), "--category", "tools"]) == 0
        out = capsys.readouterr().out
        assert "Gadget 13" in out
        assert "Gadget 12" not in out

    def test_search(self, snapshot, capsys):
        assert main([str(snapshot), "--search", "acme"]) == 0
        out = capsys.readouterr().out
        assert "[0,0] Gadget 3" in out
        assert "• Acme" in out
        assert "1 of 1" in out

    def test_missing_snapshot(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == 1
        assert "cannot load metadata" in capsys.readouterr().err

    def test_unknown_language(self, snapshot, capsys):
        assert main([str(snapshot), "--language", "xx"]) == 1
        assert "no gadgets for language" in capsys.readouterr().err


class TestOpenCatalog:

    def test_opens_default_language(self, snapshot):
        from gadget_browser import open_catalog

        selection = open_catalog(snapshot)
        assert selection.language == "en"
        assert selection.category == "all"
        assert selection.total_pages == 2
        assert selection.placeholder == "Search gadgets"
