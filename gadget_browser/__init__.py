# -*- coding: utf-8 -*-
"""
Gadget Browser - Catalog engine for a desktop gadget browser.

Indexes a gadget metadata snapshot by language and category, and
answers the browsing queries of the gadget browser view: category
selection with ranked or recency ordering, substring search and
grid-placed paging.

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

__version__ = "0.1.0"


def open_catalog(path=None, *, config=None, strings=None, **build_kwargs):
    """Load a metadata snapshot and return a Selection showing "all".

    See :class:`gadget_browser.catalog.index.CatalogIndex.build` for the
    accepted ``build_kwargs``.
    """
    from gadget_browser.catalog.index import CatalogIndex
    from gadget_browser.catalog.loader import load_metadata
    from gadget_browser.catalog.selection import Selection
    from gadget_browser.core.config import load_config
    from gadget_browser.core.display import StringTable

    config = config or load_config()
    strings = strings or StringTable()
    build_kwargs.setdefault('new_period', config.new_plugin_period)
    index = CatalogIndex.build(load_metadata(path), **build_kwargs)
    selection = Selection(
        index,
        rows=config.plugin_rows,
        columns=config.plugin_columns,
        placeholder=strings.search_placeholder,
    )
    return selection.open_language(config.default_language)


__all__: list = ["open_catalog"]
