# -*- coding: utf-8 -*-
"""
Catalog Module - In-memory gadget catalog for the gadget browser.

Provides the language/category index built from a metadata snapshot,
the per-view selection session with search and paging, and the
debounced search driver used by the search box.

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
