# -*- coding: utf-8 -*-
"""
Gadget Browser CLI - Browse a gadget metadata snapshot from the terminal.

Usage::

    python -m gadget_browser metadata.json --language en --category news
    python -m gadget_browser metadata.yaml --search "google finance" --page 1

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

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gadget_browser",
        description="Gadget Browser — list, filter and search a gadget catalog.",
    )
    parser.add_argument(
        "snapshot",
        type=Path,
        nargs="?",
        default=None,
        help="Path to a JSON or YAML metadata snapshot "
             "(default: resolved from GADGET_BROWSER_METADATA or config).",
    )
    parser.add_argument(
        "--language", "-l",
        default=None,
        help="Language code to browse (default: from config).",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--category", "-c",
        default="all",
        help="Category code to list (default: all).",
    )
    group.add_argument(
        "--search", "-s",
        default=None,
        help="Search text; every term must match.",
    )
    parser.add_argument(
        "--page", "-p",
        type=int,
        default=1,
        help="One-based page number (clamped to the available pages).",
    )
    parser.add_argument(
        "--log-level",
        type=int,
        default=200,
        help="Host log level: 0 debug, 100 info, 200 warning, 300 error.",
    )

    args = parser.parse_args(argv)

    from gadget_browser.core.api_flags import to_logging_level
    logging.basicConfig(
        level=to_logging_level(args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    from gadget_browser.catalog.index import CatalogIndex
    from gadget_browser.catalog.loader import load_metadata
    from gadget_browser.catalog.selection import Selection
    from gadget_browser.core.config import load_config
    from gadget_browser.core.display import StringTable, describe, page_label

    config = load_config()
    strings = StringTable()

    try:
        raw_records = load_metadata(args.snapshot)
    except (OSError, ValueError) as e:
        print(f"Error: cannot load metadata: {e}", file=sys.stderr)
        return 1

    index = CatalogIndex.build(raw_records, new_period=config.new_plugin_period)
    language = args.language or config.default_language
    if not index.has_language(language):
        print(f"Error: no gadgets for language: {language}", file=sys.stderr)
        return 1

    selection = Selection(
        index,
        rows=config.plugin_rows,
        columns=config.plugin_columns,
        placeholder=strings.search_placeholder,
    ).open_language(language)

    print("Languages: " + ", ".join(
        f"{code} ({strings.language(code)})" for code in selection.languages()
    ))
    primary, secondary = selection.categories()
    print("Categories: " + ", ".join(strings.category(c) for c in primary))
    print("            " + ", ".join(strings.category(c) for c in secondary))

    if args.search is not None:
        selection.search(args.search)
    else:
        selection.select_category(args.category)

    page = selection.select_page(args.page - 1)
    for slot in page.slots:
        info = describe(slot.record, language, strings)
        print(f"[{slot.row},{slot.column}] {info['title']}")
        if info['other_data']:
            print(f"      {info['other_data']}")
    print(page_label(page, strings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
