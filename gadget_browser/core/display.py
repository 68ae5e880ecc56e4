# -*- coding: utf-8 -*-
"""
Display Strings - Human-readable labels for the rendering host.

Resolves language and category labels through an opaque string table
and composes the per-gadget strings shown under the gadget grid.

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
from typing import Dict, Mapping, Optional

# Gadget browser internal
from gadget_browser.catalog.models import GadgetRecord, Page


DEFAULT_STRINGS: Dict[str, str] = {
    'PLUGIN_VERSION': "Version ",
    'PLUGIN_KILOBYTES': "KB",
    'PLUGIN_DATA_SEPARATOR': " | ",
    'PLUGIN_DATA_BULLET': "• ",
    'PAGE_LABEL': "{{PAGE}} of {{TOTAL}}",
    'SEARCH_GADGETS': "Search gadgets",
    'LANGUAGE_EN': "English",
    'LANGUAGE_EN_GB': "English (UK)",
    'LANGUAGE_DE': "Deutsch",
    'LANGUAGE_ES': "Español",
    'LANGUAGE_FR': "Français",
    'LANGUAGE_IT': "Italiano",
    'LANGUAGE_JA': "日本語",
    'LANGUAGE_ZH_CN': "中文 (简体)",
    'LANGUAGE_ZH_TW': "中文 (繁體)",
    'CATEGORY_ALL': "All",
    'CATEGORY_NEW': "New",
    'CATEGORY_RECOMMENDATIONS': "Recommended",
    'CATEGORY_GOOGLE': "Made by Google",
    'CATEGORY_RECENTLY_USED': "Recently used",
    'CATEGORY_UPDATES': "Updates",
    'CATEGORY_NEWS': "News",
    'CATEGORY_SPORTS': "Sports",
    'CATEGORY_LIFESTYLE': "Lifestyle",
    'CATEGORY_TOOLS': "Tools",
    'CATEGORY_FINANCE': "Finance",
    'CATEGORY_FUN_GAMES': "Fun & Games",
    'CATEGORY_TECHNOLOGY': "Technology",
    'CATEGORY_COMMUNICATION': "Communication",
    'CATEGORY_HOLIDAY': "Holiday",
}


class StringTable:
    """Opaque string lookup with English defaults.

    Parameters
    ----------
    overrides : Optional[Mapping[str, str]]
        Localized strings that replace the defaults key by key.
    """

    def __init__(self, overrides: Optional[Mapping[str, str]] = None) -> None:
        self._strings = dict(DEFAULT_STRINGS)
        if overrides:
            self._strings.update(overrides)

    def __getitem__(self, key: str) -> str:
        return self._strings[key]

    def get(self, key: str, default: str = "") -> str:
        return self._strings.get(key, default)

    def language(self, code: str) -> str:
        """Label for a language code, e.g. 'zh-cn' -> LANGUAGE_ZH_CN."""
        return self.get("LANGUAGE_" + code.replace("-", "_").upper(), code)

    def category(self, code: str) -> str:
        """Label for a category code, e.g. 'fun_games' -> CATEGORY_FUN_GAMES."""
        return self.get("CATEGORY_" + code.upper(), code)

    @property
    def search_placeholder(self) -> str:
        return self['SEARCH_GADGETS']


def other_data(record: Optional[GadgetRecord], strings: StringTable) -> str:
    """Compose the version / size / date / author line for a gadget.

    Each segment is included only when its field is present. The bullet
    prefix is added only to a non-empty result.

    Parameters
    ----------
    record : Optional[GadgetRecord]
    strings : StringTable

    Returns
    -------
    str
    """
    if record is None:
        return ""
    attrs = record.attributes
    segments = []
    if attrs.get('version'):
        segments.append(strings['PLUGIN_VERSION'] + str(attrs['version']))
    if attrs.get('size_kilobytes'):
        segments.append(
            str(attrs['size_kilobytes']) + strings['PLUGIN_KILOBYTES']
        )
    if record.updated_at is not None:
        segments.append(record.formatted_date())
    if attrs.get('author'):
        segments.append(str(attrs['author']))

    result = strings['PLUGIN_DATA_SEPARATOR'].join(segments)
    if result:
        result = strings['PLUGIN_DATA_BULLET'] + result
    return result


def page_label(page: Page, strings: StringTable) -> str:
    """'page X of Y' label for a page."""
    return (
        strings['PAGE_LABEL']
        .replace("{{PAGE}}", str(page.number + 1))
        .replace("{{TOTAL}}", str(page.total))
    )


def describe(
    record: Optional[GadgetRecord],
    language: str,
    strings: StringTable,
) -> Dict[str, str]:
    """Title, description and other-data strings for the detail panel."""
    if record is None:
        return {'title': "", 'description': "", 'other_data': ""}
    return {
        'title': record.title(language),
        'description': record.description(language),
        'other_data': other_data(record, strings),
    }
