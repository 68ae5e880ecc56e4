# -*- coding: utf-8 -*-
"""
Plugin API Flags - Numeric constants of the gadget host scripting API.

Defines the flag sets and enumerations that script gadgets pass to the
host (details views, content items, display targets, menus, logging),
as IntFlag/IntEnum types so combinations stay plain integers on the
wire.

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
import logging
from enum import IntEnum, IntFlag
from typing import Dict


class DetailsViewFlag(IntFlag):
    """Flags for the details view shown next to the sidebar."""

    NONE = 0
    TOOLBAR_OPEN = 1
    NEGATIVE_FEEDBACK = 2
    REMOVE_BUTTON = 4
    SHARE_WITH_BUTTON = 8


class PluginFlag(IntFlag):
    """Toolbar buttons a plugin enables."""

    NONE = 0
    TOOLBAR_BACK = 1
    TOOLBAR_FORWARD = 2


class PluginCommand(IntEnum):
    ABOUT_DIALOG = 1
    TOOLBAR_BACK = 2
    TOOLBAR_FORWARD = 3


class ContentItemLayout(IntEnum):
    NOWRAP_ITEMS = 0
    NEWS = 1
    EMAIL = 2


class ContentFlag(IntFlag):
    """Flags for a plugin's content area."""

    NONE = 0
    HAVE_DETAILS = 1
    PINNABLE = 2
    MANUAL_LAYOUT = 4
    NO_AUTO_MIN_SIZE = 8


class ContentItemFlag(IntFlag):
    """Flags for a single content item."""

    NONE = 0x0000
    STATIC = 0x0001
    HIGHLIGHTED = 0x0002
    PINNED = 0x0004
    TIME_ABSOLUTE = 0x0008
    NEGATIVE_FEEDBACK = 0x0010
    LEFT_ICON = 0x0020
    NO_REMOVE = 0x0040
    SHAREABLE = 0x0080
    SHARED = 0x0100
    INTERACTED = 0x0200
    DISPLAY_AS_IS = 0x0400
    HTML = 0x0800
    HIDDEN = 0x1000


class ItemDisplay(IntFlag):
    """Where a content item may be displayed."""

    IN_SIDEBAR = 1
    IN_SIDEBAR_IF_VISIBLE = 2
    AS_NOTIFICATION = 4
    AS_NOTIFICATION_IF_SIDEBAR_HIDDEN = 8


class TileDisplayState(IntEnum):
    HIDDEN = 0
    RESTORED = 1
    MINIMIZED = 2
    POPPED_OUT = 3
    RESIZED = 4


class TargetDevice(IntEnum):
    SIDEBAR = 0
    NOTIFIER = 1
    FLOATING_VIEW = 2


class TextFlag(IntFlag):
    CENTER = 1
    RIGHT = 2
    VCENTER = 4
    BOTTOM = 8
    WORD_BREAK = 16
    SINGLE_LINE = 32


class MenuItemFlag(IntFlag):
    GRAYED = 1
    CHECKED = 8


class DialogButton(IntEnum):
    OK = 1
    CANCEL = 2


class LogLevel(IntEnum):
    """Host log levels, spaced by 100."""

    DEBUG = 0
    INFO = 100
    WARNING = 200
    ERROR = 300


class TopicId(IntEnum):
    """Topic ids for content classification."""

    UNKNOWN = -1
    BUSINESS = 0
    FINANCE = 1
    NEWS = 2
    KIDS = 3
    GAMES = 4
    HEALTH = 5
    TRAVEL = 6
    SCIENCE = 7
    SHOPPING = 8
    COMPUTERS = 9
    TECHNOLOGY = 10
    PROGRAMMER = 11
    WEBLOGS = 12
    SOCIAL = 13
    SPORTS = 14
    ENTERTAINMENT = 15
    MOVIES = 16
    TV = 17
    CAREERS = 18
    WEATHER = 19
    REALESTATE = 20


class ContentRankingFlag(IntEnum):
    NONE = 0
    ALWAYS_TOP = 1
    ALWAYS_BOTTOM = 2


class ContentRankingAlgorithm(IntFlag):
    NONE = 0
    DIRECTLY_PROPORTIONAL = 1
    INVERSELY_PROPORTIONAL = 2
    LEAST_STEEP = 4
    MOST_STEEP = 8


ELEMENT_MAX_OPACITY = 255
ELEMENT_MIN_OPACITY = 0


_LOGGING_LEVELS: Dict[LogLevel, int] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


def to_logging_level(level: int) -> int:
    """Map a host log level to a Python ``logging`` level.

    Values between the host levels round down to the nearest one;
    anything above ERROR maps to ERROR.

    Parameters
    ----------
    level : int
        Host log level.

    Returns
    -------
    int
    """
    if level < LogLevel.DEBUG:
        return logging.DEBUG
    host_level = LogLevel(min(level, LogLevel.ERROR) // 100 * 100)
    return _LOGGING_LEVELS[host_level]
