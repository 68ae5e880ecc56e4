# -*- coding: utf-8 -*-
"""
SearchDebouncer - Coalesce search-box edits into a single delayed search.

Each edit cancels the pending timer and arms a new one; the search runs
only when a timer fires without being superseded (last write wins, no
cap on the total delay).

Timers fire on their own thread. Without a ``dispatch`` callable the
results are applied to the Selection on that thread, so the Selection
must then be driven only through the debouncer. Hosts with an event
loop pass ``dispatch`` to have results applied on the loop's thread.

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
import threading
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

# Gadget browser internal
from gadget_browser.catalog.models import CATEGORY_ALL, GadgetRecord, Page
from gadget_browser.catalog.search import search_records
from gadget_browser.catalog.selection import Selection
from gadget_browser.core.config import BrowserConfig


class SearchDebouncer:
    """Runs searches against a Selection after a quiet period.

    Parameters
    ----------
    selection : Selection
        The selection to search in.
    delay_ms : int
        Quiet period before a search runs. Default 500.
    on_results : Optional[Callable[[Page], None]]
        Called with the first page of results after each search, and
        after the search box is cleared.
    timer_factory : Callable
        ``threading.Timer``-compatible factory, replaceable in tests.
    dispatch : Optional[Callable[[Callable[[], None]], None]]
        Schedules a callable on the thread that owns ``selection``, e.g.
        an event loop's ``call_soon_threadsafe``. The search itself still
        runs on the timer thread. When None, results are applied on the
        timer thread.
    """

    def __init__(
        self,
        selection: Selection,
        delay_ms: int = 500,
        on_results: Optional[Callable[[Page], None]] = None,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
        dispatch: Optional[Callable[[Callable[[], None]], None]] = None,
    ) -> None:
        self._selection = selection
        self._delay = delay_ms / 1000.0
        self._on_results = on_results
        self._timer_factory = timer_factory
        self._dispatch = dispatch
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0

    @classmethod
    def from_config(
        cls,
        selection: Selection,
        config: BrowserConfig,
        on_results: Optional[Callable[[Page], None]] = None,
        **kwargs,
    ) -> 'SearchDebouncer':
        """Create a debouncer using ``config.search_delay_ms``."""
        return cls(
            selection, delay_ms=config.search_delay_ms,
            on_results=on_results, **kwargs,
        )

    @property
    def pending(self) -> bool:
        """Whether a search is armed and its results are not shown yet."""
        with self._lock:
            return self._timer is not None

    def submit(self, text: Optional[str]) -> None:
        """Handle a search-box change.

        Clearing the box cancels any pending search and shows "all"
        right away. The placeholder text only cancels.

        Parameters
        ----------
        text : Optional[str]
            Current search-box text.
        """
        with self._lock:
            self._cancel_locked()
            if text == self._selection.placeholder:
                return
            if not text:
                page = self._selection.select_category(CATEGORY_ALL).current_page()
            else:
                self._generation += 1
                timer = self._timer_factory(
                    self._delay, self._fire, args=(text, self._generation),
                )
                timer.daemon = True
                self._timer = timer
                timer.start()
                return
        self._notify(page)

    def cancel(self) -> None:
        """Drop the pending search, if any."""
        with self._lock:
            self._cancel_locked()

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            self._generation += 1

    def _fire(self, text: str, generation: int) -> None:
        with self._lock:
            # A timer that already started can still lose to a newer edit.
            if generation != self._generation:
                return
            language = self._selection.language
        results = search_records(
            self._selection.index.all_records(language), text, language,
        )
        if self._dispatch is None:
            self._apply(text, language, generation, results)
        else:
            self._dispatch(
                lambda: self._apply(text, language, generation, results)
            )

    def _apply(
        self,
        text: str,
        language: str,
        generation: int,
        results: List[GadgetRecord],
    ) -> None:
        with self._lock:
            if (
                generation != self._generation
                or language != self._selection.language
            ):
                return
            self._timer = None
            page = self._selection.show_results(results).current_page()
        logger.debug("Debounced search for %r: %d results", text, len(page))
        self._notify(page)

    def _notify(self, page: Page) -> None:
        if self._on_results is not None:
            self._on_results(page)
