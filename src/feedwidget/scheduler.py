#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 15:44:08 krylon>
#
# /data/code/python/feedwidget/src/feedwidget/scheduler.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.scheduler

(c) 2026 Benjamin Walkenhorst

AutoUpdater refreshes a Document periodically.
"""


import logging
from datetime import timedelta
from threading import Event, Lock, Thread
from typing import Optional, Union

from feedwidget import common
from feedwidget.aggregator import Aggregator, DisplayResult
from feedwidget.page import Document


class AutoUpdater:
    """AutoUpdater periodically clears the cache and re-renders the Articles."""

    __slots__ = [
        "log",
        "aggregator",
        "doc",
        "interval",
        "lock",
        "busy",
        "_active",
        "_stop",
        "_thread",
    ]

    log: logging.Logger
    aggregator: Aggregator
    doc: Document
    interval: timedelta
    lock: Lock
    busy: Lock
    _active: bool
    _stop: Event
    _thread: Optional[Thread]

    def __init__(self,
                 aggregator: Aggregator,
                 doc: Document,
                 interval: Union[int, float, timedelta]) -> None:
        self.log = common.get_logger("updater")
        self.aggregator = aggregator
        self.doc = doc
        self.lock = Lock()
        self.busy = Lock()
        self._active = False
        self._stop = Event()
        self._thread = None
        match interval:
            case bool():
                raise ValueError("Interval must be a number (of seconds) or a timedelta, not a bool")
            case int(x):
                self.interval = timedelta(seconds=x)
            case float(x):
                self.interval = timedelta(seconds=x)
            case x if isinstance(x, timedelta):
                self.interval = x
            case _:
                name = interval.__class__.__name__
                msg = f"Interval must be a number (of seconds) or a timedelta, not a {name}"
                raise ValueError(msg)

        if self.interval <= timedelta(0):
            raise ValueError(f"Interval must be positive, not {self.interval}")

        self.log.debug("Updater will refresh the page every %s seconds.",
                       self.interval.total_seconds())

    @property
    def active(self) -> bool:
        """Return the Updater's active flag."""
        with self.lock:
            return self._active

    @active.setter
    def active(self, value: bool) -> None:
        """Set the Updater's active flag."""
        with self.lock:
            self._active = value

    def run_once(self, clear_cache: bool = False) -> Optional[DisplayResult]:
        """Perform one display pass, unless another one is in progress.

        Errors are logged, so the background loop keeps going. Return None
        if the pass was skipped or failed.
        """
        if not self.busy.acquire(blocking=False):
            self.log.info("Another update is still in progress, skipping this one.")
            return None

        try:
            if clear_cache:
                self.aggregator.cache.clear()
            res: DisplayResult = self.aggregator.display_articles(self.doc)
            self.doc.save()
            return res
        except OSError as err:
            self.log.error("Error saving document: %s", err)
            return None
        except Exception as err:  # pylint: disable-msg=W0718
            cname = err.__class__.__name__
            self.log.error("%s during update: %s",
                           cname,
                           err)
            return None
        finally:
            self.busy.release()

    def start(self) -> None:
        """Render the Articles now, then keep refreshing them in the background."""
        with self.lock:
            if self._active:
                self.log.info("Updater is already running.")
                return
            self._active = True
            self._stop.clear()

        self.log.debug("Updater is starting.")
        self.run_once()

        self._thread = Thread(name="Updater", target=self._loop, daemon=True)
        self._thread.start()

    def _loop(self) -> None:
        try:
            while not self._stop.wait(self.interval.total_seconds()):
                self.log.info("Auto-updating articles...")
                self.run_once(clear_cache=True)
        finally:
            self.active = False
            self.log.debug("Updater loop is quitting.")

    def stop(self, timeout: Optional[float] = None) -> None:
        """Stop refreshing and wait for the background thread to finish."""
        self._stop.set()
        thr = self._thread
        if thr is not None:
            thr.join(timeout)
            self._thread = None
        self.active = False

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the Updater is stopped or timeout expires.

        Return True if the Updater has been stopped.
        """
        return self._stop.wait(timeout)

# Local Variables: #
# python-indent: 4 #
# End: #
