#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 22:17:04 krylon>
#
# /data/code/python/feedwidget/tests/test_scheduler.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.test_scheduler

(c) 2026 Benjamin Walkenhorst
"""

import os
import shutil
import time
import unittest
from datetime import datetime, timedelta
from typing import Final
from unittest.mock import Mock

from feedwidget import common
from feedwidget.aggregator import DisplayResult, Outcome
from feedwidget.page import Document
from feedwidget.scheduler import AutoUpdater

test_dir: Final[str] = os.path.join(
    "/tmp",
    datetime.now().strftime(f"{common.AppName.lower()}_test_scheduler_%Y%m%d_%H%M%S"))


def make_aggregator() -> Mock:
    """Create a fake Aggregator."""
    agg = Mock()
    agg.display_articles.return_value = DisplayResult(outcome=Outcome.Cached, articles=1)
    return agg


class TestAutoUpdater(unittest.TestCase):
    """Test the periodic refresh."""

    @classmethod
    def setUpClass(cls) -> None:
        """Prepare the testing environment."""
        common.set_basedir(test_dir)

    @classmethod
    def tearDownClass(cls) -> None:
        """Clean up afterwards."""
        shutil.rmtree(test_dir, ignore_errors=True)

    def test_01_interval(self) -> None:
        """Test the different ways to specify the interval."""
        doc = Document.from_string("")
        agg = make_aggregator()
        self.assertEqual(AutoUpdater(agg, doc, 90).interval, timedelta(seconds=90))
        self.assertEqual(AutoUpdater(agg, doc, 0.5).interval, timedelta(seconds=0.5))
        self.assertEqual(AutoUpdater(agg, doc, timedelta(hours=1)).interval,
                         timedelta(hours=1))

        for bogus in ("3600", None, True, 0, -5, timedelta(0)):
            with self.subTest(interval=bogus):
                with self.assertRaises(ValueError):
                    AutoUpdater(agg, doc, bogus)

    def test_02_run_once(self) -> None:
        """Test a single pass."""
        doc = Document.from_string("")
        agg = make_aggregator()
        upd = AutoUpdater(agg, doc, 3600)

        res = upd.run_once()
        self.assertEqual(res.outcome, Outcome.Cached)
        agg.display_articles.assert_called_once_with(doc)
        agg.cache.clear.assert_not_called()

        upd.run_once(clear_cache=True)
        agg.cache.clear.assert_called_once()

    def test_03_no_overlap(self) -> None:
        """Test that a pass is skipped while another one is running."""
        doc = Document.from_string("")
        agg = make_aggregator()
        upd = AutoUpdater(agg, doc, 3600)

        with upd.busy:
            self.assertIsNone(upd.run_once())
        agg.display_articles.assert_not_called()

        self.assertIsNotNone(upd.run_once())

    def test_04_start_stop(self) -> None:
        """Test starting and stopping the Updater."""
        doc = Document.from_string("")
        agg = make_aggregator()
        upd = AutoUpdater(agg, doc, 3600)

        self.assertFalse(upd.active)
        upd.start()
        try:
            self.assertTrue(upd.active)
            agg.display_articles.assert_called_once_with(doc)
            # Starting twice does not start a second loop.
            upd.start()
            self.assertEqual(agg.display_articles.call_count, 1)
        finally:
            upd.stop(5)

        self.assertFalse(upd.active)
        self.assertTrue(upd.wait(0))

    def test_05_periodic(self) -> None:
        """Test that the Updater refreshes periodically, clearing the cache each time."""
        doc = Document.from_string("")
        agg = make_aggregator()
        upd = AutoUpdater(agg, doc, 0.05)

        upd.start()
        try:
            deadline = time.time() + 5
            while agg.display_articles.call_count < 3 and time.time() < deadline:
                time.sleep(0.01)
        finally:
            upd.stop(5)

        self.assertGreaterEqual(agg.display_articles.call_count, 3)
        self.assertGreaterEqual(agg.cache.clear.call_count, 2)

        calls = agg.display_articles.call_count
        time.sleep(0.2)
        self.assertEqual(agg.display_articles.call_count, calls)

    def test_06_survive_errors(self) -> None:
        """Test that a failing pass does not end the refresh loop."""
        doc = Document.from_string("")
        agg = make_aggregator()
        agg.display_articles.side_effect = TypeError("Incoming markup is of an invalid type: 2024")
        upd = AutoUpdater(agg, doc, 0.05)

        self.assertIsNone(upd.run_once())

        upd.start()
        try:
            deadline = time.time() + 5
            while agg.display_articles.call_count < 4 and time.time() < deadline:
                time.sleep(0.01)
            self.assertTrue(upd.active)
        finally:
            upd.stop(5)

        self.assertGreaterEqual(agg.display_articles.call_count, 4)
        self.assertFalse(upd.busy.locked())


# Local Variables: #
# python-indent: 4 #
# End: #
