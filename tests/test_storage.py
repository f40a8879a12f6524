#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 18:39:20 krylon>
#
# /data/code/python/feedwidget/tests/test_storage.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.test_storage

(c) 2026 Benjamin Walkenhorst
"""

import os
import shutil
import unittest
from datetime import datetime
from typing import Final, Optional

from feedwidget import common
from feedwidget.storage import Storage, TxError

test_dir: Final[str] = os.path.join(
    "/tmp",
    datetime.now().strftime(f"{common.AppName.lower()}_test_storage_%Y%m%d_%H%M%S"))


class TestStorage(unittest.TestCase):
    """Do some rudimentary tests on the Storage."""

    _storage: Optional[Storage] = None

    @classmethod
    def setUpClass(cls) -> None:
        """Prepare the testing environment."""
        common.set_basedir(test_dir)

    @classmethod
    def tearDownClass(cls) -> None:
        """Clean up afterwards."""
        if cls._storage is not None:
            cls._storage.close()
            cls._storage = None
        shutil.rmtree(test_dir, ignore_errors=True)

    @classmethod
    def storage(cls) -> Storage:
        """Return the Storage instance, creating it if needed."""
        if cls._storage is None:
            cls._storage = Storage()

        return cls._storage

    def test_01_open(self) -> None:
        """Test opening the Storage."""
        st = self.storage()
        self.assertIsNotNone(st)
        self.assertIsInstance(st, Storage)
        self.assertEqual(st.path, str(common.path.storage))

    def test_02_transaction(self) -> None:
        """Test performing a transaction."""
        st = self.storage()

        test_data: Final[list[tuple[str, str]]] = [
            ("abobo", "ABOBO"),
            ("bbobo", "BBOBO"),
            ("cbobo", "CBOBO"),
        ]

        with st.tx(True) as tx:
            for low, high in test_data:
                tx[low] = high

        with st.tx() as tx:
            for low, hi in test_data:
                self.assertIn(low, tx)
                check = tx[low]
                self.assertIsNotNone(check)
                self.assertIsInstance(check, str)
                self.assertEqual(check, hi)

                self.assertIsNone(tx[low.upper()])
                self.assertNotIn(low.upper(), tx)

    def test_03_readonly(self) -> None:
        """Test that a readonly transaction refuses to change anything."""
        st = self.storage()
        with st.tx() as tx:
            with self.assertRaises(TxError):
                tx["abobo"] = "nope"
            with self.assertRaises(TxError):
                del tx["abobo"]

        self.assertEqual(st.get_item("abobo"), "ABOBO")

    def test_04_items(self) -> None:
        """Test the convenience methods."""
        st = self.storage()
        self.assertIsNone(st.get_item("rss_cache"))
        st.set_item("rss_cache", '{"articles": []}')
        self.assertEqual(st.get_item("rss_cache"), '{"articles": []}')
        st.set_item("rss_cache", b"{}")
        self.assertEqual(st.get_item("rss_cache"), "{}")
        st.remove_item("rss_cache")
        self.assertIsNone(st.get_item("rss_cache"))
        # Removing it again is harmless.
        st.remove_item("rss_cache")

    def test_05_persistence(self) -> None:
        """Test that data survives closing and re-opening the Storage."""
        st = self.storage()
        st.set_item("persistent", "Grüße")
        st.close()
        self.__class__._storage = None

        st = self.storage()
        self.assertEqual(st.get_item("persistent"), "Grüße")


# Local Variables: #
# python-indent: 4 #
# End: #
