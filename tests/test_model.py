#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 18:02:41 krylon>
#
# /data/code/python/feedwidget/tests/test_model.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.test_model

(c) 2026 Benjamin Walkenhorst
"""

import os
import shutil
import unittest
from datetime import datetime, timezone
from typing import Final

from feedwidget import common
from feedwidget.model import Article, unknown_author

test_dir: Final[str] = os.path.join(
    "/tmp",
    datetime.now().strftime(f"{common.AppName.lower()}_test_model_%Y%m%d_%H%M%S"))


def make_article(**kwargs) -> Article:
    """Create an Article with reasonable defaults."""
    args = {
        "title": "Kali Linux 2026.3 released",
        "link": "https://www.kali.org/blog/kali-linux-2026-3-release/",
        "description": "The third release of the year is here.",
        "pub_date": datetime(2026, 9, 2, 14, 30, tzinfo=timezone.utc),
    }
    args.update(kwargs)
    return Article(**args)


class TestArticle(unittest.TestCase):
    """Test the Article class."""

    @classmethod
    def setUpClass(cls) -> None:
        """Prepare the testing environment."""
        common.set_basedir(test_dir)

    @classmethod
    def tearDownClass(cls) -> None:
        """Clean up afterwards."""
        shutil.rmtree(test_dir, ignore_errors=True)

    def test_defaults(self) -> None:
        """Test the default values of optional fields."""
        art = make_article()
        self.assertEqual(art.author, unknown_author)
        self.assertFalse(art.has_author)
        self.assertEqual(art.thumbnail, "")
        self.assertEqual(art.categories, [])
        self.assertEqual(art.source, "External Source")

    def test_display_date(self) -> None:
        """Test formatting the publication date."""
        art = make_article(pub_date=datetime(2024, 1, 5, tzinfo=timezone.utc))
        self.assertEqual(art.display_date, "Jan 5, 2024")
        self.assertEqual(art.iso_date, "2024-01-05T00:00:00+00:00")

    def test_dict_round_trip(self) -> None:
        """Test converting an Article to a dict and back."""
        art = make_article(author="Offensive Security",
                           thumbnail="https://www.kali.org/images/logo.png",
                           categories=["Release", "Kali"],
                           source="Kali Linux")
        raw = art.to_dict()
        self.assertEqual(raw["pubDate"], "2026-09-02T14:30:00+00:00")
        copy = Article.from_dict(raw)
        self.assertEqual(copy, art)
        self.assertTrue(copy.has_author)

    def test_from_dict_incomplete(self) -> None:
        """Test that incomplete data is rejected."""
        raw = make_article().to_dict()
        del raw["title"]
        with self.assertRaises(KeyError):
            Article.from_dict(raw)

        raw = make_article().to_dict()
        raw["pubDate"] = "yesterday"
        with self.assertRaises(ValueError):
            Article.from_dict(raw)

        for stamp in (1700000000, None, ["2026-09-02"]):
            with self.subTest(pubDate=stamp):
                raw["pubDate"] = stamp
                with self.assertRaises(ValueError):
                    Article.from_dict(raw)


# Local Variables: #
# python-indent: 4 #
# End: #
