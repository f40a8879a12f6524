#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 18:10:12 krylon>
#
# /data/code/python/feedwidget/tests/test_scrub.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.test_scrub

(c) 2026 Benjamin Walkenhorst
"""

import unittest
from typing import Final, NamedTuple, Optional

from feedwidget.scrub import sanitize_text


class ScrubTestCase(NamedTuple):
    """A test case for the sanitizer."""

    txt: Optional[str]
    res: str


scrub_cases: Final[list[ScrubTestCase]] = [
    ScrubTestCase(None, ""),
    ScrubTestCase("", ""),
    ScrubTestCase("Hello World", "Hello World"),
    ScrubTestCase("  <i>Hello World</i><br/>  ", "Hello World"),
    ScrubTestCase("<p>Patch <b>now</b>!</p>", "Patch now!"),
    ScrubTestCase("<script>alert(1)</script>Safe", "Safe"),
    ScrubTestCase("AT&amp;T &lt;rocks&gt;", "AT&T <rocks>"),
    ScrubTestCase("<p>" + "x" * 300 + "</p>", "x" * 200),
]


class TestScrub(unittest.TestCase):
    """Test the HTML sanitizer."""

    def test_01_sanitize(self) -> None:
        """Test stripping markup."""
        for i, c in enumerate(scrub_cases):
            with self.subTest(i=i):
                self.assertEqual(sanitize_text(c.txt), c.res)

    def test_02_limit(self) -> None:
        """Test a custom length limit."""
        self.assertEqual(sanitize_text("<b>abcdef</b>", 3), "abc")

    def test_03_non_text(self) -> None:
        """Test that numbers and other non-text values are stringified."""
        self.assertEqual(sanitize_text(2024), "2024")
        self.assertEqual(sanitize_text(0), "0")
        self.assertEqual(sanitize_text(3.5), "3.5")
        self.assertEqual(sanitize_text(123456, 3), "123")


# Local Variables: #
# python-indent: 4 #
# End: #
