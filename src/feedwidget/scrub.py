#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 11:40:18 krylon>
#
# /data/code/python/feedwidget/src/feedwidget/scrub.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.scrub

(c) 2026 Benjamin Walkenhorst

This module turns the HTML soup that feeds put in titles and descriptions
into plain text.
"""


from typing import Any, Final

from bs4 import BeautifulSoup

max_text_length: Final[int] = 200


def sanitize_text(text: Any, limit: int = max_text_length) -> str:
    """Strip all markup from text, trim it, and cut it down to limit characters.

    Feeds occasionally hand out numbers where text is expected, those are
    converted to strings first.
    """
    if text is None or text == "":
        return ""
    if not isinstance(text, str):
        text = str(text)

    soup = BeautifulSoup(text, "html.parser")
    for junk in soup.find_all(["script", "style"]):
        junk.decompose()

    plain: Final[str] = soup.get_text()
    return plain.strip()[:limit]

# Local Variables: #
# python-indent: 4 #
# End: #
