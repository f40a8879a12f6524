#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 14:20:51 krylon>
#
# /data/code/python/feedwidget/src/feedwidget/page.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.page

(c) 2026 Benjamin Walkenhorst

Document wraps an HTML page we want to put things into.
"""


import logging
import pathlib
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag

from feedwidget import common


class Document:
    """Document is an HTML page, possibly backed by a file."""

    __slots__ = [
        "log",
        "soup",
        "path",
    ]

    log: logging.Logger
    soup: BeautifulSoup
    path: Optional[pathlib.Path]

    def __init__(self, soup: BeautifulSoup, path: Optional[pathlib.Path] = None) -> None:
        self.log = common.get_logger("page")
        self.soup = soup
        self.path = path
        self._ensure_head()

    @classmethod
    def from_string(cls, html: str) -> 'Document':
        """Create a Document from a string of HTML."""
        return cls(BeautifulSoup(html, "html.parser"))

    @classmethod
    def from_file(cls, path: Union[str, pathlib.Path]) -> 'Document':
        """Load a Document from a file."""
        p = pathlib.Path(path)
        with open(p, "r", encoding="utf-8") as fh:
            soup = BeautifulSoup(fh.read(), "html.parser")
        return cls(soup, p)

    def _ensure_head(self) -> None:
        if self.soup.head is not None:
            return
        head = self.soup.new_tag("head")
        if self.soup.html is not None:
            self.soup.html.insert(0, head)
        else:
            self.soup.insert(0, head)

    @property
    def head(self) -> Tag:
        """Return the <head> element."""
        return self.soup.head

    @property
    def title(self) -> str:
        """Return the document's title, or an empty string if there is none."""
        if self.soup.title is None or self.soup.title.string is None:
            return ""
        return str(self.soup.title.string)

    @title.setter
    def title(self, value: str) -> None:
        if self.soup.title is None:
            tag = self.soup.new_tag("title")
            self.head.append(tag)
        self.soup.title.string = value

    @property
    def text(self) -> str:
        """Return the visible text of the document body."""
        body = self.soup.body if self.soup.body is not None else self.soup
        return body.get_text(" ", strip=True)

    def select(self, selector: str) -> Optional[Tag]:
        """Return the first element matching the CSS selector, or None."""
        return self.soup.select_one(selector)

    def set_inner_html(self, element: Tag, html: str) -> None:
        """Replace the children of element with the given HTML."""
        element.clear()
        fragment = BeautifulSoup(html, "html.parser")
        for child in list(fragment.contents):
            element.append(child.extract())

    def save(self, path: Union[str, pathlib.Path, None] = None) -> None:
        """Write the Document to a file.

        Without a path, write it back to the file it was loaded from.
        """
        target: Optional[pathlib.Path] = pathlib.Path(path) if path is not None else self.path
        if target is None:
            self.log.debug("Document has no file to save to.")
            return

        self.log.debug("Save document to %s", target)
        with open(target, "w", encoding="utf-8") as fh:
            fh.write(str(self.soup))

    def __str__(self) -> str:
        return str(self.soup)

# Local Variables: #
# python-indent: 4 #
# End: #
