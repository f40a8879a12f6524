#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 11:27:05 krylon>
#
# /data/code/python/feedwidget/src/feedwidget/model.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.model

(c) 2026 Benjamin Walkenhorst
"""


from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Final

from feedwidget import common

unknown_author: Final[str] = "Unknown"
default_source: Final[str] = "External Source"


@dataclass(kw_only=True, slots=True)
class Article:
    """Article is a news item taken from one of the feeds we aggregate."""

    title: str
    link: str
    description: str
    pub_date: datetime
    author: str = unknown_author
    thumbnail: str = ""
    categories: list[str] = field(default_factory=list)
    source: str = default_source

    @property
    def has_author(self) -> bool:
        """Return True if the feed told us who wrote the Article."""
        return self.author != unknown_author

    @property
    def iso_date(self) -> str:
        """Return the publication date in ISO 8601 format."""
        return self.pub_date.isoformat()

    @property
    def display_date(self) -> str:
        """Return the publication date the way humans like it, e.g. Jan 5, 2024"""
        d = self.pub_date
        return f"{d:%b} {d.day}, {d.year}"

    @property
    def stamp_str(self) -> str:
        """Return the publication date formatted for the log."""
        return self.pub_date.strftime(common.TimeFmt)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the Article."""
        return {
            "title": self.title,
            "link": self.link,
            "description": self.description,
            "pubDate": self.iso_date,
            "author": self.author,
            "thumbnail": self.thumbnail,
            "categories": list(self.categories),
            "source": self.source,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> 'Article':
        """Re-create an Article from the output of to_dict().

        Raises KeyError or ValueError if the data is incomplete or the
        timestamp cannot be parsed.
        """
        return cls(
            title=raw["title"],
            link=raw["link"],
            description=raw["description"],
            pub_date=common.parse_iso_date(raw["pubDate"]),
            author=raw.get("author", unknown_author),
            thumbnail=raw.get("thumbnail", ""),
            categories=list(raw.get("categories", [])),
            source=raw.get("source", default_source),
        )


@dataclass(kw_only=True, slots=True, frozen=True)
class SitemapEntry:
    """One <url> element of a sitemap."""

    loc: str
    lastmod: str
    changefreq: str = "daily"
    priority: str = "0.8"

# Local Variables: #
# python-indent: 4 #
# End: #
