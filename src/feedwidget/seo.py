#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 16:36:47 krylon>
#
# /data/code/python/feedwidget/src/feedwidget/seo.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.seo

(c) 2026 Benjamin Walkenhorst

MetaUpdater keeps the <head> of a Document in a shape search engines and
social networks like: Open Graph, Twitter Cards, canonical links and JSON-LD.
"""


import json
import logging
import re
from collections import Counter
from datetime import timezone
from typing import Any, Final, Optional, Union

from bs4 import Tag

from feedwidget import common
from feedwidget.model import Article, SitemapEntry
from feedwidget.page import Document

stop_words: Final[frozenset[str]] = frozenset((
    "the", "is", "at", "which", "on", "a", "an",
    "and", "or", "but", "in", "with", "to", "for",
))

word_pat: Final[re.Pattern] = re.compile(r"\b[a-z]{4,}\b", re.ASCII)
space_pat: Final[re.Pattern] = re.compile(r"\s+")
nonword_pat: Final[re.Pattern] = re.compile(r"[^\w\-]+", re.ASCII)
dash_pat: Final[re.Pattern] = re.compile(r"\-\-+")


def slugify(text: object) -> str:
    """Turn text into something that looks good in a URL."""
    slug = str(text).lower().strip()
    slug = space_pat.sub("-", slug)
    slug = nonword_pat.sub("", slug)
    return dash_pat.sub("-", slug)


def extract_keywords(text: str, count: int = 10) -> list[str]:
    """Return the count most frequent words in text, most frequent first.

    Words shorter than four letters and stop words are ignored. Words that
    are equally frequent are returned in the order they first appear.
    """
    words = [w for w in word_pat.findall(text.lower()) if w not in stop_words]
    freq: Counter[str] = Counter(words)
    return [w for w, _ in freq.most_common(count)] if count > 0 else []


def generate_sitemap_entries(articles: list[Article]) -> list[SitemapEntry]:
    """Return a sitemap entry for each Article."""
    return [SitemapEntry(loc=art.link,
                         lastmod=art.pub_date.astimezone(timezone.utc).date().isoformat())
            for art in articles]


class MetaUpdater:
    """MetaUpdater modifies the meta tags of a Document."""

    __slots__ = [
        "log",
        "doc",
        "site_name",
    ]

    log: logging.Logger
    doc: Document
    site_name: str

    def __init__(self, doc: Document, site_name: str = "Kali Linux Features") -> None:
        self.log = common.get_logger("seo")
        self.doc = doc
        self.site_name = site_name

    def _find_or_create(self, name: str, attrs: dict[str, str]) -> Tag:
        tag: Optional[Tag] = self.doc.head.find(name, attrs=attrs)
        if tag is None:
            tag = self.doc.soup.new_tag(name, attrs=attrs)
            self.doc.head.append(tag)
        return tag

    def update_meta_tag(self, prop: str, content: Optional[str], attr: str = "property") -> None:
        """Set the content of the meta tag identified by attr=prop.

        If no such tag exists, it is created. If content is empty, nothing happens.
        """
        if not content:
            return

        tag = self._find_or_create("meta", {attr: prop})
        tag["content"] = content

    def update_seo_meta(self, article: Union[Article, dict[str, Any]]) -> None:
        """Make the Document's meta data describe the given article."""
        if isinstance(article, Article):
            title = article.title
            description = article.description
            link = article.link
            image = article.thumbnail
        else:
            title = article.get("title", "")
            description = article.get("description", "")
            link = article.get("link", "")
            image = article.get("image") or article.get("thumbnail", "")

        if title:
            self.doc.title = f"{title} | {self.site_name}"

        desc_tag: Optional[Tag] = self.doc.head.find("meta", attrs={"name": "description"})
        if desc_tag is not None and description:
            desc_tag["content"] = description

        self.update_meta_tag("og:title", title)
        self.update_meta_tag("og:description", description)
        self.update_meta_tag("og:url", link)
        self.update_meta_tag("og:image", image)

        self.update_meta_tag("twitter:title", title, "name")
        self.update_meta_tag("twitter:description", description, "name")
        self.update_meta_tag("twitter:image", image, "name")

    def set_canonical_url(self, url: str) -> None:
        """Set the canonical URL of the Document."""
        tag = self._find_or_create("link", {"rel": "canonical"})
        tag["href"] = url

    def add_structured_data(self, articles: list[Article]) -> None:
        """Describe the Articles as a schema.org ItemList in JSON-LD."""
        data: Final[dict[str, Any]] = {
            "@context": "https://schema.org",
            "@type": "ItemList",
            "itemListElement": [
                {
                    "@type": "ListItem",
                    "position": idx + 1,
                    "item": {
                        "@type": "Article",
                        "headline": art.title,
                        "description": art.description,
                        "url": art.link,
                        "datePublished": art.iso_date,
                        "author": {
                            "@type": "Person",
                            "name": art.author,
                        },
                        "image": art.thumbnail,
                    },
                } for idx, art in enumerate(articles)
            ],
        }

        # "</" inside a script element would end it prematurely.
        payload: Final[str] = json.dumps(data).replace("</", "<\\/")
        script = self._find_or_create("script", {"type": "application/ld+json"})
        script.string = payload
        self.log.debug("Added structured data for %d articles", len(articles))

    def update_keywords(self, keywords: list[str]) -> None:
        """Set the keywords meta tag."""
        tag = self._find_or_create("meta", {"name": "keywords"})
        tag["content"] = ", ".join(keywords)

# Local Variables: #
# python-indent: 4 #
# End: #
