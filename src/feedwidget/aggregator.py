#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 15:02:33 krylon>
#
# /data/code/python/feedwidget/src/feedwidget/aggregator.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.aggregator

(c) 2026 Benjamin Walkenhorst

The Aggregator puts the pieces together: It gets Articles from the cache or
the feeds, and renders them into a Document.
"""


import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Final, Optional

from feedwidget import common
from feedwidget.cache import ArticleCache
from feedwidget.config import AggregatorConfig
from feedwidget.fetcher import (FeedFetcher, parse_feed_items,
                                sort_articles_by_date)
from feedwidget.model import Article
from feedwidget.page import Document
from feedwidget.render import Renderer


class Outcome(Enum):
    """Outcome describes how a display pass ended."""

    Missing = auto()
    Cached = auto()
    Fresh = auto()
    Failed = auto()


@dataclass(kw_only=True, slots=True)
class DisplayResult:
    """DisplayResult summarizes a display pass."""

    outcome: Outcome
    articles: int = 0
    feeds: int = 0


class Aggregator:
    """Aggregator fetches, caches and displays Articles."""

    __slots__ = [
        "log",
        "cfg",
        "fetcher",
        "cache",
        "renderer",
    ]

    log: logging.Logger
    cfg: AggregatorConfig
    fetcher: FeedFetcher
    cache: ArticleCache
    renderer: Renderer

    def __init__(self,
                 cfg: AggregatorConfig,
                 fetcher: FeedFetcher,
                 cache: ArticleCache,
                 renderer: Renderer) -> None:
        self.log = common.get_logger("aggregator")
        self.cfg = cfg
        self.fetcher = fetcher
        self.cache = cache
        self.renderer = renderer

    def collect_articles(self, feeds: list[dict]) -> list[Article]:
        """Parse the feeds, and return all their Articles, newest first."""
        articles: list[Article] = []
        for feed in feeds:
            articles.extend(parse_feed_items(feed))
        return sort_articles_by_date(articles)

    def generate_article_html(self, articles: list[Article]) -> str:
        """Render the Articles, honoring the configured maximum."""
        return self.renderer.generate_article_html(articles, self.cfg.max_articles)

    def display_articles(self, doc: Document) -> DisplayResult:
        """Put the latest Articles into the Document's container."""
        container = doc.select(self.cfg.container)
        if container is None:
            self.log.error("Container not found: %s", self.cfg.container)
            return DisplayResult(outcome=Outcome.Missing)

        doc.set_inner_html(container,
                           self.renderer.placeholder("loading", self.cfg.loading_text))

        cached: Optional[list[Article]] = self.cache.get_cached_articles()
        if cached is not None:
            doc.set_inner_html(container, self.generate_article_html(cached))
            self.log.info("Loaded %d articles from cache", len(cached))
            return DisplayResult(outcome=Outcome.Cached, articles=len(cached))

        feeds: Final[list[dict]] = self.fetcher.fetch_all_feeds()
        if len(feeds) == 0:
            self.log.error("Failed to load any of %d feeds", len(self.cfg.feeds))
            doc.set_inner_html(container,
                               self.renderer.placeholder("error", self.cfg.error_text))
            return DisplayResult(outcome=Outcome.Failed)

        articles: Final[list[Article]] = self.collect_articles(feeds)
        self.cache.cache_articles(articles)
        doc.set_inner_html(container, self.generate_article_html(articles))

        self.log.info("Loaded %d articles from %d feeds",
                      len(articles),
                      len(feeds))
        return DisplayResult(outcome=Outcome.Fresh,
                             articles=len(articles),
                             feeds=len(feeds))

# Local Variables: #
# python-indent: 4 #
# End: #
