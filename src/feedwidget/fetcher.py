#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 13:17:40 krylon>
#
# /data/code/python/feedwidget/src/feedwidget/fetcher.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.fetcher

(c) 2026 Benjamin Walkenhorst

FeedFetcher downloads RSS feeds through a feed-to-JSON proxy, and turns
the items it gets back into Articles.
"""


import logging
from datetime import datetime, timezone
from threading import Lock, Thread
from typing import Any, Final, Optional
from urllib.parse import quote

import requests

from feedwidget import common
from feedwidget.config import AggregatorConfig
from feedwidget.model import Article, default_source, unknown_author
from feedwidget.scrub import sanitize_text

user_agent: Final[str] = f"{common.AppName}/{common.AppVersion}"


class FeedFetcher:
    """FeedFetcher talks to the feed proxy."""

    __slots__ = [
        "log",
        "cfg",
        "session",
        "lock",
    ]

    log: logging.Logger
    cfg: AggregatorConfig
    session: requests.Session
    lock: Lock

    def __init__(self, cfg: AggregatorConfig, session: Optional[requests.Session] = None) -> None:
        self.log = common.get_logger("fetcher")
        self.cfg = cfg
        self.lock = Lock()
        if session is None:
            session = requests.Session()
            session.headers.update({"User-Agent": user_agent})
        self.session = session

    def proxy_url(self, feed_url: str) -> str:
        """Return the URL to ask the proxy for the given feed."""
        return self.cfg.proxy_base + quote(feed_url, safe="")

    def fetch_from_api(self, url: str) -> Optional[Any]:
        """GET a JSON document from url. Return None if anything goes wrong."""
        try:
            response = self.session.get(url, timeout=self.cfg.timeout)
            if not 200 <= response.status_code < 300:
                self.log.error("HTTP error fetching %s: status %d",
                               url,
                               response.status_code)
                return None
            return response.json()
        except requests.RequestException as err:
            self.log.error("Error fetching %s: %s",
                           url,
                           err)
        except ValueError as err:
            self.log.error("Response from %s is not valid JSON: %s",
                           url,
                           err)
        return None

    def fetch_feed(self, feed_url: str) -> Optional[dict[str, Any]]:
        """Fetch a single feed. Return None if anything goes wrong."""
        self.log.debug("Fetch feed %s", feed_url)
        data = self.fetch_from_api(self.proxy_url(feed_url))
        if data is None:
            return None
        if not isinstance(data, dict):
            self.log.error("Response for feed %s is a %s, not an object",
                           feed_url,
                           data.__class__.__name__)
            return None
        return data

    def fetch_all_feeds(self) -> list[dict[str, Any]]:
        """Fetch all configured feeds in parallel and return the ones that worked."""
        results: list[Optional[dict[str, Any]]] = [None] * len(self.cfg.feeds)
        workers: list[Thread] = []

        def fetch(idx: int, url: str) -> None:
            data = self.fetch_feed(url)
            with self.lock:
                results[idx] = data

        for idx, url in enumerate(self.cfg.feeds):
            w: Thread = Thread(name=f"Fetcher{idx+1:02d}",
                               target=fetch,
                               args=(idx, url),
                               daemon=True)
            w.start()
            workers.append(w)

        for w in workers:
            w.join()

        feeds: Final[list[dict[str, Any]]] = [r for r in results if r is not None]
        self.log.debug("Fetched %d of %d feeds",
                       len(feeds),
                       len(self.cfg.feeds))
        return feeds


def _item_thumbnail(item: dict[str, Any]) -> str:
    """Try to find a thumbnail image for a feed item."""
    if item.get("thumbnail"):
        return str(item["thumbnail"])
    enclosure = item.get("enclosure")
    if isinstance(enclosure, dict) and enclosure.get("link"):
        return str(enclosure["link"])
    return ""


def _item_timestamp(item: dict[str, Any], log: logging.Logger) -> datetime:
    """Try to get a timestamp from a feed item, falling back to the current time."""
    stamp: Optional[datetime] = common.parse_feed_date(item.get("pubDate"))
    if stamp is None:
        log.info("Did not find a valid timestamp in item \"%s\", using current time.",
                 item.get("title"))
        stamp = datetime.now(timezone.utc)
    return stamp


def parse_feed_items(feed_data: Optional[dict[str, Any]]) -> list[Article]:
    """Turn the items of a proxy response into Articles."""
    log: Final[logging.Logger] = common.get_logger("fetcher")
    if not feed_data or not isinstance(feed_data.get("items"), list):
        return []

    feed = feed_data.get("feed")
    source: str = default_source
    if isinstance(feed, dict) and feed.get("title"):
        source = str(feed["title"])

    articles: list[Article] = []
    for item in feed_data["items"]:
        if not isinstance(item, dict):
            log.error("Skipping feed item of type %s from %s",
                      item.__class__.__name__,
                      source)
            continue

        categories = item.get("categories") or []
        if not isinstance(categories, list):
            categories = [categories]

        art: Article = Article(
            title=sanitize_text(item.get("title")),
            link=str(item.get("link") or ""),
            description=sanitize_text(item.get("description")),
            pub_date=_item_timestamp(item, log),
            author=str(item.get("author") or unknown_author),
            thumbnail=_item_thumbnail(item),
            categories=[str(c) for c in categories],
            source=source,
        )
        articles.append(art)

    return articles


def sort_articles_by_date(articles: list[Article]) -> list[Article]:
    """Return the Articles sorted by date, newest first.

    Articles with the same timestamp keep the order they came in.
    """
    return sorted(articles, key=lambda a: a.pub_date, reverse=True)

# Local Variables: #
# python-indent: 4 #
# End: #
