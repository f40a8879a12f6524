#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 12:31:09 krylon>
#
# /data/code/python/feedwidget/src/feedwidget/cache.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.cache

(c) 2026 Benjamin Walkenhorst

ArticleCache keeps the most recently fetched batch of Articles in a single
slot of the Storage, along with the time it was written.
"""


import json
import logging
import time
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, Optional, Union

from feedwidget import common
from feedwidget.model import Article
from feedwidget.storage import Storage


@dataclass(kw_only=True, slots=True)
class ArticleCache:
    """ArticleCache stores a batch of Articles with an expiration time."""

    storage: Storage
    key: str = "rss_cache"
    ttl: Union[int, float, timedelta] = timedelta(hours=1)
    clock: Callable[[], float] = time.time
    log: logging.Logger = field(default_factory=lambda: common.get_logger("cache"))

    def __post_init__(self) -> None:
        if not isinstance(self.ttl, timedelta):
            self.ttl = timedelta(seconds=self.ttl)

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    @property
    def ttl_ms(self) -> float:
        """Return the time-to-live in milliseconds."""
        return self.ttl.total_seconds() * 1000  # pylint: disable-msg=E1101

    def cache_articles(self, articles: list[Article]) -> None:
        """Store the Articles, replacing whatever the cache held before."""
        try:
            record: dict[str, Any] = {
                "articles": [a.to_dict() for a in articles],
                "timestamp": self._now_ms(),
            }
            self.storage.set_item(self.key, json.dumps(record))
        except (TypeError, ValueError, AttributeError) as err:
            self.log.error("Error caching %d articles: %s",
                           len(articles),
                           err)
        else:
            self.log.debug("Cached %d articles under %s",
                           len(articles),
                           self.key)

    def get_cached_articles(self) -> Optional[list[Article]]:
        """Return the cached Articles, or None if the cache is empty or stale."""
        raw: Optional[str] = self.storage.get_item(self.key)
        if raw is None:
            return None

        try:
            record = json.loads(raw)
            age: float = self._now_ms() - record["timestamp"]
            if age >= self.ttl_ms:
                self.log.debug("Cached articles are %.1f seconds old, ignoring them.",
                               age / 1000)
                return None
            return [Article.from_dict(x) for x in record["articles"]]
        except (AttributeError, TypeError, ValueError, KeyError) as err:
            cname = err.__class__.__name__
            self.log.error("%s reading cache %s: %s",
                           cname,
                           self.key,
                           err)
            return None

    def clear(self) -> None:
        """Remove the cached Articles."""
        self.log.debug("Clear cache %s", self.key)
        self.storage.remove_item(self.key)

# Local Variables: #
# python-indent: 4 #
# End: #
