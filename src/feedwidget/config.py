#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 11:03:52 krylon>
#
# /data/code/python/feedwidget/src/feedwidget/config.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.config

(c) 2026 Benjamin Walkenhorst

AggregatorConfig holds the settings of the feed aggregator. All fields have
sensible defaults, and the whole thing is validated when it is created.
"""


import json
import pathlib
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Final, Union
from urllib.parse import urlparse

from feedwidget.common import FeedWidgetError

default_proxy: Final[str] = "https://api.rss2json.com/v1/api.json?rss_url="
default_feeds: Final[tuple[str, ...]] = (
    "https://www.kali.org/rss.xml",
    "https://gbhackers.com/feed/",
    "https://www.bleepingcomputer.com/feed/",
)

# Keys of the JavaScript options object we still understand.
aliases: Final[dict[str, str]] = {
    "corsProxy": "proxy_base",
    "proxyBase": "proxy_base",
    "maxArticles": "max_articles",
    "updateInterval": "update_interval",
    "cacheKey": "cache_key",
    "loadingText": "loading_text",
    "errorText": "error_text",
}


class ConfigError(FeedWidgetError):
    """ConfigError indicates an invalid configuration."""


@dataclass(kw_only=True, slots=True)
class AggregatorConfig:
    """Settings for fetching, caching and rendering feeds."""

    proxy_base: str = default_proxy
    feeds: list[str] = field(default_factory=lambda: list(default_feeds))
    max_articles: int = 10
    update_interval: timedelta = timedelta(hours=1)
    container: str = "#news-feed"
    cache_key: str = "rss_cache"
    timeout: float = 30.0
    loading_text: str = "Loading latest cybersecurity news..."
    error_text: str = "Failed to load articles. Please try again later."

    def __post_init__(self) -> None:
        for name in ("proxy_base", "container", "cache_key", "loading_text", "error_text"):
            val = getattr(self, name)
            if not isinstance(val, str):
                raise ConfigError(f"{name} must be a string, not {val!r}")
        if not self.proxy_base:
            raise ConfigError("proxy_base must not be empty")
        if not isinstance(self.feeds, (list, tuple)):
            raise ConfigError(f"feeds must be a list of URLs, not {self.feeds!r}")
        if len(self.feeds) == 0:
            raise ConfigError("feeds must be a non-empty list of URLs")
        for url in self.feeds:
            if not isinstance(url, str) or urlparse(url).scheme not in ("http", "https"):
                raise ConfigError(f"Invalid feed URL {url!r}")
        if isinstance(self.max_articles, bool) or not isinstance(self.max_articles, int) \
           or self.max_articles < 1:
            raise ConfigError(f"max_articles must be a positive integer, not {self.max_articles!r}")
        if not isinstance(self.update_interval, timedelta) \
           or self.update_interval <= timedelta(0):
            raise ConfigError(f"update_interval must be a positive timedelta, not {self.update_interval!r}")
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) \
           or self.timeout <= 0:
            raise ConfigError(f"timeout must be a positive number, not {self.timeout!r}")
        if not self.container:
            raise ConfigError("container selector must not be empty")
        if not self.cache_key:
            raise ConfigError("cache_key must not be empty")

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> 'AggregatorConfig':
        """Create an AggregatorConfig from a dict, e.g. parsed from JSON.

        update_interval is given in milliseconds, like the options object
        of the JavaScript widget.
        """
        known: Final[set[str]] = set(cls.__dataclass_fields__)  # pylint: disable-msg=E1101
        args: dict[str, Any] = {}
        for key, val in raw.items():
            name = aliases.get(key, key)
            if name not in known:
                raise ConfigError(f"Unknown configuration key {key!r}")
            args[name] = val

        if "update_interval" in args:
            match args["update_interval"]:
                case bool():
                    raise ConfigError("update_interval must be a number of milliseconds")
                case int(x) | float(x):
                    args["update_interval"] = timedelta(milliseconds=x)
                case _:
                    raise ConfigError("update_interval must be a number of milliseconds")

        if "feeds" in args and isinstance(args["feeds"], (list, tuple)):
            args["feeds"] = list(args["feeds"])

        return cls(**args)


def load_config(path: Union[str, pathlib.Path]) -> AggregatorConfig:
    """Load the configuration from a JSON file."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
    except (OSError, json.JSONDecodeError) as err:
        raise ConfigError(f"Cannot read configuration from {path}: {err}") from err

    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration in {path} must be a JSON object")

    return AggregatorConfig.from_dict(raw)

# Local Variables: #
# python-indent: 4 #
# End: #
