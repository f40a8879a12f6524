#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 10:14:37 krylon>
#
# /data/code/python/feedwidget/src/feedwidget/common.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.common

(c) 2026 Benjamin Walkenhorst

Application-wide constants, paths, logging and the base exception class.
"""


import logging
import logging.handlers
import os
import pathlib
import sys
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from threading import Lock
from typing import Any, Final, Optional, Union

AppName: Final[str] = "FeedWidget"
AppVersion: Final[str] = "0.1.0"
Debug: bool = False
TimeFmt: Final[str] = "%Y-%m-%d %H:%M:%S"
LogFmt: Final[str] = "%(asctime)s (%(name)-16s / line %(lineno)-4d) " + \
    "- %(levelname)-8s %(message)s"


class FeedWidgetError(Exception):
    """Base class for application-specific exceptions."""


class Path:
    """Path holds the filesystem locations the application uses."""

    __slots__ = ["__base"]

    __base: pathlib.Path

    def __init__(self, root: Union[str, pathlib.Path] = "") -> None:
        if root == "":
            root = pathlib.Path.home().joinpath(f".{AppName.lower()}")
        self.__base = pathlib.Path(root)

    def base(self, path: Union[str, pathlib.Path, None] = None) -> pathlib.Path:
        """Get or set the base directory."""
        if path is not None:
            self.__base = pathlib.Path(path)
        return self.__base

    @property
    def cache(self) -> pathlib.Path:
        """Return the directory for cached data."""
        return self.__base.joinpath("cache")

    @property
    def storage(self) -> pathlib.Path:
        """Return the directory holding the local storage environment."""
        return self.cache.joinpath("storage")

    @property
    def log(self) -> pathlib.Path:
        """Return the path of the log file."""
        return self.__base.joinpath("log", f"{AppName.lower()}.log")

    @property
    def config(self) -> pathlib.Path:
        """Return the path of the configuration file."""
        return self.__base.joinpath("config.json")


path: Path = Path()

_lock: Final[Lock] = Lock()
_cache: Final[dict[str, logging.Logger]] = {}


def init_app() -> None:
    """Make sure the application's directories exist."""
    for folder in (path.base(), path.cache, path.storage, path.log.parent):
        os.makedirs(folder, exist_ok=True)


def set_basedir(folder: Union[str, pathlib.Path]) -> None:
    """Set the base directory and create the directory tree beneath it."""
    with _lock:
        path.base(folder)
        init_app()
        # Loggers created earlier still point to the old log file.
        for lg in _cache.values():
            for h in list(lg.handlers):
                lg.removeHandler(h)
                h.close()
            _attach_handlers(lg)


def _attach_handlers(lg: logging.Logger) -> None:
    fmt: Final[logging.Formatter] = logging.Formatter(LogFmt)
    fh = logging.handlers.RotatingFileHandler(path.log,
                                              "a",
                                              1 << 20,
                                              backupCount=5)
    fh.setFormatter(fmt)
    lg.addHandler(fh)

    if Debug:
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(fmt)
        lg.addHandler(ch)


def get_logger(name: str) -> logging.Logger:
    """Create and return a logger with the given name."""
    with _lock:
        if name in _cache:
            return _cache[name]

        init_app()

        lg = logging.getLogger(f"{AppName}.{name}")
        lg.setLevel(logging.DEBUG if Debug else logging.INFO)
        lg.propagate = False
        _attach_handlers(lg)

        _cache[name] = lg
        return lg


def parse_iso_date(s: str) -> datetime:
    """Parse an ISO 8601 timestamp. Naive timestamps are taken to be UTC.

    Raise ValueError if s is not a string or not a valid timestamp.
    """
    if not isinstance(s, str):
        raise ValueError(f"Timestamp must be a string, not {s.__class__.__name__}")
    stamp: datetime = datetime.fromisoformat(s.strip())
    if stamp.tzinfo is None:
        stamp = stamp.replace(tzinfo=timezone.utc)
    return stamp


def parse_feed_date(s: Any) -> Optional[datetime]:
    """Parse the timestamp of a feed item.

    The proxy usually hands out "YYYY-MM-DD HH:MM:SS" in UTC, but some feeds
    pass their RFC 822 dates through unchanged. Return None if neither works.
    """
    if not s or not isinstance(s, str):
        return None
    try:
        return parse_iso_date(s)
    except ValueError:
        pass
    try:
        stamp = parsedate_to_datetime(s)
    except (TypeError, ValueError):
        return None
    if stamp.tzinfo is None:
        stamp = stamp.replace(tzinfo=timezone.utc)
    return stamp

# Local Variables: #
# python-indent: 4 #
# End: #
