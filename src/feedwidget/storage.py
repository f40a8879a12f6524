#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 12:08:44 krylon>
#
# /data/code/python/feedwidget/src/feedwidget/storage.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.storage

(c) 2026 Benjamin Walkenhorst

Storage is a small persistent key-value store for strings, the moral
equivalent of a browser's localStorage.
"""


import logging
from contextlib import contextmanager
from dataclasses import dataclass
from threading import RLock
from typing import Final, Optional, Union

import lmdb

from feedwidget import common
from feedwidget.common import FeedWidgetError

db_name: Final[bytes] = b"local_storage"


class StorageError(FeedWidgetError):
    """Exception class to indicate errors in the storage layer"""


class TxError(StorageError):
    """TxError indicates an error related to transaction-handling."""


@dataclass(kw_only=True, slots=True)
class Tx:
    """Tx wraps a database transaction."""

    log: logging.Logger
    tx: lmdb.Transaction
    rw: bool

    def __getitem__(self, key: str) -> Optional[str]:
        val = self.tx.get(key.encode())
        if val is None:
            return None
        return bytes(val).decode()

    def __setitem__(self, key: str, val: str) -> None:
        if not self.rw:
            raise TxError("Cannot change the database in a readonly transaction!")

        self.tx.put(key.encode(), val.encode(), overwrite=True)

    def __delitem__(self, key: str) -> None:
        if not self.rw:
            raise TxError("Cannot change the database in a readonly transaction!")

        self.tx.delete(key.encode())

    def __contains__(self, key: str) -> bool:
        return self.tx.get(key.encode()) is not None


class Storage:
    """Storage wraps an LMDB environment holding a single database."""

    __slots__ = [
        "log",
        "lock",
        "env",
        "db",
        "path",
    ]

    log: logging.Logger
    lock: RLock
    env: lmdb.Environment
    db: 'lmdb._Database'
    path: str

    def __init__(self, root: str = "") -> None:
        self.log = common.get_logger("storage")
        if root == "":
            root = str(common.path.storage)
        self.path = root
        self.log.debug("Open storage environment in %s", root)
        self.lock = RLock()
        self.env = lmdb.Environment(root,
                                    subdir=True,
                                    map_size=(1 << 30),  # 1 GiB
                                    metasync=False,
                                    create=True,
                                    max_dbs=2,
                                    )
        self.db = self.env.open_db(db_name)

    @contextmanager
    def tx(self, rw: bool = False):
        """Perform a database transaction. Unless rw is True, no changes are permitted."""
        with self.lock:
            tx: lmdb.Transaction = self.env.begin(write=rw, db=self.db)
            try:
                yield Tx(log=self.log, tx=tx, rw=rw)
            except Exception as err:  # noqa: F841 # pylint: disable-msg=W0718
                cname: Final[str] = err.__class__.__name__
                self.log.error("Abort transaction due to %s: %s",
                               cname,
                               err)
                tx.abort()
            else:
                tx.commit()

    def get_item(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None."""
        val: Optional[str] = None
        with self.tx() as tx:
            val = tx[key]
        return val

    def set_item(self, key: str, value: Union[str, bytes]) -> None:
        """Store value under key, replacing whatever was there."""
        if isinstance(value, bytes):
            value = value.decode()
        with self.tx(True) as tx:
            tx[key] = value

    def remove_item(self, key: str) -> None:
        """Remove key from the Storage. Removing a missing key is not an error."""
        with self.tx(True) as tx:
            del tx[key]

    def close(self) -> None:
        """Close the underlying environment."""
        self.log.debug("Close storage environment in %s", self.path)
        self.env.close()

# Local Variables: #
# python-indent: 4 #
# End: #
