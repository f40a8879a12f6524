#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 17:20:03 krylon>
#
# /data/code/python/feedwidget/src/feedwidget/main.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.main

(c) 2026 Benjamin Walkenhorst
"""


import argparse
import json
import logging
import pathlib
import sys
from typing import Any, Optional
from urllib.parse import urlparse

from feedwidget import common
from feedwidget.aggregator import Aggregator, Outcome
from feedwidget.cache import ArticleCache
from feedwidget.config import AggregatorConfig, ConfigError, load_config
from feedwidget.fetcher import FeedFetcher
from feedwidget.page import Document
from feedwidget.render import Renderer
from feedwidget.scheduler import AutoUpdater
from feedwidget.seo import (MetaUpdater, extract_keywords,
                            generate_sitemap_entries)
from feedwidget.storage import Storage


def load_article(src: str, fetcher: FeedFetcher) -> Optional[dict[str, Any]]:
    """Load an article record from a JSON file or URL."""
    if urlparse(src).scheme in ("http", "https"):
        data = fetcher.fetch_from_api(src)
    else:
        try:
            with open(src, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as err:
            fetcher.log.error("Cannot load article from %s: %s", src, err)
            return None

    if not isinstance(data, dict):
        return None
    return data


def main() -> None:
    """Run the feedwidget application."""
    argp: argparse.ArgumentParser = argparse.ArgumentParser(prog="feedwidget")
    argp.add_argument("-b", "--basedir",
                      type=pathlib.Path,
                      default=common.path.base(),
                      help="The directory to store application-specific files in")
    argp.add_argument("-c", "--config",
                      type=pathlib.Path,
                      help="A JSON file to load the configuration from")
    argp.add_argument("-d", "--debug",
                      action="store_true",
                      help="Log debug messages to the terminal")
    argp.add_argument("-p", "--page",
                      type=pathlib.Path,
                      help="The HTML page to operate on")
    argp.add_argument("-r", "--render",
                      action="store_true",
                      help="Render the latest articles into the page")
    argp.add_argument("-u", "--update",
                      action="store_true",
                      help="Keep refreshing the page until interrupted")
    argp.add_argument("-m", "--meta",
                      help="Update the page's meta tags from an article (JSON file or URL)")
    argp.add_argument("--canonical",
                      help="Set the page's canonical URL")
    argp.add_argument("-k", "--keywords",
                      type=int,
                      default=0,
                      help="Extract this many keywords from the page text into its meta tags")
    argp.add_argument("--structured",
                      action="store_true",
                      help="Add JSON-LD structured data for the cached articles")
    argp.add_argument("--sitemap",
                      type=pathlib.Path,
                      help="Write a sitemap for the cached articles to this file")
    argp.add_argument("--clear-cache",
                      action="store_true",
                      help="Remove the cached articles")

    args = argp.parse_args()

    common.Debug = args.debug
    common.set_basedir(args.basedir)
    log: logging.Logger = common.get_logger("main")

    try:
        cfg_path: pathlib.Path = args.config or common.path.config
        if args.config is not None or cfg_path.exists():
            cfg = load_config(cfg_path)
        else:
            cfg = AggregatorConfig()
    except ConfigError as err:
        log.error("%s", err)
        print(f"Invalid configuration: {err}", file=sys.stderr)
        sys.exit(1)

    storage: Storage = Storage()
    cache: ArticleCache = ArticleCache(storage=storage,
                                       key=cfg.cache_key,
                                       ttl=cfg.update_interval)
    fetcher: FeedFetcher = FeedFetcher(cfg)
    renderer: Renderer = Renderer()
    agg: Aggregator = Aggregator(cfg, fetcher, cache, renderer)

    try:
        if args.clear_cache:
            cache.clear()

        doc: Optional[Document] = None
        if args.page is not None:
            doc = Document.from_file(args.page)
        elif args.render or args.update or args.meta or args.canonical \
                or args.keywords > 0 or args.structured:
            argp.error("This operation requires a page (-p)")

        if doc is not None:
            seo: MetaUpdater = MetaUpdater(doc)
            if args.meta:
                article = load_article(args.meta, fetcher)
                if article is None:
                    log.error("Could not load an article from %s", args.meta)
                else:
                    seo.update_seo_meta(article)
            if args.canonical:
                seo.set_canonical_url(args.canonical)
            if args.keywords > 0:
                seo.update_keywords(extract_keywords(doc.text, args.keywords))
            if args.structured:
                seo.add_structured_data(cache.get_cached_articles() or [])

            if args.update:
                upd: AutoUpdater = AutoUpdater(agg, doc, cfg.update_interval)
                upd.start()
                try:
                    upd.wait()
                except KeyboardInterrupt:
                    print("Quitting now, bye!")
                upd.stop()
            elif args.render:
                res = agg.display_articles(doc)
                if res.outcome == Outcome.Missing:
                    print(f"Container {cfg.container} was not found in {args.page}",
                          file=sys.stderr)
                doc.save()
            else:
                doc.save()

        if args.sitemap is not None:
            articles = cache.get_cached_articles() or []
            entries = generate_sitemap_entries(articles)
            with open(args.sitemap, "w", encoding="utf-8") as fh:
                fh.write(renderer.sitemap(entries))
    finally:
        storage.close()


if __name__ == '__main__':
    main()


# Local Variables: #
# python-indent: 4 #
# End: #
