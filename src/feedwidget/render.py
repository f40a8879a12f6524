#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 13:52:26 krylon>
#
# /data/code/python/feedwidget/src/feedwidget/render.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget.render

(c) 2026 Benjamin Walkenhorst
"""


import logging
import pathlib
from typing import Final, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from feedwidget import common
from feedwidget.model import Article, SitemapEntry

template_dir: Final[pathlib.Path] = pathlib.Path(__file__).parent.joinpath("templates")


class Renderer:
    """Renderer turns Articles into HTML."""

    __slots__ = [
        "log",
        "tmpl_root",
        "env",
    ]

    log: logging.Logger
    tmpl_root: pathlib.Path
    env: Environment

    def __init__(self, root: Union[str, pathlib.Path] = "") -> None:
        self.log = common.get_logger("render")
        match root:
            case "":
                self.tmpl_root = template_dir
            case str() as x:
                self.tmpl_root = pathlib.Path(x)
            case _ if isinstance(root, pathlib.Path):
                self.tmpl_root = root
            case _:
                raise TypeError("Invalid type for root (must be str or pathlib.Path)")

        self.env = Environment(loader=FileSystemLoader(str(self.tmpl_root)),
                               autoescape=select_autoescape(["html", "xml"]))
        self.env.globals = {
            "app_string": f"{common.AppName} {common.AppVersion}",
        }

    def generate_article_html(self, articles: list[Article], max_articles: int = 10) -> str:
        """Render up to max_articles Articles as HTML cards."""
        tmpl = self.env.get_template("articles.html")
        return tmpl.render(articles=articles[:max_articles])

    def placeholder(self, kind: str, text: str) -> str:
        """Render a placeholder, e.g. while loading or after an error."""
        tmpl = self.env.get_template("placeholder.html")
        return tmpl.render(kind=kind, text=text)

    def sitemap(self, entries: list[SitemapEntry]) -> str:
        """Render a sitemap for the given entries."""
        self.log.debug("Render sitemap with %d entries", len(entries))
        tmpl = self.env.get_template("sitemap.xml")
        return tmpl.render(entries=entries)

# Local Variables: #
# python-indent: 4 #
# End: #
