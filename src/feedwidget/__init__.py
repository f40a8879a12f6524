#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 10:02:11 krylon>
#
# /data/code/python/feedwidget/src/feedwidget/__init__.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the feedwidget news aggregator. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
feedwidget

(c) 2026 Benjamin Walkenhorst

feedwidget renders RSS feeds into static HTML pages and keeps their meta tags
in shape for search engines.
"""

# Local Variables: #
# python-indent: 4 #
# End: #
