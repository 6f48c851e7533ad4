#===============================================================================
#  Launchpad | filtering.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Free-text search over the catalog. Matching is case-insensitive substring
#  on category names and app names, at category granularity.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from .models import Catalog, Category, FilteredView


def category_matches(category: Category, needle: str) -> bool:
    """True if the category name or any of its app names contains *needle*.

    *needle* must already be lowercased.
    """
    if needle in category.name.lower():
        return True
    return any(needle in app.name.lower() for app in category.apps)


def filter_catalog(catalog: Catalog, query: str) -> FilteredView:
    """Return the categories visible for *query*, in catalog order.

    An empty (or whitespace-only) query returns the catalog's own category
    tuple without copying. A matching category keeps all of its apps, not only
    the ones that matched.
    """
    if not query or not query.strip():
        return FilteredView(categories=catalog.categories, query="")

    needle = query.lower()
    return FilteredView(
        categories=tuple(c for c in catalog.categories if category_matches(c, needle)),
        query=query,
    )
