#===============================================================================
#  Launchpad | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Shared data models: the loaded catalog and the filtered view derived from it.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class App:
    """One launchable entry of a category."""
    name: str                           # display name, never empty
    exec: str                           # shell command, passed through verbatim
    icon: Optional[str] = None          # path as written in the catalog
    description: Optional[str] = None


@dataclass(frozen=True)
class Category:
    name: str
    apps: Tuple[App, ...] = ()
    icon: Optional[str] = None


@dataclass(frozen=True)
class Catalog:
    """Root container. Built once at startup and never mutated afterwards."""
    categories: Tuple[Category, ...] = ()

    def __len__(self) -> int:
        return len(self.categories)


@dataclass(frozen=True)
class FilteredView:
    """Categories visible for the current query, in catalog order."""
    categories: Tuple[Category, ...]
    query: str = ""

    def __len__(self) -> int:
        return len(self.categories)

    @property
    def is_identity(self) -> bool:
        return not self.query.strip()

    def category_names(self) -> Tuple[str, ...]:
        return tuple(c.name for c in self.categories)
