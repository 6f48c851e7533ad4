#===============================================================================
#  Launchpad | selection.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Tracks the selected category/app as positions in the active view. Indices
#  never outlive the view they were taken from.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional, Tuple

from .models import App, Category, FilteredView


class SelectionState:
    """Selected category and app, relative to the active view.

    Out-of-range picks clamp to None instead of raising. Negative indices are
    out of range (no wrap-around).
    """

    def __init__(self, view: FilteredView):
        self.view = view
        self.category_index: Optional[int] = None
        self.app_index: Optional[int] = None
        self.on_view_changed(view)

    # ----------------------------
    # Transitions
    # ----------------------------
    def on_view_changed(self, view: FilteredView) -> None:
        """Adopt a freshly filtered view; selection restarts at the first category."""
        self.view = view
        self.category_index = 0 if len(view) > 0 else None
        self.app_index = None

    def select_category(self, index: Optional[int]) -> None:
        if index is not None and 0 <= index < len(self.view):
            self.category_index = index
        else:
            self.category_index = None
        # the app list is rebuilt for the new category, so any app pick is gone
        self.app_index = None

    def select_app(self, index: Optional[int]) -> None:
        apps = self._apps()
        if index is not None and 0 <= index < len(apps):
            self.app_index = index
        else:
            self.app_index = None

    # ----------------------------
    # Queries
    # ----------------------------
    def selected_category(self) -> Optional[Category]:
        if self.category_index is None or not 0 <= self.category_index < len(self.view):
            return None
        return self.view.categories[self.category_index]

    def _apps(self) -> Tuple[App, ...]:
        category = self.selected_category()
        return category.apps if category is not None else ()

    def category_names(self) -> Tuple[str, ...]:
        return self.view.category_names()

    def app_names(self) -> Tuple[str, ...]:
        """App names of the selected category, in catalog order (empty if none)."""
        return tuple(app.name for app in self._apps())

    def resolve(self) -> Optional[App]:
        """The app under (category_index, app_index), or None if either is unset."""
        apps = self._apps()
        if self.app_index is None or not 0 <= self.app_index < len(apps):
            return None
        return apps[self.app_index]
