#===============================================================================
#  Launchpad | controller.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Owns the catalog, the active filtered view and the selection. The window
#  forwards user intents here and renders whatever RenderState comes back.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence, Tuple, Type, Union

from .catalog_loader import load_catalog
from .filtering import filter_catalog
from .launcher import LaunchResult, launch_app
from .models import App, Catalog
from .selection import SelectionState

logger = logging.getLogger(__name__)


# --- UI intents ---------------------------------------------------------------

@dataclass(frozen=True)
class QueryChanged:
    text: str


@dataclass(frozen=True)
class CategoryPicked:
    index: Optional[int]


@dataclass(frozen=True)
class AppPicked:
    index: Optional[int]


@dataclass(frozen=True)
class LaunchRequested:
    pass


Intent = Union[QueryChanged, CategoryPicked, AppPicked, LaunchRequested]


@dataclass(frozen=True)
class RenderState:
    """Everything the window needs to redraw itself."""
    query: str
    category_names: Tuple[str, ...]
    app_names: Tuple[str, ...]
    category_index: Optional[int]
    app_index: Optional[int]
    launch_result: Optional[LaunchResult] = None


class LauncherController:
    """Single owner of catalog + view + selection state.

    Not thread-safe: every call is expected to come from the UI thread.
    """

    def __init__(
        self,
        candidates: Sequence[Path] = (),
        launcher: Callable[[App], LaunchResult] = launch_app,
    ):
        self.candidates = tuple(Path(p) for p in candidates)
        self._launch = launcher
        self.catalog: Optional[Catalog] = None
        self.query = ""
        self.selection = SelectionState(filter_catalog(Catalog(), ""))
        self._handlers: Dict[Type, Callable] = {
            QueryChanged: lambda i: self.on_query_changed(i.text),
            CategoryPicked: lambda i: self.on_category_picked(i.index),
            AppPicked: lambda i: self.on_app_picked(i.index),
            LaunchRequested: lambda i: self.on_launch_requested(),
        }

    @classmethod
    def from_catalog(cls, catalog: Catalog, launcher: Callable[[App], LaunchResult] = launch_app) -> "LauncherController":
        ctl = cls(launcher=launcher)
        ctl.set_catalog(catalog)
        return ctl

    # ----------------------------
    # Catalog
    # ----------------------------
    def load_catalog(self) -> RenderState:
        """Load from the candidate paths. LoadError propagates: startup must abort."""
        self.set_catalog(load_catalog(self.candidates))
        return self.render()

    def set_catalog(self, catalog: Catalog) -> None:
        if self.catalog is not None:
            raise RuntimeError("Catalog already loaded")
        self.catalog = catalog
        self.query = ""
        self.selection.on_view_changed(filter_catalog(catalog, ""))

    # ----------------------------
    # Intents
    # ----------------------------
    def handle(self, intent: Intent) -> RenderState:
        handler = self._handlers.get(type(intent))
        if handler is None:
            raise TypeError(f"Unknown intent: {intent!r}")
        return handler(intent)

    def on_query_changed(self, text: str) -> RenderState:
        self.query = text or ""
        view = filter_catalog(self.catalog or Catalog(), self.query)
        self.selection.on_view_changed(view)
        logger.debug("Query %r -> %d categories", self.query, len(view))
        return self.render()

    def on_category_picked(self, index: Optional[int]) -> RenderState:
        self.selection.select_category(index)
        return self.render()

    def on_app_picked(self, index: Optional[int]) -> RenderState:
        self.selection.select_app(index)
        return self.render()

    def on_launch_requested(self) -> RenderState:
        app = self.selection.resolve()
        if app is None:
            logger.debug("Launch requested with no app selected")
            return self.render()
        return self.render(launch_result=self._launch(app))

    # ----------------------------
    # Rendering
    # ----------------------------
    def render(self, launch_result: Optional[LaunchResult] = None) -> RenderState:
        sel = self.selection
        return RenderState(
            query=self.query,
            category_names=sel.category_names(),
            app_names=sel.app_names(),
            category_index=sel.category_index,
            app_index=sel.app_index,
            launch_result=launch_result,
        )
