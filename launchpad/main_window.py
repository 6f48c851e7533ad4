#===============================================================================
#  Launchpad | launchpad/main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Dark two-pane launcher window:
#    - Categories (list, or combo box in the "combo" variant)
#    - Applications of the selected category
#    - Search box ("search" variant) filtering categories by name/app name
#    - Launch button, or double-click an application
#  All state lives in LauncherController; this window only renders it.
#===============================================================================

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSize
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .catalog_loader import resolve_icon
from .constants import (
    ACCENT,
    APP_TITLE,
    ICON_PX,
    METRO_BG,
    PANEL_BG,
    PANEL_BORDER,
    WINDOW_SIZE,
)
from .controller import LauncherController, RenderState


class MainWindow(QMainWindow):
    def __init__(
        self,
        controller: LauncherController,
        variant: str = "search",
        base_dir: Optional[Path] = None,
        default_icon: Optional[Path] = None,
    ):
        super().__init__()
        self.controller = controller
        self.variant = variant
        self.base_dir = base_dir or Path.cwd()
        self.default_icon = default_icon
        self.setWindowTitle(APP_TITLE)
        self.resize(*WINDOW_SIZE)

        self.setStyleSheet(f"""
        QMainWindow {{ background: {METRO_BG}; }}
        QLabel {{ color: white; font-family: "Segoe UI"; }}
        QListWidget, QComboBox, QLineEdit {{
            font-family: "Segoe UI";
            color: white;
            background: {PANEL_BG};
            border: 1px solid {PANEL_BORDER};
            padding: 4px;
        }}
        QListWidget::item:selected {{ background: {ACCENT}; }}
        QPushButton {{
            font-family: "Segoe UI";
            color: white;
            background: {PANEL_BG};
            border: 1px solid {PANEL_BORDER};
            padding: 8px 10px;
        }}
        QPushButton:hover {{ background: #222; }}
        QPushButton:pressed {{ background: {PANEL_BORDER}; }}
        """)

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(10)

        self.search_box: Optional[QLineEdit] = None
        if variant == "search":
            self.search_box = QLineEdit()
            self.search_box.setPlaceholderText("Search categories and applications…")
            self.search_box.setClearButtonEnabled(True)
            self.search_box.textChanged.connect(self.on_query_changed)
            layout.addWidget(self.search_box)

        panes = QHBoxLayout()

        cat_col = QVBoxLayout()
        cat_col.addWidget(QLabel("<b>Categories</b>"))
        self.category_list: Optional[QListWidget] = None
        self.category_combo: Optional[QComboBox] = None
        if variant == "combo":
            self.category_combo = QComboBox()
            self.category_combo.currentIndexChanged.connect(self.on_category_picked)
            cat_col.addWidget(self.category_combo)
            cat_col.addStretch(1)
        else:
            self.category_list = QListWidget()
            self.category_list.setIconSize(QSize(ICON_PX, ICON_PX))
            self.category_list.currentRowChanged.connect(self.on_category_picked)
            cat_col.addWidget(self.category_list)
        panes.addLayout(cat_col, 2)

        app_col = QVBoxLayout()
        app_col.addWidget(QLabel("<b>Applications</b>"))
        self.app_list = QListWidget()
        self.app_list.setIconSize(QSize(ICON_PX, ICON_PX))
        self.app_list.currentRowChanged.connect(self.on_app_picked)
        self.app_list.itemDoubleClicked.connect(lambda _item: self.on_launch_requested())
        app_col.addWidget(self.app_list)
        panes.addLayout(app_col, 3)

        layout.addLayout(panes)

        self.launch_btn = QPushButton("Launch")
        self.launch_btn.clicked.connect(self.on_launch_requested)
        layout.addWidget(self.launch_btn)

        self.apply(self.controller.render())

    # ----------------------------
    # Widget events -> controller
    # ----------------------------
    def on_query_changed(self, text: str):
        self.apply(self.controller.on_query_changed(text))

    def on_category_picked(self, row: int):
        self.apply(self.controller.on_category_picked(row if row >= 0 else None))

    def on_app_picked(self, row: int):
        self.apply(self.controller.on_app_picked(row if row >= 0 else None), apps_changed=False)

    def on_launch_requested(self):
        self.apply(self.controller.on_launch_requested(), apps_changed=False)

    # ----------------------------
    # Rendering
    # ----------------------------
    def _icon(self, icon: Optional[str]) -> QIcon:
        p = resolve_icon(icon, self.base_dir, self.default_icon)
        return QIcon(str(p)) if p else QIcon()

    def _render_categories(self, state: RenderState):
        view = self.controller.selection.view
        row = state.category_index if state.category_index is not None else -1

        if self.category_combo is not None:
            self.category_combo.blockSignals(True)
            try:
                self.category_combo.clear()
                for cat in view.categories:
                    self.category_combo.addItem(self._icon(cat.icon), cat.name)
                self.category_combo.setCurrentIndex(row)
            finally:
                self.category_combo.blockSignals(False)
            return

        self.category_list.blockSignals(True)
        try:
            self.category_list.clear()
            for cat in view.categories:
                self.category_list.addItem(QListWidgetItem(self._icon(cat.icon), cat.name))
            self.category_list.setCurrentRow(row)
        finally:
            self.category_list.blockSignals(False)

    def _render_apps(self, state: RenderState):
        category = self.controller.selection.selected_category()
        self.app_list.blockSignals(True)
        try:
            self.app_list.clear()
            if category is not None:
                for app in category.apps:
                    item = QListWidgetItem(self._icon(app.icon), app.name)
                    if app.description:
                        item.setToolTip(app.description)
                    self.app_list.addItem(item)
            self.app_list.setCurrentRow(state.app_index if state.app_index is not None else -1)
        finally:
            self.app_list.blockSignals(False)

    def apply(self, state: RenderState, apps_changed: bool = True):
        if apps_changed:
            self._render_categories(state)
            self._render_apps(state)
        self.launch_btn.setEnabled(state.app_index is not None)

        result = state.launch_result
        if result is not None and not result.ok:
            QMessageBox.warning(self, "Launch failed", f"{result.app_name}\n\n{result.reason}")
