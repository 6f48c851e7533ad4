#===============================================================================
#  Launchpad | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Central place for file naming conventions, UI sizing and theme.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "Launchpad"
__version__ = "0.3.0"

# Catalog lookup, relative to the working directory (first readable wins)
DEFAULT_CATALOG_PATHS = ("apps.json", "src/apps.json")
CONFIG_FILE_NAME = "launcher_config.json"
DEFAULT_ICON_PATH = "icons/default.ico"
DEFAULT_LOG_DIR = ".launchpad/logs"
LOG_FILE_NAME = "launcher.log"

ENV_CATALOG = "LAUNCHPAD_CATALOG"
ENV_LOG_LEVEL = "LAUNCHPAD_LOG_LEVEL"

# UI variants: plain lists, category combo box, lists + search box
VARIANTS = ("list", "combo", "search")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Window (w, h); kept as tuples so this module does not import Qt
WINDOW_SIZE = (900, 600)
ICON_PX = 20

# --- Dark theme ---
METRO_BG = "#101010"
PANEL_BG = "#1a1a1a"
PANEL_BORDER = "#2a2a2a"
ACCENT = "#0078D7"
