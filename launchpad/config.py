#===============================================================================
#  Launchpad | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Launcher configuration: defaults, optional launcher_config.json, and
#  LAUNCHPAD_* environment overrides. Read-only; nothing is written back.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .constants import (
    DEFAULT_CATALOG_PATHS,
    DEFAULT_ICON_PATH,
    DEFAULT_LOG_DIR,
    ENV_CATALOG,
    ENV_LOG_LEVEL,
    LOG_LEVELS,
    VARIANTS,
)
from .errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LauncherConfig:
    catalog_paths: Tuple[str, ...] = DEFAULT_CATALOG_PATHS
    variant: str = "search"
    log_dir: str = DEFAULT_LOG_DIR
    log_level: str = "INFO"
    default_icon: str = DEFAULT_ICON_PATH

    def candidate_paths(self, base_dir: Path) -> List[Path]:
        """Catalog locations to try, in order, relative to base_dir."""
        out: List[Path] = []
        for raw in self.catalog_paths:
            p = Path(raw)
            if not p.is_absolute():
                p = base_dir / p
            if p not in out:
                out.append(p)
        return out

    def with_catalog_first(self, path: str) -> "LauncherConfig":
        rest = tuple(p for p in self.catalog_paths if p != path)
        return replace(self, catalog_paths=(path,) + rest)


def check_log_level(level: Any) -> str:
    name = str(level).strip().upper()
    if name not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level '{level}'. Expected one of: {', '.join(LOG_LEVELS)}")
    return name


def default_config() -> Dict[str, Any]:
    return {
        "catalog_paths": list(DEFAULT_CATALOG_PATHS),
        "variant": "search",
        "log_dir": DEFAULT_LOG_DIR,
        "log_level": "INFO",
        "default_icon": DEFAULT_ICON_PATH,
    }


def config_from_dict(data: Mapping[str, Any]) -> LauncherConfig:
    d = default_config()
    for k in d:
        if k in data and data[k] is not None:
            d[k] = data[k]

    paths = d["catalog_paths"]
    if isinstance(paths, str):
        paths = [paths]
    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        raise ConfigError("catalog_paths must be a list of strings")

    variant = str(d["variant"]).lower()
    if variant not in VARIANTS:
        raise ConfigError(f"Unknown variant '{d['variant']}'. Expected one of: {', '.join(VARIANTS)}")

    return LauncherConfig(
        catalog_paths=tuple(paths),
        variant=variant,
        log_dir=str(d["log_dir"]),
        log_level=check_log_level(d["log_level"]),
        default_icon=str(d["default_icon"]),
    )


def load_config(config_path: Optional[Path], environ: Optional[Mapping[str, str]] = None) -> LauncherConfig:
    """Load config (or defaults), then apply environment overrides."""
    environ = os.environ if environ is None else environ
    data: Dict[str, Any] = {}
    if config_path is not None and config_path.exists():
        try:
            loaded = json.loads(config_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config %s: %s", config_path, e)
            loaded = {}
        if isinstance(loaded, dict):
            data = loaded
        else:
            logger.warning("Ignoring config %s: top level is not an object", config_path)

    cfg = config_from_dict(data)

    env_catalog = environ.get(ENV_CATALOG, "").strip()
    if env_catalog:
        cfg = cfg.with_catalog_first(env_catalog)
    env_level = environ.get(ENV_LOG_LEVEL, "").strip()
    if env_level:
        cfg = replace(cfg, log_level=check_log_level(env_level))
    return cfg
