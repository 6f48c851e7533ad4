#===============================================================================
#  Launchpad | catalog_loader.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Reads apps.json (primary location, then fallback) into an immutable Catalog
#  and resolves catalog icons to files on disk for the UI.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence

from .errors import CatalogMalformedError, CatalogNotFoundError
from .models import App, Catalog, Category

logger = logging.getLogger(__name__)


def _require_str(obj: dict, key: str, where: str, non_empty: bool = False) -> str:
    if key not in obj or obj[key] is None:
        raise CatalogMalformedError("missing required field", field=f"{where}.{key}")
    value = obj[key]
    if not isinstance(value, str):
        raise CatalogMalformedError(
            f"expected a string, got {type(value).__name__}", field=f"{where}.{key}"
        )
    if non_empty and not value.strip():
        raise CatalogMalformedError("must not be empty", field=f"{where}.{key}")
    return value


def _optional_str(obj: dict, key: str, where: str) -> Optional[str]:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise CatalogMalformedError(
            f"expected a string, got {type(value).__name__}", field=f"{where}.{key}"
        )
    return value


def _parse_app(raw: Any, where: str) -> App:
    if not isinstance(raw, dict):
        raise CatalogMalformedError("expected an object", field=where)
    return App(
        name=_require_str(raw, "name", where, non_empty=True),
        exec=_require_str(raw, "exec", where),
        icon=_optional_str(raw, "icon", where),
        description=_optional_str(raw, "description", where),
    )


def _parse_category(raw: Any, where: str) -> Category:
    if not isinstance(raw, dict):
        raise CatalogMalformedError("expected an object", field=where)
    name = _require_str(raw, "name", where)
    icon = _optional_str(raw, "icon", where)

    apps_raw = raw.get("apps")
    if apps_raw is None:
        raise CatalogMalformedError("missing required field", field=f"{where}.apps")
    if not isinstance(apps_raw, list):
        raise CatalogMalformedError("expected a list", field=f"{where}.apps")

    apps = tuple(_parse_app(a, f"{where}.apps[{i}]") for i, a in enumerate(apps_raw))
    return Category(name=name, apps=apps, icon=icon)


def parse_catalog(data: Any) -> Catalog:
    """Build a Catalog from an already-decoded JSON document.

    Strings are kept verbatim (no trimming, no case folding) and document
    order is preserved. Unknown keys are ignored.
    """
    if not isinstance(data, dict):
        raise CatalogMalformedError("top level must be an object")
    cats_raw = data.get("categories")
    if cats_raw is None:
        raise CatalogMalformedError("missing required field", field="categories")
    if not isinstance(cats_raw, list):
        raise CatalogMalformedError("expected a list", field="categories")

    return Catalog(
        categories=tuple(_parse_category(c, f"categories[{i}]") for i, c in enumerate(cats_raw))
    )


def read_catalog_file(path: Path) -> Catalog:
    """Parse one catalog file. Raises OSError if it cannot be read."""
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise CatalogMalformedError(
            f"not valid UTF-8 at byte {e.start}: {e.reason}", path=path
        ) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogMalformedError(
            f"invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}", path=path
        ) from e
    except RecursionError as e:
        raise CatalogMalformedError("JSON nested too deeply", path=path) from e

    try:
        return parse_catalog(data)
    except CatalogMalformedError as e:
        raise CatalogMalformedError(e.detail, path=path, field=e.field) from e


def load_catalog(candidates: Sequence[Path]) -> Catalog:
    """Load the catalog from the first readable candidate path.

    Resolution order is the order of *candidates* (apps.json, then
    src/apps.json by default). A readable but malformed file stops the
    search: it is reported, not skipped.
    """
    tried: List[Path] = []
    for path in candidates:
        path = Path(path)
        tried.append(path)
        if not path.is_file():
            logger.debug("Catalog candidate not found: %s", path)
            continue
        try:
            catalog = read_catalog_file(path)
        except OSError as e:
            logger.warning("Catalog candidate unreadable: %s (%s)", path, e)
            continue
        logger.info(
            "Loaded catalog from %s (%d categories, %d apps)",
            path,
            len(catalog.categories),
            sum(len(c.apps) for c in catalog.categories),
        )
        return catalog

    raise CatalogNotFoundError(tried)


def resolve_icon(icon: Optional[str], base_dir: Path, default_icon: Optional[Path] = None) -> Optional[Path]:
    """Map a catalog icon string to an existing file, or fall back to the default icon.

    Relative paths are taken from base_dir with leading './', '.\\', '/' and '\\'
    removed, so "./icons/x.ico" and "icons/x.ico" point at the same file.
    """
    fallback = default_icon if default_icon is not None and default_icon.is_file() else None
    if icon is None or not icon.strip():
        return fallback

    p = Path(icon)
    if not p.is_absolute():
        p = base_dir / icon.lstrip(".\\/")
    if p.is_file():
        return p
    return fallback
