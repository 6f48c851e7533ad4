#===============================================================================
#  Launchpad | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Exception types raised by the catalog loader, config layer and launcher.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


class LauncherError(Exception):
    """Base class for all launcher errors."""


class ConfigError(LauncherError):
    pass


class LoadError(LauncherError):
    """The catalog could not be loaded. Fatal at startup."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class CatalogNotFoundError(LoadError):
    """No catalog document was readable at any candidate location."""

    def __init__(self, candidates: Sequence[Path]):
        self.candidates = tuple(candidates)
        tried = ", ".join(str(p) for p in self.candidates) or "(no candidates)"
        super().__init__(f"No catalog found. Tried: {tried}")


class CatalogMalformedError(LoadError):
    """The catalog document exists but does not match the expected schema."""

    def __init__(self, message: str, path: Optional[Path] = None, field: Optional[str] = None):
        self.field = field
        self.detail = message
        where = f" ({path})" if path else ""
        detail = f"{field}: {message}" if field else message
        super().__init__(f"Malformed catalog{where}: {detail}", path)


class LaunchError(LauncherError):
    pass


class SpawnFailedError(LaunchError):
    """The OS refused to create the process."""

    def __init__(self, command: str, reason: str):
        super().__init__(f"Could not start '{command}': {reason}")
        self.command = command
        self.reason = reason
