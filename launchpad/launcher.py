#===============================================================================
#  Launchpad | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Starts an app's exec string through the platform shell (cmd /C on Windows,
#  /bin/sh -c elsewhere). Fire-and-forget: no wait, no output capture.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import SpawnFailedError
from .models import App

logger = logging.getLogger(__name__)

# NOTE:
# exec strings come from the catalog file and are trusted configuration.
# They go to the shell unmodified; shell metacharacters are allowed.


class LaunchStatus(Enum):
    SPAWNED = "spawned"
    FAILED = "failed"


@dataclass(frozen=True)
class LaunchResult:
    status: LaunchStatus
    app_name: str = ""
    reason: str = ""
    pid: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status is LaunchStatus.SPAWNED

    @classmethod
    def spawned(cls, app_name: str, pid: Optional[int] = None) -> "LaunchResult":
        return cls(LaunchStatus.SPAWNED, app_name=app_name, pid=pid)

    @classmethod
    def failed(cls, app_name: str, reason: str) -> "LaunchResult":
        return cls(LaunchStatus.FAILED, app_name=app_name, reason=reason)


def _detach_kwargs() -> dict:
    kwargs = dict(
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        close_fds=True,
    )
    if sys.platform.startswith("win"):
        kwargs["creationflags"] = subprocess.CREATE_NEW_PROCESS_GROUP | subprocess.DETACHED_PROCESS  # type: ignore[attr-defined]
    else:
        kwargs["start_new_session"] = True
    return kwargs


def spawn_shell_command(command: str) -> subprocess.Popen:
    """Hand *command* to the platform shell and return without waiting.

    Raises SpawnFailedError if the OS refuses to create the process.
    """
    if not command or not command.strip():
        raise SpawnFailedError(command, "empty command")
    try:
        return subprocess.Popen(command, shell=True, **_detach_kwargs())
    except (OSError, ValueError) as e:
        raise SpawnFailedError(command, str(e)) from e


def launch_app(app: App) -> LaunchResult:
    """Launch an app entry. Failures are reported in the result, never raised."""
    try:
        proc = spawn_shell_command(app.exec)
    except SpawnFailedError as e:
        logger.warning("Launch failed for %s: %s", app.name, e.reason)
        return LaunchResult.failed(app.name, e.reason)

    logger.info("Launched %s (pid=%s): %s", app.name, proc.pid, app.exec)
    return LaunchResult.spawned(app.name, pid=proc.pid)
