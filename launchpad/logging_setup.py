#===============================================================================
#  Launchpad | logging_setup.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Console + file logging under .launchpad/logs/launcher.log.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .constants import LOG_FILE_NAME, LOG_LEVELS

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

_HANDLER_TAG = "_launchpad_handler"


def configure_logging(log_dir: Optional[Path], level: str = "INFO") -> Optional[Path]:
    """Attach launcher handlers to the root logger. Safe to call more than once.

    Returns the log file path, or None when only console logging is active.
    """
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")
    root = logging.getLogger()
    root.setLevel(getattr(logging, name))

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG, False):
            root.removeHandler(h)
            h.close()

    fmt = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    setattr(console, _HANDLER_TAG, True)
    root.addHandler(console)

    if log_dir is None:
        return None

    log_file = log_dir / LOG_FILE_NAME
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        logging.getLogger(__name__).warning("File logging disabled (%s): %s", log_file, e)
        return None

    fh.setFormatter(fmt)
    setattr(fh, _HANDLER_TAG, True)
    root.addHandler(fh)
    return log_file
