#===============================================================================
#  Launchpad | cli.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Command-line entry point. Starts the window, or with --list prints the
#  (optionally filtered) catalog without a GUI.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click

from .config import LauncherConfig, load_config
from .constants import APP_TITLE, CONFIG_FILE_NAME, LOG_LEVELS, VARIANTS, __version__
from .controller import LauncherController
from .errors import ConfigError, LoadError
from .logging_setup import configure_logging

logger = logging.getLogger(__name__)

EXIT_LOAD_ERROR = 2


def print_view(controller: LauncherController) -> None:
    for cat in controller.selection.view.categories:
        click.secho(cat.name, bold=True)
        for app in cat.apps:
            click.echo(f"    {app.name}  ->  {app.exec}")


def run_gui(controller: LauncherController, cfg: LauncherConfig, base_dir: Path) -> int:
    from PySide6.QtWidgets import QApplication

    from .main_window import MainWindow

    app = QApplication.instance() or QApplication(sys.argv)
    w = MainWindow(
        controller,
        variant=cfg.variant,
        base_dir=base_dir,
        default_icon=base_dir / cfg.default_icon,
    )
    w.show()
    return app.exec()


def show_startup_error(message: str) -> None:
    from PySide6.QtWidgets import QApplication, QMessageBox

    _app = QApplication.instance() or QApplication(sys.argv)
    QMessageBox.critical(None, f"{APP_TITLE} - startup failed", message)


@click.command()
@click.version_option(version=__version__, prog_name="launchpad")
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Catalog file to try first (default: apps.json, then src/apps.json).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help=f"Config file (default: ./{CONFIG_FILE_NAME} if present).",
)
@click.option("--variant", type=click.Choice(VARIANTS), default=None, help="UI layout.")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Console and file log level.",
)
@click.option("--list", "list_only", is_flag=True, help="Print the catalog and exit (no GUI).")
@click.option("--query", default="", help="Filter applied with --list.")
def main(
    catalog_path: Optional[str],
    config_path: Optional[str],
    variant: Optional[str],
    log_level: Optional[str],
    list_only: bool,
    query: str,
) -> None:
    """Launchpad: pick a category, pick an application, launch it."""
    base_dir = Path.cwd()

    try:
        cfg = load_config(Path(config_path) if config_path else base_dir / CONFIG_FILE_NAME)
    except ConfigError as e:
        click.secho(f"Config error: {e}", fg="red", err=True)
        sys.exit(EXIT_LOAD_ERROR)

    if catalog_path:
        cfg = cfg.with_catalog_first(catalog_path)
    if variant:
        cfg = replace(cfg, variant=variant)
    if log_level:
        cfg = replace(cfg, log_level=log_level.upper())

    configure_logging(None if list_only else base_dir / cfg.log_dir, cfg.log_level)

    controller = LauncherController(cfg.candidate_paths(base_dir))
    try:
        controller.load_catalog()
    except LoadError as e:
        logger.error("Startup failed: %s", e)
        click.secho(str(e), fg="red", err=True)
        if not list_only:
            show_startup_error(str(e))
        sys.exit(EXIT_LOAD_ERROR)

    if list_only:
        controller.on_query_changed(query)
        print_view(controller)
        return

    sys.exit(run_gui(controller, cfg, base_dir))
