#===============================================================================
#  Launchpad  |  JSON-driven Application Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  A small launcher that reads a catalog of categories and applications from
#  apps.json and shows them as two linked lists (category -> applications).
#  Supports:
#    - Three layouts: plain lists, category combo box, lists + search box
#    - Case-insensitive search on category and application names
#    - Launch via button or double-click; commands run through the OS shell
#
#  Catalog Conventions
#  -------------------
#    ./apps.json          -> primary catalog
#    ./src/apps.json      -> fallback catalog
#    ./launcher_config.json (optional) -> catalog paths, variant, logging
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (PySide6, click) which are
#  licensed separately by their respective authors. Ensure compliance with
#  their license terms when distributing this software.
#===============================================================================

from launchpad.cli import main


if __name__ == "__main__":
    main()
