from __future__ import annotations

"""
Script Entry Point.

Allows running the CLI straight from a source checkout
(`python src/rotalog/main.py ...`) in addition to the installed
`rotalog` console script.
"""

import os
import sys

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

# Anti-shadowing and path visibility logic
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)


def main() -> int:
    """
    Delegate to the CLI controller.

    Returns:
        int: Process exit code from the CLI.
    """
    from rotalog.interface.cli.app import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
