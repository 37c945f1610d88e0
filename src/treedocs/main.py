from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Runs the CLI and installs a global exception hook so that unexpected
crashes are logged with their traceback and end the process with code 1.
"""

import logging
import os
import sys
import traceback
from typing import Any

# Make the package importable when this file is executed directly
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)


def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """Log an unhandled exception and terminate with a failure code."""
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    logger = logging.getLogger("treedocs.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (TREEDOCS)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(1)


def main() -> int:
    sys.excepthook = global_exception_handler
    from treedocs.interface.cli.app import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
