#!/usr/bin/env python3
"""Console entry point.

Run with: python -m atm.main
"""

import logging
import sys

from atm.app_context import AppContext
from atm.config.logging_config import setup_logging


def main() -> None:
    """Start the terminal and serve sessions until input ends or Ctrl-C."""
    setup_logging()
    logger = logging.getLogger(__name__)

    context = AppContext()
    logger.info(
        "Starting %s %s with %d bills",
        context.settings.app_name,
        context.settings.app_version,
        context.cash_inventory.count,
    )

    try:
        context.controller.run_forever()
    except (EOFError, KeyboardInterrupt):
        logger.info("Terminal shutting down")
    except Exception as e:
        logger.exception(f"Application error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
