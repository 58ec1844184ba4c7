"""Command-line entry point for the environment check."""

from __future__ import annotations

import sys

from devcheck.config.service import get_check_config
from devcheck.diagnostics.system_check import render_summary, run_environment_check
from devcheck.infra.logger import setup_logger
from devcheck.ui import print_error, print_header

logger = setup_logger(__name__)


def main() -> int:
    """Run the environment check and return the process exit code."""
    try:
        check_config = get_check_config()
    except ValueError as e:
        logger.info(f"Invalid configuration: {e}")
        print_error(str(e))
        return 1

    print_header("ENVIRONMENT CHECK", check_config["general"].get("banner_subtitle", ""))
    report = run_environment_check(check_config=check_config)
    return render_summary(report, check_config["general"])


if __name__ == "__main__":
    sys.exit(main())
