# check_environment.py
"""
Script to verify the local development environment before the toolchain is used.

Checks the Node.js runtime, the Anthropic and Gemini API keys, the working
directories, the Playwright Chromium browser and outbound network access, then
prints a summary. Exits with status 1 when any check failed.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from devcheck.cli import main


if __name__ == "__main__":
    sys.exit(main())
