"""Access to the ambient environment for the checks.

All process-environment, filesystem, browser and runtime access goes through an
EnvironmentProvider so the checks can be exercised against fakes.
"""

from __future__ import annotations

import asyncio
import os
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence

from playwright.async_api import async_playwright

from devcheck.infra.logger import setup_logger
from devcheck.io.directory_utils import ensure_writable_directory

logger = setup_logger(__name__)

_LEADING_DIGITS = re.compile(r"\d+")


def parse_major_version(version: str) -> Optional[int]:
    """Extract the major version number from a version string.

    A single leading ``v`` marker is stripped, then the numeric prefix of the
    part before the first ``.`` is taken, so ``"v20.11.1"`` gives 20 and
    ``"18"`` gives 18.

    Returns:
        The major version, or None when the string has no numeric prefix.
    """
    text = version.strip()
    if text[:1] in ("v", "V"):
        text = text[1:]
    match = _LEADING_DIGITS.match(text.split(".", 1)[0])
    if match is None:
        return None
    return int(match.group())


def mask_secret(value: str) -> str:
    """Return a loggable form of a secret: first 8 characters, or *** for short values."""
    return value[:8] + "..." if len(value) > 8 else "***"


class EnvironmentProvider(ABC):
    """Interface to everything the checks read from or do to the outside world."""

    @abstractmethod
    def get_variable(self, name: str) -> Optional[str]:
        """Return the raw value of an environment variable, or None if unset."""

    @abstractmethod
    async def ensure_writable_directory(self, path: str) -> None:
        """Create *path* if missing and verify it is writable.

        Raises:
            OSError: If the directory cannot be created or written to.
        """

    @abstractmethod
    async def launch_browser(self) -> None:
        """Launch a headless browser and close it again."""

    @abstractmethod
    async def navigate_to(self, url: str, timeout_seconds: float) -> None:
        """Open *url* in a fresh headless browser, bounded by *timeout_seconds*."""

    @abstractmethod
    async def current_runtime_version(self) -> Optional[str]:
        """Return the toolchain runtime version string, or None if unavailable."""


class SystemEnvironment(EnvironmentProvider):
    """EnvironmentProvider backed by the real process, filesystem and Playwright."""

    def __init__(self, version_command: Sequence[str] = ("node", "--version")) -> None:
        self.version_command: List[str] = list(version_command)

    def get_variable(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    async def ensure_writable_directory(self, path: str) -> None:
        await ensure_writable_directory(Path(path))

    async def launch_browser(self) -> None:
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=True)
            await browser.close()

    async def navigate_to(self, url: str, timeout_seconds: float) -> None:
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=True)
            try:
                page = await browser.new_page()
                await page.goto(url, timeout=timeout_seconds * 1000)
            finally:
                await browser.close()

    async def current_runtime_version(self) -> Optional[str]:
        try:
            process = await asyncio.create_subprocess_exec(
                *self.version_command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await process.communicate()
        except OSError as e:
            logger.info(f"Runtime version command {self.version_command} failed: {e}")
            return None
        if process.returncode != 0:
            logger.info(
                f"Runtime version command {self.version_command} exited with "
                f"{process.returncode}: {stderr.decode(errors='replace').strip()}"
            )
            return None
        version = stdout.decode(errors="replace").strip()
        return version or None
