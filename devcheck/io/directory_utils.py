"""Directory management utilities.

Provides directory creation and write-permission validation for the
working directories the toolchain needs.
"""

from __future__ import annotations

import os
from pathlib import Path

import aiofiles.os

from devcheck.infra.logger import setup_logger

logger = setup_logger(__name__)


async def ensure_writable_directory(path: Path) -> Path:
    """Create *path* recursively if missing, then verify it is writable.

    Args:
        path: Directory to prepare, relative paths resolve against the cwd.

    Returns:
        Resolved absolute path to the directory.

    Raises:
        NotADirectoryError: If path exists but is not a directory.
        PermissionError: If the directory exists but cannot be written to.
        OSError: If the directory cannot be created.
    """
    resolved = Path(path).resolve()

    if await aiofiles.os.path.exists(resolved):
        if not await aiofiles.os.path.isdir(resolved):
            raise NotADirectoryError(f"Path exists but is not a directory: {resolved}")
    else:
        await aiofiles.os.makedirs(resolved, exist_ok=True)
        logger.info(f"Created directory: {resolved}")

    if not await aiofiles.os.access(resolved, os.W_OK):
        raise PermissionError(f"Directory is not writable: {resolved}")
    return resolved
