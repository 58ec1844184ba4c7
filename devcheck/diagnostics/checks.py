"""Individual environment checks.

Each check inspects one aspect of the environment through an
EnvironmentProvider and converts every problem it finds into a CheckResult.
Nothing raised by the environment escapes a check.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from devcheck.diagnostics.environment import (
    EnvironmentProvider,
    mask_secret,
    parse_major_version,
)
from devcheck.diagnostics.results import CheckResult
from devcheck.infra.logger import setup_logger

logger = setup_logger(__name__)


async def check_runtime_version(env: EnvironmentProvider, runtime_config: Dict[str, Any]) -> CheckResult:
    """Check that the toolchain runtime meets the minimum major version.

    Args:
        env: Environment provider.
        runtime_config: ``runtime`` section of the check configuration.

    Returns:
        PASS at or above ``minimum_major``, FAIL below it or when the runtime
        is missing or reports an unreadable version.
    """
    runtime_name = runtime_config["name"]
    minimum = runtime_config["minimum_major"]
    name = f"{runtime_name} Version"

    version = await env.current_runtime_version()
    if not version:
        logger.info(f"{runtime_name} runtime not found")
        return CheckResult.failed(
            name, f"{runtime_name} not found. Install {runtime_name} {minimum}+"
        )

    major = parse_major_version(version)
    if major is None:
        logger.info(f"Unrecognized {runtime_name} version string: {version!r}")
        return CheckResult.failed(
            name, f"Could not read version from '{version}'. Need {runtime_name} {minimum}+"
        )

    if major >= minimum:
        return CheckResult.passed(name, f"{version} ({minimum}+ required)")
    return CheckResult.failed(name, f"{version} is too old. Need {runtime_name} {minimum}+")


def check_api_key(env: EnvironmentProvider, key_config: Dict[str, Any]) -> CheckResult:
    """Check presence and rough format of an API key environment variable.

    The value is trimmed first. An expected prefix (when configured) is checked
    before the minimum length, so a short key with the wrong prefix reports the
    prefix problem.

    Args:
        env: Environment provider.
        key_config: One entry of the ``api_keys`` section (label, env_var,
            prefix, min_length).
    """
    name = key_config["label"]
    env_var = key_config["env_var"]
    prefix = key_config.get("prefix")
    min_length = key_config["min_length"]

    key = (env.get_variable(env_var) or "").strip()

    if not key:
        return CheckResult.failed(name, f"Not set. Run: export {env_var}=your_key_here")

    if prefix and not key.startswith(prefix):
        logger.info(f"{env_var} has unexpected prefix ({mask_secret(key)})")
        return CheckResult.warning(
            name, f"Key format looks unusual (should start with {prefix})"
        )

    if len(key) < min_length:
        logger.info(f"{env_var} is shorter than {min_length} characters ({mask_secret(key)})")
        return CheckResult.warning(
            name, "Key seems too short. Make sure you copied the full key."
        )

    logger.info(f"{env_var} configured ({mask_secret(key)})")
    return CheckResult.passed(name, "Set and format looks correct")


async def check_directories(env: EnvironmentProvider, directories: Iterable[str]) -> List[CheckResult]:
    """Ensure each working directory exists and is writable.

    Returns:
        One result per directory, in the given order.
    """
    results: List[CheckResult] = []
    for directory in directories:
        name = f"Directory {directory}"
        try:
            await env.ensure_writable_directory(directory)
        except Exception as e:
            logger.info(f"Directory check failed for {directory}: {e}")
            results.append(CheckResult.failed(name, "Cannot create or write to directory"))
        else:
            results.append(CheckResult.passed(name, "Exists and writable"))
    return results


async def check_browser(env: EnvironmentProvider, install_command: str) -> CheckResult:
    """Check that a headless Chromium can be launched and closed."""
    name = "Playwright Browser"
    try:
        await env.launch_browser()
    except Exception as e:
        logger.info(f"Browser launch failed: {e}")
        return CheckResult.failed(name, f"Browser failed: {e}. Run: {install_command}")
    return CheckResult.passed(name, "Chromium is installed and working")


async def check_network(env: EnvironmentProvider, url: str, timeout_seconds: float) -> CheckResult:
    """Check outbound connectivity by navigating a headless browser to *url*.

    The underlying error is written to the log file only; the printed message
    stays generic.
    """
    name = "Network Access"
    try:
        await env.navigate_to(url, timeout_seconds)
    except Exception as e:
        logger.info(f"Navigation to {url} failed: {e}")
        return CheckResult.failed(
            name, "Cannot reach websites. Check your internet connection."
        )
    return CheckResult.passed(name, "Can reach external websites")
