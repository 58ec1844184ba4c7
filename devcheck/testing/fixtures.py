"""Test fixtures and utilities.

Provides a scriptable EnvironmentProvider and configuration builders so the
checks can run without touching real processes, browsers or the network.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional, Tuple

from devcheck.config.constants import DEFAULT_CHECK_CONFIG
from devcheck.diagnostics.environment import EnvironmentProvider


def create_test_config(**overrides: Any) -> Dict[str, Any]:
    """Create a check configuration dictionary from the defaults.

    Args:
        **overrides: Config overrides; dotted keys such as
            ``"network.timeout_seconds"`` address nested values.

    Returns:
        Test configuration dictionary.
    """
    config = copy.deepcopy(DEFAULT_CHECK_CONFIG)
    for key, value in overrides.items():
        if "." in key:
            parts = key.split(".")
            target = config
            for part in parts[:-1]:
                target = target.setdefault(part, {})
            target[parts[-1]] = value
        else:
            config[key] = value
    return config


class FakeEnvironment(EnvironmentProvider):
    """EnvironmentProvider returning fixed values and raising configured errors.

    Every call is recorded in ``calls`` as ``(method_name, args)``.
    """

    def __init__(
        self,
        variables: Optional[Dict[str, str]] = None,
        runtime_version: Optional[str] = "v20.11.1",
        directory_errors: Optional[Dict[str, Exception]] = None,
        browser_error: Optional[Exception] = None,
        navigation_error: Optional[Exception] = None,
    ) -> None:
        self.variables = dict(variables or {})
        self.runtime_version = runtime_version
        self.directory_errors = dict(directory_errors or {})
        self.browser_error = browser_error
        self.navigation_error = navigation_error
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def get_variable(self, name: str) -> Optional[str]:
        self.calls.append(("get_variable", (name,)))
        return self.variables.get(name)

    async def ensure_writable_directory(self, path: str) -> None:
        self.calls.append(("ensure_writable_directory", (path,)))
        if path in self.directory_errors:
            raise self.directory_errors[path]

    async def launch_browser(self) -> None:
        self.calls.append(("launch_browser", ()))
        if self.browser_error is not None:
            raise self.browser_error

    async def navigate_to(self, url: str, timeout_seconds: float) -> None:
        self.calls.append(("navigate_to", (url, timeout_seconds)))
        if self.navigation_error is not None:
            raise self.navigation_error

    async def current_runtime_version(self) -> Optional[str]:
        self.calls.append(("current_runtime_version", ()))
        return self.runtime_version

    def get_call_count(self, method_name: str) -> int:
        """Get number of times a method was called."""
        return sum(1 for name, _ in self.calls if name == method_name)
