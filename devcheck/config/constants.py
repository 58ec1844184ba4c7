"""Centralized constants used across the application.

Defines the built-in defaults for every environment check. Values from
check_config.yaml are merged over these.
"""

from __future__ import annotations

from typing import Any, Dict

# Status icons shown in front of each check line
STATUS_ICONS = {
    "pass": "✅",
    "warn": "⚠️",
    "fail": "❌",
}

MINIMUM_RUNTIME_MAJOR = 18
NETWORK_CHECK_URL = "https://example.com"
NETWORK_TIMEOUT_SECONDS = 10

# Single source of truth for the default check configuration
DEFAULT_CHECK_CONFIG: Dict[str, Any] = {
    "general": {
        "logs_dir": "logs",
        "banner_subtitle": "Geekout Vegas 2026",
        "ready_hint": "Ready to start! Type: claude",
        "rerun_command": "devcheck",
    },
    "runtime": {
        "name": "Node.js",
        "version_command": ["node", "--version"],
        "minimum_major": MINIMUM_RUNTIME_MAJOR,
    },
    "api_keys": {
        "primary": {
            "label": "Anthropic API Key",
            "env_var": "ANTHROPIC_API_KEY",
            "prefix": "sk-ant-",
            "min_length": 50,
        },
        "secondary": {
            "label": "Gemini API Key",
            "env_var": "GEMINI_API_KEY",
            "prefix": None,
            "min_length": 30,
        },
    },
    "directories": ["./cloned-pages", "./screenshots"],
    "browser": {
        "install_command": "python -m playwright install chromium",
    },
    "network": {
        "url": NETWORK_CHECK_URL,
        "timeout_seconds": NETWORK_TIMEOUT_SECONDS,
    },
}
