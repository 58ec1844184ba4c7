# devcheck/config/config_loader.py

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from devcheck.config.constants import DEFAULT_CHECK_CONFIG


def _compute_project_root(package_dir: Optional[Path] = None) -> Path:
    """
    Return the source checkout root when running from one (it holds
    pyproject.toml next to the package), otherwise the current working
    directory, so an installed copy never writes into site-packages.
    """
    package_dir = package_dir or Path(__file__).resolve().parent.parent
    checkout = package_dir.parent
    if (checkout / "pyproject.toml").is_file():
        return checkout
    return Path.cwd().resolve()


PROJECT_ROOT = _compute_project_root()


def _expand_path_str(p: str) -> Path:
    """
    Expand ~ and environment variables in a path string and return a Path.
    """
    return Path(os.path.expandvars(os.path.expanduser(p)))


def _compute_config_dir() -> Path:
    """
    Resolve DEVCHECK_CONFIG_DIR robustly:
    - If absolute: use it.
    - If relative: resolve against PROJECT_ROOT.
    - If unset: default to PROJECT_ROOT/config.
    """
    raw = os.environ.get("DEVCHECK_CONFIG_DIR")
    if raw:
        expanded = _expand_path_str(raw)
        return (expanded if expanded.is_absolute()
                else (PROJECT_ROOT / expanded)).resolve()
    return (PROJECT_ROOT / "config").resolve()


CONFIG_DIR = _compute_config_dir()
DEFAULT_CONFIG_PATH = CONFIG_DIR / "check_config.yaml"


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge *override* into a copy of *base*; nested dicts merge, everything else replaces."""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class ConfigLoader:
    """
    Loads check_config.yaml and exposes a normalized dictionary to callers.

    A missing file is not an error: the built-in defaults are used as-is.
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self._raw: Dict[str, Any] = {}
        self._check: Optional[Dict[str, Any]] = None

    @staticmethod
    def _load_yaml_file(path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(
                f"YAML parsing error in {path}.\n"
                f"Tip: quote values containing ':' or '#', and use forward "
                f"slashes in paths (e.g., C:/Users/name).\nOriginal error: {e}"
            ) from e
        if not isinstance(data, dict):
            raise ValueError(
                f"Configuration file {path} must contain a mapping at the top level"
            )
        return data

    def load_configs(self) -> None:
        """
        Load YAML configuration into memory.
        """
        self._raw = self._load_yaml_file(self.config_path)
        self._check = None

    def get_check_config(self) -> Dict[str, Any]:
        """
        Return the check configuration merged over the defaults (cached).
        - general.logs_dir is resolved against PROJECT_ROOT when relative.
        - runtime.minimum_major, api key min_length and network timeout are coerced to numbers.
        """
        if self._check is None:
            merged = _deep_merge(DEFAULT_CHECK_CONFIG, self._raw)
            self._check = self._normalize_check_config(merged)
        return copy.deepcopy(self._check)

    # -------- Internal helpers for normalization --------

    _MAPPING_SECTIONS = ("general", "runtime", "api_keys", "browser", "network")

    @classmethod
    def _normalize_check_config(cls, cfg: Dict[str, Any]) -> Dict[str, Any]:
        for section in cls._MAPPING_SECTIONS:
            if not isinstance(cfg.get(section), dict):
                raise ValueError(f"'{section}' must be a mapping, got {cfg.get(section)!r}")
        for slot in ("primary", "secondary"):
            if not isinstance(cfg["api_keys"].get(slot), dict):
                raise ValueError(f"'api_keys.{slot}' must be a mapping")

        general = cfg["general"]
        logs_dir_raw = general.get("logs_dir")
        if logs_dir_raw:
            logs_path = _expand_path_str(str(logs_dir_raw))
            general["logs_dir"] = str(
                logs_path.resolve()
                if logs_path.is_absolute()
                else (PROJECT_ROOT / logs_path).resolve()
            )

        runtime = cfg["runtime"]
        command = runtime.get("version_command")
        if isinstance(command, str):
            command = command.split()
        if not isinstance(command, list) or not command:
            raise ValueError("runtime.version_command must be a command string or a non-empty list")
        runtime["version_command"] = [str(part) for part in command]
        try:
            runtime["minimum_major"] = int(runtime["minimum_major"])
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"runtime.minimum_major must be an integer, got {runtime.get('minimum_major')!r}"
            ) from e

        for slot, key_cfg in cfg["api_keys"].items():
            if not isinstance(key_cfg, dict):
                raise ValueError(f"'api_keys.{slot}' must be a mapping")
            try:
                key_cfg["min_length"] = int(key_cfg.get("min_length", 0))
            except (TypeError, ValueError) as e:
                raise ValueError(
                    f"api_keys.{slot}.min_length must be an integer"
                ) from e
            key_cfg["prefix"] = key_cfg.get("prefix") or None

        try:
            cfg["network"]["timeout_seconds"] = float(cfg["network"]["timeout_seconds"])
        except (TypeError, ValueError) as e:
            raise ValueError("network.timeout_seconds must be a number") from e

        directories = cfg.get("directories")
        if directories is None:
            directories = []
        if not isinstance(directories, list):
            raise ValueError(f"'directories' must be a list of paths, got {directories!r}")
        cfg["directories"] = [str(d) for d in directories]
        return cfg
