"""Result types for environment checks.

Defines the tri-state check status, the immutable per-check result and the
append-only report that collects them for a single run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

from devcheck.config.constants import STATUS_ICONS


class CheckStatus(Enum):
    """Outcome of a single check."""
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"

    @property
    def icon(self) -> str:
        return STATUS_ICONS[self.value]


@dataclass(frozen=True)
class CheckResult:
    """Result of one check.

    Attributes:
        name: Label identifying the check (e.g. "Anthropic API Key")
        status: Pass, warn or fail
        message: Human-readable explanation, including remediation on failure
    """
    name: str
    status: CheckStatus
    message: str

    @classmethod
    def passed(cls, name: str, message: str) -> CheckResult:
        return cls(name, CheckStatus.PASS, message)

    @classmethod
    def warning(cls, name: str, message: str) -> CheckResult:
        return cls(name, CheckStatus.WARN, message)

    @classmethod
    def failed(cls, name: str, message: str) -> CheckResult:
        return cls(name, CheckStatus.FAIL, message)


@dataclass
class CheckReport:
    """Ordered, append-only collection of check results for one run.

    Attributes:
        on_result: Optional callback invoked with every appended result
    """
    on_result: Optional[Callable[[CheckResult], None]] = None
    _results: List[CheckResult] = field(default_factory=list, init=False)

    def add(self, result: CheckResult) -> None:
        self._results.append(result)
        if self.on_result is not None:
            self.on_result(result)

    @property
    def results(self) -> Tuple[CheckResult, ...]:
        return tuple(self._results)

    def with_status(self, status: CheckStatus) -> List[CheckResult]:
        return [r for r in self._results if r.status is status]

    @property
    def passed(self) -> List[CheckResult]:
        return self.with_status(CheckStatus.PASS)

    @property
    def warned(self) -> List[CheckResult]:
        return self.with_status(CheckStatus.WARN)

    @property
    def failed(self) -> List[CheckResult]:
        return self.with_status(CheckStatus.FAIL)

    @property
    def total(self) -> int:
        return len(self._results)

    @property
    def has_failures(self) -> bool:
        return any(r.status is CheckStatus.FAIL for r in self._results)

    @property
    def exit_code(self) -> int:
        """0 when nothing failed, 1 otherwise."""
        return 1 if self.has_failures else 0
