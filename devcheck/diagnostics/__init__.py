"""Diagnostics package.

Provides the environment checks, their result types and the report
that aggregates them.
"""

__all__ = [
    "CheckStatus",
    "CheckResult",
    "CheckReport",
    "EnvironmentProvider",
    "SystemEnvironment",
    "run_environment_check",
    "render_summary",
]
