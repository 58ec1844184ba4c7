"""Environment check orchestration and reporting.

Runs the checks in a fixed order, prints each result as it arrives and renders
the closing pass/warn/fail summary.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional

from devcheck.config.service import get_check_config
from devcheck.diagnostics.environment import EnvironmentProvider, SystemEnvironment
from devcheck.diagnostics.checks import (
    check_api_key,
    check_browser,
    check_directories,
    check_network,
    check_runtime_version,
)
from devcheck.diagnostics.results import CheckReport, CheckResult, CheckStatus
from devcheck.infra.logger import setup_logger
from devcheck.ui import (
    PromptStyle,
    print_error,
    print_info,
    print_separator,
    print_status_line,
    print_success,
    print_warning,
    ui_print,
)

logger = setup_logger(__name__)

STATUS_STYLES = {
    CheckStatus.PASS: PromptStyle.PASS,
    CheckStatus.WARN: PromptStyle.WARNING,
    CheckStatus.FAIL: PromptStyle.FAIL,
}


def print_check_result(result: CheckResult) -> None:
    """Print a single result line and mirror it to the log file."""
    print_status_line(result.status.icon, result.name, result.message, STATUS_STYLES[result.status])
    logger.info(f"[{result.status.value}] {result.name}: {result.message}")


async def run_checks(
    env: EnvironmentProvider,
    check_config: Dict[str, Any],
    report: CheckReport,
) -> CheckReport:
    """Run every check sequentially, appending results to *report*.

    Order: runtime version, primary key, secondary key, directories, browser,
    network. Each check is awaited before the next one starts.
    """
    report.add(await check_runtime_version(env, check_config["runtime"]))
    report.add(check_api_key(env, check_config["api_keys"]["primary"]))
    report.add(check_api_key(env, check_config["api_keys"]["secondary"]))
    for result in await check_directories(env, check_config["directories"]):
        report.add(result)
    report.add(await check_browser(env, check_config["browser"]["install_command"]))
    report.add(await check_network(
        env,
        check_config["network"]["url"],
        check_config["network"]["timeout_seconds"],
    ))
    return report


def run_environment_check(
    provider: Optional[EnvironmentProvider] = None,
    check_config: Optional[Dict[str, Any]] = None,
    echo: bool = True,
) -> CheckReport:
    """Run all environment checks and return the collected report.

    Args:
        provider: Environment to check. Defaults to the real system.
        check_config: Check configuration. Defaults to the loaded config.
        echo: Print each result as soon as it is produced.

    Returns:
        The completed CheckReport.
    """
    if check_config is None:
        check_config = get_check_config()
    if provider is None:
        provider = SystemEnvironment(check_config["runtime"]["version_command"])

    report = CheckReport(on_result=print_check_result if echo else None)
    asyncio.run(run_checks(provider, check_config, report))
    logger.info(
        f"Environment check finished: {len(report.passed)} passed, "
        f"{len(report.warned)} warned, {len(report.failed)} failed"
    )
    return report


def render_summary(report: CheckReport, general_config: Optional[Dict[str, Any]] = None) -> int:
    """Print the closing summary for *report*.

    Args:
        report: Completed check report.
        general_config: ``general`` section supplying the ready hint and the
            rerun command. Defaults to the loaded config.

    Returns:
        Process exit code: 0 when no check failed, 1 otherwise.
    """
    if general_config is None:
        general_config = get_check_config()["general"]

    print_separator()

    failed = report.failed
    if not failed:
        print_success(f"🎉 ALL CHECKS PASSED! ({len(report.passed)}/{report.total})")
        warned = report.warned
        if warned:
            print_warning(f"   {len(warned)} warning(s) - review above")
        print_info(f"\n   {general_config['ready_hint']}\n")
    else:
        print_error(f"❌ {len(failed)} CHECK(S) FAILED", prefix="")
        ui_print(
            f"\n   Fix the issues above, then run: {general_config['rerun_command']}\n",
            PromptStyle.PLAIN,
        )
    return report.exit_code
