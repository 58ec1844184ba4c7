"""Console output utilities.

This module keeps user-facing output separate from logging, with consistent
visual formatting for the environment check report.
"""

from __future__ import annotations

import colorama

# Initialize colorama for Windows color support
colorama.just_fix_windows_console()


class PromptStyle:
    """Visual styling constants for consistent UI."""

    DOUBLE_LINE = "═"
    SINGLE_LINE = "─"

    HEADER = "\033[1;36m"      # Cyan bold (headers, titles)
    INFO = "\033[0;36m"        # Cyan (informational messages)
    SUCCESS = "\033[1;32m"     # Green bold (success messages)
    PASS = "\033[0;32m"        # Green (passing check names)
    WARNING = "\033[0;33m"     # Yellow (warnings)
    ERROR = "\033[1;31m"       # Red bold (errors)
    FAIL = "\033[0;31m"        # Red (failing check names)
    PLAIN = "\033[0;37m"       # White (follow-up hints)
    DIM = "\033[2;37m"         # Dimmed white (secondary text)
    RESET = "\033[0m"          # Reset to default

    @classmethod
    def colorize(cls, text: str, color: str) -> str:
        """Wrap text in a color code."""
        if not color:
            return text
        return f"{color}{text}{cls.RESET}"


def ui_print(message: str, style: str = "", end: str = "\n") -> None:
    """Print a UI message (distinct from logging).

    Args:
        message: The message to display
        style: Optional style/color code
        end: String appended after the message (default: newline)
    """
    try:
        print(PromptStyle.colorize(message, style), end=end, flush=True)
    except UnicodeEncodeError:
        # Consoles without UTF-8 cannot render the status icons
        safe_message = message.encode("ascii", "replace").decode("ascii")
        print(PromptStyle.colorize(safe_message, style), end=end, flush=True)


def print_header(title: str, subtitle: str = "", width: int = 62) -> None:
    """Print a boxed banner for the report.

    Args:
        title: Main title text
        subtitle: Optional subtitle appended after a dash
        width: Inner width of the box
    """
    text = f"{title} - {subtitle}" if subtitle else title
    ui_print("")
    ui_print("╔" + PromptStyle.DOUBLE_LINE * width + "╗", PromptStyle.HEADER)
    ui_print("║" + text.center(width) + "║", PromptStyle.HEADER)
    ui_print("╚" + PromptStyle.DOUBLE_LINE * width + "╝", PromptStyle.HEADER)
    ui_print("")


def print_separator(char: str = PromptStyle.SINGLE_LINE, width: int = 60) -> None:
    """Print a separator line surrounded by blank lines."""
    ui_print("\n" + char * width + "\n")


def print_info(message: str, prefix: str = "") -> None:
    """Print an informational message."""
    ui_print(f"{prefix} {message}" if prefix else message, PromptStyle.INFO)


def print_success(message: str, prefix: str = "") -> None:
    """Print a success message."""
    ui_print(f"{prefix} {message}" if prefix else message, PromptStyle.SUCCESS)


def print_warning(message: str, prefix: str = "") -> None:
    """Print a warning message."""
    ui_print(f"{prefix} {message}" if prefix else message, PromptStyle.WARNING)


def print_error(message: str, prefix: str = "[ERROR]") -> None:
    """Print an error message."""
    ui_print(f"{prefix} {message}" if prefix else message, PromptStyle.ERROR)


def print_status_line(icon: str, name: str, message: str, style: str) -> None:
    """Print one check line: icon, colored name, then the plain message."""
    ui_print(f"{icon} {PromptStyle.colorize(name, style)}: {message}")
