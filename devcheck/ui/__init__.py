# devcheck/ui/__init__.py
"""User interface components for devcheck.

Provides styled console printing for the environment check report.
"""

from .prompts import (
    PromptStyle,
    ui_print,
    print_header,
    print_separator,
    print_info,
    print_success,
    print_warning,
    print_error,
    print_status_line,
)

__all__ = [
    "PromptStyle",
    "ui_print",
    "print_header",
    "print_separator",
    "print_info",
    "print_success",
    "print_warning",
    "print_error",
    "print_status_line",
]
