"""Lint-grouped: grouped, summarized lint output."""

from lint_grouped.__version__ import __version__
from lint_grouped.aggregator import FileGroup, GroupedResult, UnknownSeverityError, group_by_file
from lint_grouped.config import Config, get_default_config, load_config
from lint_grouped.formatter import format_compact, format_violations, get_formatter
from lint_grouped.loader import ViolationLoadError, load_violations, read_violations
from lint_grouped.renderer import render
from lint_grouped.reporter import format_json, get_exit_code
from lint_grouped.sorter import sort_violations
from lint_grouped.styling import StyleRole, Styler
from lint_grouped.types import Severity, Violation

__all__ = [
    "__version__",
    "Config",
    "load_config",
    "get_default_config",
    "Violation",
    "Severity",
    "FileGroup",
    "GroupedResult",
    "UnknownSeverityError",
    "sort_violations",
    "group_by_file",
    "render",
    "format_violations",
    "format_compact",
    "format_json",
    "get_formatter",
    "get_exit_code",
    "load_violations",
    "read_violations",
    "ViolationLoadError",
    "Styler",
    "StyleRole",
]
