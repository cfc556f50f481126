"""Rendering of grouped violations as styled text."""
from enum import Enum

from lint_grouped.aggregator import FileGroup, GroupedResult, resolve_severity
from lint_grouped.styling import StyleRole, Styler
from lint_grouped.types import Severity, Violation

ERROR_SYMBOL = "✖"
WARNING_SYMBOL = "⚠"
SUCCESS_SYMBOL = "✔"
INFO_SYMBOL = "ℹ"
FIX_MARKER = "(fixable)"


class Status(Enum):
    """Overall outcome shown in the summary line."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


_STATUS_SYMBOLS = {
    Status.ERROR: (ERROR_SYMBOL, StyleRole.ERROR),
    Status.WARNING: (WARNING_SYMBOL, StyleRole.WARNING),
    Status.SUCCESS: (SUCCESS_SYMBOL, StyleRole.SUCCESS),
}

_SEVERITY_ROLES = {
    Severity.WARNING: StyleRole.WARNING,
    Severity.ERROR: StyleRole.ERROR,
}


def pluralize(count: int, noun: str) -> str:
    """Return "<count> <noun>" with an "s" unless count is exactly 1."""
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def summary_status(total_warnings: int, total_errors: int) -> Status:
    """Pick the summary status: errors win over warnings."""
    if total_errors > 0:
        return Status.ERROR
    if total_warnings > 0:
        return Status.WARNING
    return Status.SUCCESS


def format_position(violation: Violation) -> str:
    """One-based "line:column" for display."""
    return f"{violation.start_line + 1}:{violation.start_column + 1}"


def render_violation(violation: Violation, styler: Styler) -> str:
    """Render one violation line of the details block."""
    severity = resolve_severity(violation)
    severity_text = styler.style(severity.value, _SEVERITY_ROLES[severity])
    line = (
        f"  {severity_text}: {format_position(violation)}  {violation.message}"
        f"  {styler.style(violation.rule_id, StyleRole.DIM)}"
    )
    if violation.has_fix:
        line += f" {styler.style(FIX_MARKER, StyleRole.INFO)}"
    return line


def render_group(group: FileGroup, styler: Styler) -> list[str]:
    """Render the header and violation lines for one file."""
    lines = [styler.style(group.file_path, StyleRole.FILENAME)]
    lines.extend(render_violation(violation, styler) for violation in group.violations)
    return lines


def render_details(result: GroupedResult, styler: Styler) -> str:
    """Render every file group, separated by blank lines.

    Returns an empty string when there are no groups.
    """
    return "\n\n".join("\n".join(render_group(group, styler)) for group in result)


def render_summary(result: GroupedResult, styler: Styler) -> str:
    """Render the status line and, when there are issues, the fixable hint."""
    warnings = result.total_warnings
    errors = result.total_errors
    symbol, role = _STATUS_SYMBOLS[summary_status(warnings, errors)]

    lines = [
        f"{styler.style(symbol, role)} Found {pluralize(warnings, 'warning')} "
        f"and {pluralize(errors, 'error')}."
    ]

    issues = warnings + errors
    if issues > 0:
        verb = "is" if issues == 1 else "are"
        lines.append(
            f"{styler.style(INFO_SYMBOL, StyleRole.INFO)} {result.total_fixable} out of "
            f"{pluralize(issues, 'issue')} {verb} fixable with the automated fix option."
        )
    return "\n".join(lines)


def render(result: GroupedResult, styler: Styler | None = None) -> str:
    """Render the details block and summary block.

    Args:
        result: Grouped violations
        styler: Styler to apply; plain text when omitted

    Returns:
        Details and summary separated by a blank line; only the summary
        when there are no violations
    """
    styler = styler or Styler()
    blocks = [render_details(result, styler), render_summary(result, styler)]
    return "\n\n".join(block for block in blocks if block)
