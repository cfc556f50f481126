"""Machine-readable report and exit code."""
import json
from collections.abc import Iterable
from typing import Any

from lint_grouped.aggregator import GroupedResult, group_by_file
from lint_grouped.renderer import summary_status
from lint_grouped.sorter import sort_violations
from lint_grouped.types import Violation


def get_summary(result: GroupedResult) -> dict[str, Any]:
    """Get summary statistics.

    Args:
        result: Grouped violations

    Returns:
        Dict with total counts and the overall status
    """
    return {
        "total_files": len(result),
        "total_warnings": result.total_warnings,
        "total_errors": result.total_errors,
        "total_fixable": result.total_fixable,
        "total_issues": result.total_issues,
        "status": summary_status(result.total_warnings, result.total_errors).value,
    }


def format_json(violations: Iterable[Violation]) -> str:
    """Format violations as a grouped JSON report.

    Args:
        violations: Violations in any order

    Returns:
        JSON string with per-file results and a summary
    """
    result = group_by_file(sort_violations(violations))

    report = {
        "results": [
            {
                "file": group.file_path,
                "violations": [v.model_dump(mode="json") for v in group.violations],
                "warning_count": group.warning_count,
                "error_count": group.error_count,
                "fixable_count": group.fixable_count,
            }
            for group in result
        ],
        "summary": get_summary(result),
    }

    return json.dumps(report, indent=2)


def get_exit_code(result: GroupedResult, max_warnings: int | None = None) -> int:
    """Get exit code based on results.

    Args:
        result: Grouped violations
        max_warnings: Number of warnings tolerated; None tolerates any

    Returns:
        1 if errors were found or warnings exceed max_warnings, 0 otherwise
    """
    if result.total_errors > 0:
        return 1
    if max_warnings is not None and result.total_warnings > max_warnings:
        return 1
    return 0
