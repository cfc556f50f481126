"""Deterministic ordering of violations."""
from collections.abc import Iterable

from lint_grouped.types import Violation


def violation_sort_key(violation: Violation) -> tuple[str, int, int]:
    """Return the (file, line, column) key used for ordering."""
    return (violation.file_path, violation.start_line, violation.start_column)


def sort_violations(violations: Iterable[Violation]) -> list[Violation]:
    """Sort violations by file path, then line, then column.

    The sort is stable: violations sharing all three keys keep their
    relative input order.

    Args:
        violations: Violations in any order

    Returns:
        New list of violations in rendering order
    """
    return sorted(violations, key=violation_sort_key)
