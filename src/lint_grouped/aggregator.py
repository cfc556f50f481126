"""Grouping of violations by file and count aggregation."""
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from lint_grouped.logging_config import get_logger
from lint_grouped.types import Severity, Violation

logger = get_logger(__name__)


class UnknownSeverityError(ValueError):
    """Raised when a violation carries a severity outside ``Severity``."""


def resolve_severity(violation: Violation) -> Severity:
    """Return the violation's severity as a ``Severity`` member.

    Raises:
        UnknownSeverityError: If the value is not a known severity
    """
    try:
        return Severity(violation.severity)
    except ValueError:
        raise UnknownSeverityError(
            f"Unknown severity {violation.severity!r} for rule {violation.rule_id!r} "
            f"in {violation.file_path}"
        ) from None


@dataclass
class FileGroup:
    """All violations reported for one file."""

    file_path: str
    violations: list[Violation] = field(default_factory=list)

    def add(self, violation: Violation) -> None:
        """Append a violation belonging to this file.

        Raises:
            ValueError: If the violation belongs to another file
            UnknownSeverityError: If the violation has an unrecognized severity
        """
        if violation.file_path != self.file_path:
            raise ValueError(
                f"Violation for {violation.file_path} cannot join group {self.file_path}"
            )
        resolve_severity(violation)
        self.violations.append(violation)

    @property
    def warning_count(self) -> int:
        """Number of warnings in this file."""
        return sum(1 for v in self.violations if resolve_severity(v) is Severity.WARNING)

    @property
    def error_count(self) -> int:
        """Number of errors in this file."""
        return sum(1 for v in self.violations if resolve_severity(v) is Severity.ERROR)

    @property
    def fixable_count(self) -> int:
        """Number of violations with an automated fix, of any severity."""
        return sum(1 for v in self.violations if v.has_fix)


@dataclass
class GroupedResult:
    """Violations grouped per file, in first-seen file order."""

    groups: dict[str, FileGroup] = field(default_factory=dict)

    def group_for(self, file_path: str) -> FileGroup:
        """Return the group for a file, creating it on first use."""
        group = self.groups.get(file_path)
        if group is None:
            group = FileGroup(file_path=file_path)
            self.groups[file_path] = group
        return group

    def __iter__(self) -> Iterator[FileGroup]:
        return iter(self.groups.values())

    def __len__(self) -> int:
        return len(self.groups)

    @property
    def total_warnings(self) -> int:
        return sum(group.warning_count for group in self.groups.values())

    @property
    def total_errors(self) -> int:
        return sum(group.error_count for group in self.groups.values())

    @property
    def total_fixable(self) -> int:
        return sum(group.fixable_count for group in self.groups.values())

    @property
    def total_issues(self) -> int:
        """Warnings plus errors."""
        return self.total_warnings + self.total_errors


def group_by_file(sorted_violations: Iterable[Violation]) -> GroupedResult:
    """Group already-sorted violations by file in a single pass.

    Args:
        sorted_violations: Violations in rendering order (see ``sort_violations``)

    Returns:
        GroupedResult whose groups follow first-seen file order

    Raises:
        UnknownSeverityError: If any violation has an unrecognized severity
    """
    result = GroupedResult()
    for violation in sorted_violations:
        result.group_for(violation.file_path).add(violation)

    logger.debug(f"Grouped violations into {len(result)} file(s)")
    return result
