"""Tests for violation records."""
import pytest
from pydantic import ValidationError

from lint_grouped.types import Severity, Violation


def test_violation_accepts_camel_case_keys():
    """Test that engine-style camelCase keys populate fields."""
    violation = Violation(
        filePath="a.ts",
        startLine=4,
        startColumn=2,
        message="Unexpected any",
        ruleId="no-any",
        severity="error",
        hasFix=True,
    )

    assert violation.file_path == "a.ts"
    assert violation.start_line == 4
    assert violation.start_column == 2
    assert violation.rule_id == "no-any"
    assert violation.severity is Severity.ERROR
    assert violation.has_fix is True


def test_violation_has_fix_defaults_to_false():
    """Test that has_fix is optional."""
    violation = Violation(
        file_path="a.ts",
        start_line=0,
        start_column=0,
        message="m",
        rule_id="r",
        severity="warning",
    )
    assert violation.has_fix is False


def test_violation_is_immutable(make_violation):
    """Test that violations cannot be modified."""
    violation = make_violation()

    with pytest.raises(ValidationError):
        violation.message = "changed"


def test_violation_rejects_unknown_severity():
    """Test that severities outside warning/error are rejected."""
    with pytest.raises(ValidationError, match="severity"):
        Violation(
            file_path="a.ts",
            start_line=0,
            start_column=0,
            message="m",
            rule_id="r",
            severity="info",
        )


def test_violation_rejects_negative_position():
    """Test that positions must be zero or more."""
    with pytest.raises(ValidationError, match="start_line"):
        Violation(
            file_path="a.ts",
            start_line=-1,
            start_column=0,
            message="m",
            rule_id="r",
            severity="error",
        )
