import pytest

from lint_grouped.types import Severity, Violation


@pytest.fixture
def make_violation():
    """Factory for violations with sensible defaults."""

    def _make(**overrides):
        data = {
            "file_path": "src/main.ts",
            "start_line": 0,
            "start_column": 0,
            "message": "Unexpected any",
            "rule_id": "no-any",
            "severity": Severity.ERROR,
            "has_fix": False,
        }
        data.update(overrides)
        return Violation(**data)

    return _make
