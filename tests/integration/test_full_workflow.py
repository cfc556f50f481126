"""End-to-end integration tests."""
import json
import os
import shutil
import subprocess
import sys
from pathlib import Path

import pytest


@pytest.fixture
def violations_file(tmp_path):
    """Copy the fixture violations into a temp project."""
    fixture = Path(__file__).parent / "fixtures" / "violations.json"
    target = tmp_path / "violations.json"
    shutil.copy(fixture, target)
    return target


def _run(args, cwd):
    return subprocess.run(
        [sys.executable, "-m", "lint_grouped.cli", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=60,
        env={**os.environ, "PYTHONIOENCODING": "utf-8"},
    )


def test_grouped_report_end_to_end(violations_file):
    """Test the grouped report produced from a violations file."""
    result = _run([str(violations_file), "--no-color"], violations_file.parent)

    assert result.returncode == 1
    assert result.stdout == (
        "src/a.ts\n"
        "  error: 5:3  Unexpected any  no-any\n"
        "\n"
        "src/b.ts\n"
        "  error: 2:1  Shadowed name 'x'  no-shadowed-variable\n"
        "  warning: 10:5  Missing semicolon  semicolon (fixable)\n"
        "\n"
        "✖ Found 1 warning and 2 errors.\n"
        "ℹ 1 out of 3 issues are fixable with the automated fix option.\n"
    )


def test_json_report_end_to_end(violations_file):
    """Test the JSON report produced from a violations file."""
    result = _run([str(violations_file), "--format", "json"], violations_file.parent)

    assert result.returncode == 1
    output = json.loads(result.stdout)
    assert output["summary"]["total_files"] == 2
    assert output["summary"]["total_issues"] == 3
    assert output["summary"]["total_fixable"] == 1
