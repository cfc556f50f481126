"""Loading violation records produced by a lint engine."""
import json
from pathlib import Path

from pydantic import TypeAdapter

from lint_grouped.logging_config import get_logger
from lint_grouped.types import Violation

logger = get_logger(__name__)

_VIOLATIONS_ADAPTER = TypeAdapter(list[Violation])


class ViolationLoadError(ValueError):
    """Raised when violation input is not usable JSON."""


def load_violations(source: str, origin: str = "<input>") -> list[Violation]:
    """Parse violations from JSON text.

    Accepts either a JSON array of records or an object with a
    ``"violations"`` array.

    Args:
        source: JSON text
        origin: Name of the input, used in error messages

    Returns:
        Validated violations in input order

    Raises:
        ViolationLoadError: If the text is not JSON or has the wrong shape
        pydantic.ValidationError: If a record is invalid
    """
    try:
        data = json.loads(source)
    except json.JSONDecodeError as e:
        raise ViolationLoadError(f"Invalid JSON in {origin}: {e}") from e

    if isinstance(data, dict):
        if "violations" not in data:
            raise ViolationLoadError(f"Missing 'violations' array in {origin}")
        data = data["violations"]

    if not isinstance(data, list):
        raise ViolationLoadError(
            f"Expected a list of violations in {origin}, got {type(data).__name__}"
        )

    violations = _VIOLATIONS_ADAPTER.validate_python(data)
    logger.info(f"Loaded {len(violations)} violation(s) from {origin}")
    return violations


def read_violations(path: Path) -> list[Violation]:
    """Read and parse a violations JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        ViolationLoadError: If the file content is not usable JSON
    """
    return load_violations(path.read_text(encoding="utf-8"), origin=str(path))
