"""Type definitions for lint-grouped."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Severity reported by the lint engine."""

    WARNING = "warning"
    ERROR = "error"


class Violation(BaseModel):
    """Single rule violation reported by the lint engine.

    Positions are zero-based. Accepts the engine's camelCase keys
    (``filePath``, ``startLine``, ...) as well as the field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file_path: str = Field(alias="filePath", description="Path of the linted file")
    start_line: int = Field(ge=0, alias="startLine", description="Zero-based line")
    start_column: int = Field(ge=0, alias="startColumn", description="Zero-based column")
    message: str = Field(description="Human-readable description")
    rule_id: str = Field(alias="ruleId", description="Rule that fired")
    severity: Severity
    has_fix: bool = Field(default=False, alias="hasFix", description="Automated fix available")
