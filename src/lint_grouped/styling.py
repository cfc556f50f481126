"""Role-based terminal styling."""
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any

import click


class StyleRole(Enum):
    """Visual roles used by the renderer."""

    DIM = "dim"
    FILENAME = "filename"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"
    SUCCESS = "success"


ROLE_STYLES: dict[StyleRole, dict[str, Any]] = {
    StyleRole.DIM: {"fg": "bright_black"},
    StyleRole.FILENAME: {"fg": "yellow", "underline": True},
    StyleRole.WARNING: {"fg": "yellow"},
    StyleRole.ERROR: {"fg": "red"},
    StyleRole.INFO: {"fg": "blue"},
    StyleRole.SUCCESS: {"fg": "green"},
}


@dataclass(frozen=True)
class Styler:
    """Applies ANSI styles per role, or passes text through when color is off."""

    color: bool = False

    def style(self, text: str, role: StyleRole) -> str:
        """Style text for the given role.

        Args:
            text: Text to style
            role: Visual role of the text

        Returns:
            Styled text, or the text unchanged when color is disabled
        """
        if not self.color:
            return text
        return click.style(text, **ROLE_STYLES[role])


def should_use_color(color: bool | None, stream: Any = None) -> bool:
    """Resolve a color setting, auto-detecting a terminal when it is None."""
    if color is not None:
        return color
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
