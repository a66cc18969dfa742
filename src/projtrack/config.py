"""Configuration defaults and env overrides for projtrack."""

from __future__ import annotations

import os
from dataclasses import dataclass

VERSION = "1.0.0"

DEFAULT_INDENT_WIDTH = 2

INDENT_WIDTH_ENV = "PROJTRACK_INDENT_WIDTH"


def _env_indent_width() -> int:
    raw = os.environ.get(INDENT_WIDTH_ENV, "").strip()
    if not raw:
        return DEFAULT_INDENT_WIDTH
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_INDENT_WIDTH
    return value if value >= 0 else DEFAULT_INDENT_WIDTH


@dataclass
class Config:
    """Runtime options shared by the CLI and report rendering."""

    # Report
    indent_width: int | None = None

    # Misc
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.indent_width is None or self.indent_width < 0:
            self.indent_width = _env_indent_width()
