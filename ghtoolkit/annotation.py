from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .command import escape_message, format_command

DEBUG = "debug"
WARNING = "warning"
ERROR = "error"
LEVELS = (DEBUG, WARNING, ERROR)


@dataclass(frozen=True)
class Annotation:
    """
    A log entry the runner can pin to a file location.

    Lines and columns are 1-indexed, so 0 renders the same as None.
    """

    level: str
    message: str
    file: Optional[str] = None
    line: Optional[int] = None
    col: Optional[int] = None

    @classmethod
    def debug(cls, message: str) -> "Annotation":
        return cls(DEBUG, message)

    @classmethod
    def warning(cls, message: str) -> "Annotation":
        return cls(WARNING, message)

    @classmethod
    def error(cls, message: str) -> "Annotation":
        return cls(ERROR, message)

    def at(
        self,
        file: Optional[str] = None,
        line: Optional[int] = None,
        col: Optional[int] = None,
    ) -> "Annotation":
        """Return a copy positioned at `file:line:col`; unspecified parts are kept."""
        return replace(
            self,
            file=self.file if file is None else file,
            line=self.line if line is None else line,
            col=self.col if col is None else col,
        )

    def params(self) -> list[tuple[str, object]]:
        out: list[tuple[str, object]] = []
        if self.file:
            out.append(("file", self.file))
        if self.line:
            out.append(("line", self.line))
        if self.col:
            out.append(("col", self.col))
        return out

    def render(self) -> str:
        return format_command(self.level, self.params(), escape_message(self.message))

    def __str__(self) -> str:
        return self.render()


def new_debug(message: str) -> Annotation:
    return Annotation.debug(message)


def new_warning(message: str) -> Annotation:
    return Annotation.warning(message)


def new_error(message: str) -> Annotation:
    return Annotation.error(message)
