from __future__ import annotations

from typing import Mapping, Optional

from .config import INPUT_PREFIX, resolve_environ


class MissingInputError(ValueError):
    def __init__(self, name: str):
        super().__init__(f"Input {name} not supplied or empty string")
        self.name = name


def input_key(name: str) -> str:
    """`"My input"` -> `"INPUT_MY_INPUT"`."""
    return INPUT_PREFIX + name.upper().replace(" ", "_")


def get_input(name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    value = resolve_environ(environ).get(input_key(name), "").strip()
    if not value:
        raise MissingInputError(name)
    return value
