from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from typing import Optional, Protocol, Union

Params = Union[Mapping[str, object], Iterable[tuple[str, object]]]


class Sink(Protocol):
    """Anything that accepts text lines (stdout, a file, a StringIO)."""

    def write(self, text: str) -> int: ...


def escape_message(text: str) -> str:
    # Only annotation messages are escaped; other payloads go out verbatim.
    return text.replace("\r", "%0D").replace("\n", "%0A")


def format_command(command: str, params: Optional[Params] = None, message: Optional[str] = None) -> str:
    """
    Render one runner command line.

        ::<command>[ k1=v1,k2=v2]::<message>

    `message=None` drops the trailing `::<message>` section (group/endgroup);
    an empty string keeps the delimiter (resume-commands).
    """
    if params is None:
        pairs: list[tuple[str, object]] = []
    elif isinstance(params, Mapping):
        pairs = list(params.items())
    else:
        pairs = list(params)

    out = f"::{command}"
    if pairs:
        out += " " + ",".join(f"{k}={v}" for k, v in pairs)
    if message is not None:
        out += f"::{message}"
    return out


def write_line(sink: Optional[Sink], line: str) -> int:
    target = sink if sink is not None else sys.stdout
    return target.write(line + "\n")
