from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from .config import METADATA_ENV, resolve_environ


@dataclass(frozen=True)
class Metadata:
    """Snapshot of the current run: who triggered it, on what ref, where."""

    action: str = ""
    actor: str = ""
    base_ref: str = ""
    event_name: str = ""
    event_path: str = ""
    head_ref: str = ""
    ref: str = ""
    repository: str = ""
    runner_os: str = ""
    sha: str = ""
    workflow: str = ""
    workspace: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Metadata":
        env = resolve_environ(environ)
        return cls(**{field: env.get(var, "") for field, var in METADATA_ENV.items()})

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    def load_event(self) -> dict[str, Any]:
        """Decode the webhook payload the run was triggered with."""
        if not self.event_path:
            return {}
        parsed = json.loads(Path(self.event_path).read_text(encoding="utf-8"))
        if not isinstance(parsed, dict):
            raise ValueError(f"event payload at {self.event_path} is not a JSON object")
        return parsed


def get_metadata(environ: Optional[Mapping[str, str]] = None) -> Metadata:
    return Metadata.from_env(environ)
