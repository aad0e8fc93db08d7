from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .inputs import MissingInputError, get_input


@dataclass(frozen=True)
class InputSpec:
    name: str
    description: str = ""
    required: bool = False
    default: Optional[str] = None


@dataclass(frozen=True)
class OutputSpec:
    name: str
    description: str = ""


@dataclass(frozen=True)
class ActionManifest:
    name: str
    description: str = ""
    inputs: dict[str, InputSpec] = field(default_factory=dict)
    outputs: dict[str, OutputSpec] = field(default_factory=dict)

    def resolve_inputs(self, environ: Optional[Mapping[str, str]] = None) -> dict[str, Optional[str]]:
        """
        Read every declared input, falling back to its declared default.

        Optional inputs with neither a value nor a default resolve to None.
        """
        out: dict[str, Optional[str]] = {}
        for name, spec in self.inputs.items():
            try:
                out[name] = get_input(name, environ)
            except MissingInputError:
                if spec.default is None and spec.required:
                    raise
                out[name] = spec.default
        return out


def _mapping(raw: Any, what: str) -> dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"action manifest `{what}` must be a mapping")
    return raw


def _as_bool(raw: Any) -> bool:
    if isinstance(raw, str):
        return raw.strip().lower() == "true"
    return bool(raw)


def load_manifest(path: Path) -> ActionManifest:
    raw = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("action manifest must be a mapping")

    inputs: dict[str, InputSpec] = {}
    for name, spec in _mapping(raw.get("inputs"), "inputs").items():
        spec = spec or {}
        if not isinstance(spec, dict):
            raise ValueError(f"input {name!r} must be a mapping")
        default = spec.get("default")
        inputs[str(name)] = InputSpec(
            name=str(name),
            description=str(spec.get("description", "")),
            required=_as_bool(spec.get("required", False)),
            # YAML turns `default: 1` into an int; inputs are always strings.
            default=None if default is None else str(default),
        )

    outputs: dict[str, OutputSpec] = {}
    for name, spec in _mapping(raw.get("outputs"), "outputs").items():
        spec = spec or {}
        if not isinstance(spec, dict):
            raise ValueError(f"output {name!r} must be a mapping")
        outputs[str(name)] = OutputSpec(name=str(name), description=str(spec.get("description", "")))

    return ActionManifest(
        name=str(raw.get("name", "")).strip(),
        description=str(raw.get("description", "")).strip(),
        inputs=inputs,
        outputs=outputs,
    )
