"""
ghtoolkit configuration — environment variable names and env-driven settings.
"""
from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

# --- Inputs ---
INPUT_PREFIX = "INPUT_"

# --- Path ---
PATH_VAR = "PATH"

# --- Run metadata (field -> variable) ---
METADATA_ENV: dict[str, str] = {
    "action": "GITHUB_ACTION",
    "actor": "GITHUB_ACTOR",
    "base_ref": "GITHUB_BASE_REF",
    "event_name": "GITHUB_EVENT_NAME",
    "event_path": "GITHUB_EVENT_PATH",
    "head_ref": "GITHUB_HEAD_REF",
    "ref": "GITHUB_REF",
    "repository": "GITHUB_REPOSITORY",
    "runner_os": "RUNNER_OS",
    "sha": "GITHUB_SHA",
    "workflow": "GITHUB_WORKFLOW",
    "workspace": "GITHUB_WORKSPACE",
}

# --- Debug / logging ---
RUNNER_DEBUG_VAR = "RUNNER_DEBUG"
LOG_LEVEL_VAR = "GHTOOLKIT_LOG_LEVEL"


def resolve_environ(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def is_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    return resolve_environ(environ).get(RUNNER_DEBUG_VAR, "") == "1"


def get_log_level(environ: Optional[Mapping[str, str]] = None) -> int:
    env = resolve_environ(environ)
    raw = env.get(LOG_LEVEL_VAR, "").strip()
    if not raw:
        return logging.DEBUG if is_debug(env) else logging.INFO
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ValueError(f"{LOG_LEVEL_VAR}: unknown log level {raw!r}")
    return level
