"""
Shared fixtures: an in-memory sink and an isolated environment.
"""
from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from ghtoolkit import client as client_module
from ghtoolkit.client import Toolkit


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def environ() -> dict[str, str]:
    return {"PATH": "/usr/bin"}


@pytest.fixture
def toolkit(sink, environ) -> Toolkit:
    return Toolkit(sink=sink, environ=environ)


@pytest.fixture(autouse=True)
def _reset_default_toolkit():
    previous = client_module.set_default_toolkit(None)
    yield
    client_module.set_default_toolkit(previous)


def lines(sink: io.StringIO) -> list[str]:
    return sink.getvalue().splitlines()


pytest.lines = lines
