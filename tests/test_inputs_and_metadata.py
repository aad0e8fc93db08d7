from __future__ import annotations

import dataclasses
import json
from pathlib import Path

import pytest

from ghtoolkit.inputs import MissingInputError, get_input, input_key
from ghtoolkit.metadata import Metadata, get_metadata


def test_input_key_derivation():
    assert input_key("Test Input") == "INPUT_TEST_INPUT"
    assert input_key("TESTINPUT") == "INPUT_TESTINPUT"
    assert input_key("my cool input") == "INPUT_MY_COOL_INPUT"


def test_get_input_is_case_and_space_insensitive():
    env = {"INPUT_TEST_INPUT": "value"}
    assert get_input("Test Input", env) == "value"
    assert get_input("test input", env) == "value"
    assert get_input("TEST_INPUT", env) == "value"


def test_get_input_trims_whitespace():
    assert get_input("x", {"INPUT_X": "  val\n  "}) == "val"


@pytest.mark.parametrize("env", [{}, {"INPUT_MISSING VALUE": "x"}, {"INPUT_MISSING_VALUE": ""}, {"INPUT_MISSING_VALUE": " \n\t"}])
def test_get_input_missing_or_blank(env):
    with pytest.raises(MissingInputError) as exc:
        get_input("Missing Value", env)
    assert exc.value.name == "Missing Value"
    assert str(exc.value) == "Input Missing Value not supplied or empty string"


def test_get_input_reads_process_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("INPUT_WHO_TO_GREET", "Mona")
    assert get_input("who to greet") == "Mona"


def test_metadata_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GITHUB_ACTION", "run1")
    monkeypatch.setenv("GITHUB_ACTOR", "octocat")
    monkeypatch.setenv("GITHUB_BASE_REF", "main")
    monkeypatch.setenv("GITHUB_EVENT_NAME", "pull_request")
    monkeypatch.setenv("GITHUB_EVENT_PATH", "/tmp/event.json")
    monkeypatch.setenv("GITHUB_HEAD_REF", "feature")
    monkeypatch.setenv("GITHUB_REF", "refs/pull/1/merge")
    monkeypatch.setenv("GITHUB_REPOSITORY", "octo/repo")
    monkeypatch.setenv("RUNNER_OS", "Linux")
    monkeypatch.setenv("GITHUB_SHA", "abc123")
    monkeypatch.setenv("GITHUB_WORKFLOW", "CI")
    monkeypatch.setenv("GITHUB_WORKSPACE", "/work")

    meta = get_metadata()
    assert meta == Metadata(
        action="run1",
        actor="octocat",
        base_ref="main",
        event_name="pull_request",
        event_path="/tmp/event.json",
        head_ref="feature",
        ref="refs/pull/1/merge",
        repository="octo/repo",
        runner_os="Linux",
        sha="abc123",
        workflow="CI",
        workspace="/work",
    )


def test_metadata_missing_vars_are_empty_strings():
    meta = get_metadata({"GITHUB_SHA": "deadbeef"})
    assert meta.sha == "deadbeef"
    assert meta.actor == ""
    assert set(meta.to_dict().values()) == {"", "deadbeef"}


def test_metadata_is_not_cached():
    env = {"GITHUB_REF": "refs/heads/a"}
    first = get_metadata(env)
    env["GITHUB_REF"] = "refs/heads/b"
    assert get_metadata(env).ref == "refs/heads/b"
    assert first.ref == "refs/heads/a"


def test_load_event(tmp_path: Path):
    event_path = tmp_path / "event.json"
    event_path.write_text(json.dumps({"action": "opened", "number": 7}))
    meta = get_metadata({"GITHUB_EVENT_PATH": str(event_path)})
    assert meta.load_event() == {"action": "opened", "number": 7}


def test_load_event_without_path():
    assert Metadata().load_event() == {}


def test_load_event_rejects_non_objects(tmp_path: Path):
    event_path = tmp_path / "event.json"
    event_path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        Metadata(event_path=str(event_path)).load_event()


def test_metadata_is_frozen():
    meta = Metadata(sha="abc")
    with pytest.raises(dataclasses.FrozenInstanceError):
        meta.sha = "def"  # type: ignore[misc]
