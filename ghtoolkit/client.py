from __future__ import annotations

import logging
import os
import secrets
from contextlib import contextmanager
from typing import Iterator, MutableMapping, Optional

from .annotation import Annotation
from .command import Sink, format_command, write_line
from .config import PATH_VAR
from .inputs import get_input
from .metadata import Metadata

logger = logging.getLogger(__name__)


class Toolkit:
    """
    Emits runner commands to a sink and reads run state from an environment.

    Both default to the live process (`sys.stdout`, `os.environ`); pass a
    StringIO and a plain dict to capture everything in tests.
    """

    def __init__(
        self,
        sink: Optional[Sink] = None,
        environ: Optional[MutableMapping[str, str]] = None,
    ):
        self.sink = sink
        self.environ: MutableMapping[str, str] = os.environ if environ is None else environ

    def _emit(self, line: str) -> int:
        return write_line(self.sink, line)

    # --- Reading ---
    def get_metadata(self) -> Metadata:
        return Metadata.from_env(self.environ)

    def get_input(self, name: str) -> str:
        return get_input(name, self.environ)

    # --- Annotations ---
    def annotate(self, annotation: Annotation) -> int:
        return self._emit(annotation.render())

    def debug(self, message: str, *, file: Optional[str] = None, line: Optional[int] = None, col: Optional[int] = None) -> int:
        """Only shown by the runner when step debugging is enabled."""
        return self.annotate(Annotation.debug(message).at(file, line, col))

    def warning(self, message: str, *, file: Optional[str] = None, line: Optional[int] = None, col: Optional[int] = None) -> int:
        return self.annotate(Annotation.warning(message).at(file, line, col))

    def error(self, message: str, *, file: Optional[str] = None, line: Optional[int] = None, col: Optional[int] = None) -> int:
        return self.annotate(Annotation.error(message).at(file, line, col))

    # --- Environment / outputs ---
    def set_env(self, key: str, value: str) -> int:
        """
        Export a variable to later steps of the job.

        The runner does not hand it back to the current step, but this process
        (and anything it spawns) sees it immediately.
        """
        self.environ[key] = value
        logger.debug("set env %s", key)
        return self._emit(format_command("set-env", [("name", key)], value))

    def prepend_path(self, path: str) -> int:
        self.environ[PATH_VAR] = os.pathsep.join([path, self.environ.get(PATH_VAR, "")])
        logger.debug("prepended %s to %s", path, PATH_VAR)
        return self._emit(format_command("add-path", None, path))

    def set_secret(self, secret: str) -> int:
        """Register `secret` with the runner's log redactor."""
        return self._emit(format_command("add-mask", None, secret))

    def set_output(self, name: str, value: str) -> int:
        # Undeclared outputs are rejected by the runner, not here.
        return self._emit(format_command("set-output", [("name", name)], value))

    # --- Grouping ---
    def start_group(self, name: str) -> int:
        return self._emit(format_command("group", [("name", name)]))

    def end_group(self) -> int:
        return self._emit(format_command("endgroup"))

    @contextmanager
    def group(self, name: str) -> Iterator[None]:
        self.start_group(name)
        try:
            yield
        finally:
            self.end_group()

    # --- Command processing ---
    def stop_commands(self, token: str) -> int:
        """Stop the runner interpreting `::` lines until `resume_commands(token)`."""
        return self._emit(format_command("stop-commands", None, token))

    def resume_commands(self, token: str) -> int:
        # The token itself is the command name: `::<token>::`.
        return self._emit(format_command(token, None, ""))

    @contextmanager
    def commands_stopped(self, token: Optional[str] = None) -> Iterator[str]:
        if token is None:
            token = secrets.token_hex(16)
        self.stop_commands(token)
        try:
            yield token
        finally:
            self.resume_commands(token)


_default: Optional[Toolkit] = None


def default_toolkit() -> Toolkit:
    global _default
    if _default is None:
        _default = Toolkit()
    return _default


def set_default_toolkit(toolkit: Optional[Toolkit]) -> Optional[Toolkit]:
    """Swap the toolkit behind the module-level functions; returns the previous one."""
    global _default
    previous, _default = _default, toolkit
    return previous


def annotate(annotation: Annotation) -> int:
    return default_toolkit().annotate(annotation)


def debug(message: str, **location) -> int:
    return default_toolkit().debug(message, **location)


def warning(message: str, **location) -> int:
    return default_toolkit().warning(message, **location)


def error(message: str, **location) -> int:
    return default_toolkit().error(message, **location)


def set_env(key: str, value: str) -> int:
    return default_toolkit().set_env(key, value)


def prepend_path(path: str) -> int:
    return default_toolkit().prepend_path(path)


def set_secret(secret: str) -> int:
    return default_toolkit().set_secret(secret)


def set_output(name: str, value: str) -> int:
    return default_toolkit().set_output(name, value)


def start_group(name: str) -> int:
    return default_toolkit().start_group(name)


def end_group() -> int:
    return default_toolkit().end_group()


def stop_commands(token: str) -> int:
    return default_toolkit().stop_commands(token)


def resume_commands(token: str) -> int:
    return default_toolkit().resume_commands(token)
