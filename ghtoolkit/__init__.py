"""
ghtoolkit - workflow commands for GitHub Actions steps

Reads the run's metadata and inputs from the environment and writes the
`::command::` lines the runner interprets:
- set outputs, export environment variables, prepend to PATH
- mask secrets
- debug/warning/error annotations, optionally pinned to file:line:col
- foldable log groups, stopping/resuming command processing

Components:
- command.py: line formatting and the output sink
- annotation.py: Annotation value type
- metadata.py: run metadata snapshot
- inputs.py: action input lookup
- client.py: Toolkit and the module-level shortcuts
- log_handler.py: logging -> annotations bridge
- manifest.py: action.yml loader
- cli.py: command-line front-end
"""

from .annotation import Annotation, new_debug, new_error, new_warning
from .client import (
    Toolkit,
    annotate,
    debug,
    default_toolkit,
    end_group,
    error,
    prepend_path,
    resume_commands,
    set_default_toolkit,
    set_env,
    set_output,
    set_secret,
    start_group,
    stop_commands,
    warning,
)
from .command import escape_message, format_command
from .inputs import MissingInputError, get_input, input_key
from .metadata import Metadata, get_metadata

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Formatting
    "escape_message",
    "format_command",
    # Annotations
    "Annotation",
    "new_debug",
    "new_warning",
    "new_error",
    # Reading
    "Metadata",
    "get_metadata",
    "MissingInputError",
    "get_input",
    "input_key",
    # Commands
    "Toolkit",
    "default_toolkit",
    "set_default_toolkit",
    "annotate",
    "debug",
    "warning",
    "error",
    "set_env",
    "prepend_path",
    "set_secret",
    "set_output",
    "start_group",
    "end_group",
    "stop_commands",
    "resume_commands",
]
