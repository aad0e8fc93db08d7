#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Optional, Sequence

from .client import Toolkit
from .config import get_log_level
from .inputs import MissingInputError
from .manifest import load_manifest


def _emit(payload: Any, output_format: str) -> None:
    if output_format == "json":
        print(json.dumps(payload, sort_keys=True))
        return
    if isinstance(payload, dict):
        for key, value in payload.items():
            print(f"{key}={'' if value is None else value}")
        return
    print(payload)


def _fail(message: str, output_format: str, *, code: int = 1) -> None:
    payload = {"status": "error", "error": message, "exit_code": code}
    _emit(payload if output_format == "json" else message, output_format)
    raise SystemExit(code)


def _add_location(p: argparse.ArgumentParser) -> None:
    p.add_argument("--file")
    p.add_argument("--line", type=int)
    p.add_argument("--col", type=int)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ghtoolkit", description="Emit workflow commands from shell steps")
    parser.add_argument("--format", choices=["json", "text"], default="json")

    sub = parser.add_subparsers(dest="cmd", required=True)

    for level in ("debug", "warning", "error"):
        p = sub.add_parser(level, help=f"Write a {level} annotation")
        p.add_argument("message")
        _add_location(p)

    p_out = sub.add_parser("set-output", help="Set a step output")
    p_out.add_argument("name")
    p_out.add_argument("value")

    p_env = sub.add_parser("set-env", help="Export an environment variable to later steps")
    p_env.add_argument("key")
    p_env.add_argument("value")

    p_path = sub.add_parser("add-path", help="Prepend a directory to PATH for later steps")
    p_path.add_argument("path")

    p_mask = sub.add_parser("mask", help="Mask a value in the job log")
    p_mask.add_argument("secret")

    p_group = sub.add_parser("group", help="Open a foldable log group")
    p_group.add_argument("name")

    sub.add_parser("endgroup", help="Close the current log group")

    p_stop = sub.add_parser("stop-commands", help="Stop processing workflow commands")
    p_stop.add_argument("token")

    p_resume = sub.add_parser("resume-commands", help="Resume processing workflow commands")
    p_resume.add_argument("token")

    p_input = sub.add_parser("input", help="Print the value of an action input")
    p_input.add_argument("name")

    sub.add_parser("metadata", help="Print the current run's metadata")

    p_inputs = sub.add_parser("inputs", help="Resolve every input declared in an action manifest")
    p_inputs.add_argument("--manifest", default="action.yml", help="Path to action.yml")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    tk = Toolkit()
    try:
        logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
        if args.cmd in ("debug", "warning", "error"):
            getattr(tk, args.cmd)(args.message, file=args.file, line=args.line, col=args.col)
        elif args.cmd == "set-output":
            tk.set_output(args.name, args.value)
        elif args.cmd == "set-env":
            tk.set_env(args.key, args.value)
        elif args.cmd == "add-path":
            tk.prepend_path(args.path)
        elif args.cmd == "mask":
            tk.set_secret(args.secret)
        elif args.cmd == "group":
            tk.start_group(args.name)
        elif args.cmd == "endgroup":
            tk.end_group()
        elif args.cmd == "stop-commands":
            tk.stop_commands(args.token)
        elif args.cmd == "resume-commands":
            tk.resume_commands(args.token)
        elif args.cmd == "input":
            value = tk.get_input(args.name)
            _emit({"name": args.name, "value": value} if args.format == "json" else value, args.format)
        elif args.cmd == "metadata":
            _emit(tk.get_metadata().to_dict(), args.format)
        elif args.cmd == "inputs":
            manifest = load_manifest(Path(args.manifest))
            _emit(manifest.resolve_inputs(tk.environ), args.format)
        else:
            _fail(f"unknown cmd: {args.cmd}", args.format, code=2)
    except SystemExit:
        raise
    except MissingInputError as exc:
        _fail(str(exc), args.format, code=2)
    except Exception as exc:
        _fail(str(exc), args.format, code=1)


if __name__ == "__main__":
    main()
