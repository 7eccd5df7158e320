"""Coloured console logging helpers."""

from __future__ import annotations

import os
import sys
from typing import TextIO

if os.name == "posix":
    WARNING_COLOR = "\x1b[33;1m"
    ERROR_COLOR = "\x1b[31;1m"
    SUCCESS_COLOR = "\x1b[34;1m"
    RESET_COLOR = "\x1b[0m"
else:
    WARNING_COLOR = ""
    ERROR_COLOR = ""
    SUCCESS_COLOR = ""
    RESET_COLOR = ""


def _emit(stream: TextIO, color: str, label: str, args: tuple[object, ...]) -> None:
    body = "".join(str(arg) for arg in args)
    print(f"{color}{label}{body}{RESET_COLOR}", file=stream, flush=True)


def info(*args: object) -> None:
    """Print the arguments, concatenated, as an informational line on stdout."""
    _emit(sys.stdout, SUCCESS_COLOR, "INFO: ", args)


def warn(*args: object) -> None:
    """Print the arguments, concatenated, as a warning line on stdout."""
    _emit(sys.stdout, WARNING_COLOR, "WARN: ", args)


def error(*args: object) -> None:
    """Print the arguments, concatenated, as an error line on stderr."""
    _emit(sys.stderr, ERROR_COLOR, "ERROR: ", args)