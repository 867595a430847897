"""Command-line interface for mathfont."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TextIO

from mathfont.errors import UnknownOptionError
from mathfont.mapper import describe_style
from mathfont.styles import NO_CONV, STYLES, StyleSpec, lookup
from mathfont.transform import transform

STDIN_FLAG = "-"


@dataclass(slots=True)
class RunState:
    """Accumulator carried left to right across the CLI tokens."""

    style: StyleSpec = NO_CONV
    words: list[str] = field(default_factory=list)


def build_usage(prog: str = "mathfont") -> str:
    """Build the usage text shown when no arguments are given."""
    lines = [
        "Convert Alphabets and digits to Mathematical Symbols",
        f"Usage: {prog} {{-OPTIONS TEXT}}",
        "(FONT-OPTIONS)",
    ]
    for name, style in STYLES.items():
        lines.append(f"    {name} {describe_style(style)}")
    lines.append("A single hyphen(`-`) means reading text from stdin.")
    return "\n".join(lines) + "\n"


def strip_line_ending(line: str) -> str:
    """Drop a trailing ``\\n`` and a ``\\r`` before it, if present."""
    return line.removesuffix("\n").removesuffix("\r")


def convert_stream(lines: Iterable[str], style: StyleSpec, out: TextIO) -> None:
    """Transform and write each line as soon as it is read."""
    for line in lines:
        out.write(transform(strip_line_ending(line), style) + "\n")
        out.flush()


def run(args: list[str], stdin: TextIO, stdout: TextIO) -> RunState:
    """Fold over *args*, switching styles, reading stdin and buffering text.

    Raises UnknownOptionError on the first unrecognized flag.
    """
    state = RunState()
    for arg in args:
        if not arg.startswith("-"):
            state.words.append(transform(arg, state.style))
        elif arg == STDIN_FLAG:
            convert_stream(stdin, state.style, stdout)
        else:
            style = lookup(arg)
            if style is None:
                raise UnknownOptionError(arg)
            state.style = style
    return state


def _use_utf8(stream: TextIO, errors: str) -> TextIO:
    """Switch a standard stream to UTF-8, where the stream allows it."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding="utf-8", errors=errors)
    return stream


def _discard_output(stream: TextIO) -> None:
    """Point a closed pipe at devnull so the interpreter's exit flush stays quiet."""
    try:
        fd = stream.fileno()
    except OSError:
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    prog: str = "mathfont",
) -> int:
    """CLI entry point. Returns exit code (0/1). Does not call sys.exit().

    The process streams are switched to UTF-8; bytes that are not valid
    UTF-8 pass through stdin to stdout unchanged.
    """
    args = sys.argv[1:] if argv is None else argv
    stdin = _use_utf8(sys.stdin, "surrogateescape") if stdin is None else stdin
    stdout = _use_utf8(sys.stdout, "surrogateescape") if stdout is None else stdout
    stderr = _use_utf8(sys.stderr, "backslashreplace") if stderr is None else stderr

    if not args:
        print(build_usage(prog), end="", file=stderr)
        return 0

    try:
        state = run(args, stdin, stdout)
        stdout.write(" ".join(state.words) + "\n")
        stdout.flush()
    except UnknownOptionError as exc:
        print(exc.format(), file=stderr)
        return 1
    except BrokenPipeError:
        _discard_output(stdout)
        return 1
    except (OSError, UnicodeError) as exc:
        print(f"error: {exc}", file=stderr)
        return 1

    return 0
