"""Command-line options of the log analyser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from logwindow.timestamp import parse_uint

DEFAULT_STATS = 10
DEFAULT_END = 1000000000000


class OptionError(ValueError):
    """Raised for a flag the analyser does not know."""


@dataclass
class Options:
    """Settings chosen on the command line.

    An empty ``output`` means no output file was given.
    """

    file: str | None = None
    output: str = ""
    print: bool = False
    stats: int = DEFAULT_STATS
    window: int = 0
    start: int = 0
    end: int = DEFAULT_END


_LONG_FIELDS = {
    "--stats": "stats",
    "--window": "window",
    "--from": "start",
    "--to": "end",
}

_SHORT_FIELDS = {
    "-s": "stats",
    "-w": "window",
    "-f": "start",
    "-e": "end",
}


def _bad_flag(flag: str) -> OptionError:
    return OptionError(f"[FATAL] provided incorrect flag: {flag}")


def _apply_long(token: str, options: Options) -> None:
    name, _, value = token.partition("=")
    if name == "--output":
        options.output = value
    elif name == "--print":
        options.print = True
    elif name in _LONG_FIELDS:
        setattr(options, _LONG_FIELDS[name], parse_uint(value))
    else:
        raise _bad_flag(name)


def _apply_short(flag: str, value: str, options: Options) -> None:
    if flag == "-o":
        options.output = value
    elif flag in _SHORT_FIELDS:
        setattr(options, _SHORT_FIELDS[flag], parse_uint(value))
    else:
        raise _bad_flag(flag)


def parse_args(argv: Sequence[str]) -> Options:
    """Build :class:`Options` from arguments, the program name excluded.

    Long flags take ``--name=value``; short flags other than ``-p`` take the
    next argument as their value. A short flag left without a value at the
    end is ignored. Any other argument names the log file.
    """
    options = Options()
    pending: str | None = None
    for token in argv:
        if pending is not None:
            _apply_short(pending, token, options)
            pending = None
        elif token.startswith("--"):
            _apply_long(token, options)
        elif token.startswith("-"):
            if token[1:2] == "p":
                options.print = True
            else:
                pending = token
        else:
            options.file = token
    return options