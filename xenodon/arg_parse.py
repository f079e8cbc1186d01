"""Declarative command-line parsing with flags, parameters and positionals."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from xenodon.errors import Error

Action = Callable[[str], Any]

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_INT_PATTERN = re.compile(r"-?[0-9]+")
_FLOAT_CHARS = frozenset("0123456789.-")


class ArgParseError(Error):
    """Raised when command-line arguments do not fit the command."""


def _matches(arg, long_arg, short_arg):
    return arg == long_arg or (short_arg is not None and len(arg) == 2 and arg[1] == short_arg)


@dataclass
class Flag:
    """A boolean switch, stored as ``True`` under ``dest`` when given."""

    dest: str
    long_arg: str
    short_arg: str | None = None

    def matches(self, arg):
        return _matches(arg, self.long_arg, self.short_arg)


@dataclass
class Parameter:
    """An option that takes one value, converted by ``action``."""

    dest: str
    action: Action
    value_name: str
    long_arg: str
    short_arg: str | None = None

    def matches(self, arg):
        return _matches(arg, self.long_arg, self.short_arg)


@dataclass
class Positional:
    """A required positional argument, converted by ``action``."""

    dest: str
    action: Action
    name: str


@dataclass
class Command:
    """The set of flags, parameters and positionals a command accepts."""

    flags: list[Flag] = field(default_factory=list)
    parameters: list[Parameter] = field(default_factory=list)
    positional: list[Positional] = field(default_factory=list)


def _duplicate_error(kind, long_arg, short_arg):
    if short_arg is not None:
        return ArgParseError("Duplicate specification of {} {}/-{}", kind, long_arg, short_arg)
    return ArgParseError("Duplicate specification of {} {}", kind, long_arg)


def parse(args, cmd):
    """Parse ``args`` against ``cmd`` and return a dict of values by ``dest``.

    Every flag appears in the result (``False`` unless given); parameters
    appear only when given; all positionals are required.
    """
    values: dict[str, Any] = {flag.dest: False for flag in cmd.flags}
    seen: set[str] = set()
    positionals = iter(cmd.positional)
    pos_seen = 0
    it = iter(args)

    for arg in it:
        if arg.startswith("-"):
            flag = next((f for f in cmd.flags if f.matches(arg)), None)
            if flag is not None:
                if flag.long_arg in seen:
                    raise _duplicate_error("flag", flag.long_arg, flag.short_arg)
                seen.add(flag.long_arg)
                values[flag.dest] = True
                continue

            param = next((p for p in cmd.parameters if p.matches(arg)), None)
            if param is None:
                raise ArgParseError("Unrecognized option {}", arg)
            if param.long_arg in seen:
                raise _duplicate_error("parameter", param.long_arg, param.short_arg)
            value = next(it, None)
            if value is None:
                raise ArgParseError("Parameter {} expects argument <{}>", arg, param.value_name)
            seen.add(param.long_arg)
            try:
                values[param.dest] = param.action(value)
            except ValueError:
                raise ArgParseError(
                    "Invalid value for <{}> of parameter {}", param.value_name, arg
                ) from None
        else:
            positional = next(positionals, None)
            if positional is None:
                raise ArgParseError("Unexpected positional argument '{}'", arg)
            try:
                values[positional.dest] = positional.action(arg)
            except ValueError:
                raise ArgParseError(
                    "Invalid value for positional argument <{}>", positional.name
                ) from None
            pos_seen += 1

    missing = next(positionals, None)
    if missing is not None:
        raise ArgParseError("Missing required positional argument <{}>", missing.name)

    return values


def parse_float(text):
    """Parse a plain decimal number made only of digits, '.' and '-'.

    Raises ``ValueError`` if the text is not such a number.
    """
    if any(c not in _FLOAT_CHARS for c in text):
        raise ValueError(f"invalid number: {text!r}")
    if not text:
        # An empty string converts to zero without consuming anything.
        return 0.0
    return float(text)


def string_opt():
    """Converter that keeps the argument as a string."""
    return lambda arg: arg


def int_range_opt(minimum=_INT32_MIN, maximum=_INT32_MAX):
    """Converter to an integer within ``[minimum, maximum]``."""

    def convert(arg):
        if not _INT_PATTERN.fullmatch(arg):
            raise ValueError(f"invalid integer: {arg!r}")
        value = int(arg)
        if not minimum <= value <= maximum:
            raise ValueError(f"integer out of range: {value}")
        return value

    return convert


def float_range_opt(minimum=float("-inf"), maximum=float("inf")):
    """Converter to a float within ``[minimum, maximum]``."""

    def convert(arg):
        value = parse_float(arg)
        if not minimum <= value <= maximum:
            raise ValueError(f"number out of range: {value}")
        return value

    return convert


def path_opt():
    """Converter to a filesystem path."""
    return Path