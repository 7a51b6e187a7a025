"""A small command-line option parser."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

__all__ = ["ArgType", "CmdLineArg", "CmdLineParser", "get_cmd_option", "cmd_option_exists"]


class ArgType(Enum):
    STRING = "string"
    INT = "int"
    DOUBLE = "double"
    BOOL = "bool"


def cmd_option_exists(argv: Sequence[str], option: str) -> bool:
    """True when ``option`` appears in ``argv``."""
    return option in argv


def get_cmd_option(argv: Sequence[str], option: str) -> str | None:
    """The word following the first ``option`` in ``argv``, or None."""
    try:
        idx = list(argv).index(option)
    except ValueError:
        return None
    return argv[idx + 1] if idx + 1 < len(argv) else None


@dataclass
class CmdLineArg:
    """One option with a short and a long spelling."""

    name: str
    short_symbol: str
    long_symbol: str
    type: ArgType
    default_value: str = ""
    usage: str = ""
    mandatory: bool = False
    value: str | int | float | bool | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if self.default_value:
            self.set_value(self.default_value)

    def set_value(self, text: str) -> None:
        """Convert ``text`` to the option's type and store it."""
        if self.type is ArgType.STRING:
            self.value = text
        elif self.type is ArgType.INT:
            self.value = int(text)
        elif self.type is ArgType.DOUBLE:
            self.value = float(text)
        else:
            self.value = text not in ("", "0")


class CmdLineParser:
    """Parses ``argv`` into the given arguments; prints usage and exits on -h/--help."""

    def __init__(
        self,
        program_name: str,
        args: Sequence[CmdLineArg],
        argv: Sequence[str] | None = None,
        examples: str = "",
    ) -> None:
        self.program_name = program_name
        self.args = list(args)
        self.examples = examples
        argv = list(sys.argv[1:] if argv is None else argv)

        if cmd_option_exists(argv, "-h") or cmd_option_exists(argv, "--help"):
            self.usage()

        for arg in self.args:
            symbol = next(
                (s for s in (arg.short_symbol, arg.long_symbol) if cmd_option_exists(argv, s)),
                None,
            )
            if symbol is None:
                if arg.mandatory:
                    self.usage()
                continue
            if arg.type is ArgType.BOOL:
                arg.set_value("1")
                continue
            text = get_cmd_option(argv, symbol)
            if text is None:
                self.usage()
            arg.set_value(text)

    def __getitem__(self, name: str):
        for arg in self.args:
            if arg.name == name:
                return arg.value
        raise KeyError(name)

    def usage(self) -> None:
        """Print the usage text and exit."""
        lines = [f"Usage: {self.program_name} [OPTION] ...", ""]
        lines += [f"\t{a.short_symbol}, {a.long_symbol}\t{a.usage}" for a in self.args]
        lines += ["", "Examples: ", f"\t{self.examples}"]
        print("\n".join(lines))
        raise SystemExit(0)