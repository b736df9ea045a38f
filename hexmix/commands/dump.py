from __future__ import annotations

import argparse
import os
import sys
from dataclasses import replace
from typing import Sequence

from hexmix.core.config import load_config
from hexmix.core.octets import NumericFormat
from hexmix.core.render import write_render
from hexmix.core.settings import RenderConfig
from hexmix.core.source import SourceError, read_bytes, read_stream
from hexmix.core.wave import wave_lines
from hexmix.ui.arrays import ArrayGrammar
from hexmix.ui.console import err, warn
from hexmix.ui.theme import THEMES


NO_INPUT = "No input provided, run with --help for list of options"


def _positive_int(text: str) -> int:
    value = _int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"invalid positive value: {text}")
    return value


def _nonneg_int(text: str) -> int:
    value = _int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid non-negative value: {text}")
    return value


def _int(text: str) -> int:
    try:
        return int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {text}") from exc


def _switch(text: str) -> bool:
    if text not in ("0", "1"):
        raise argparse.ArgumentTypeError(f"expected 0 or 1: {text}")
    return text == "1"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexmix",
        description="Colorized hex dump and array literal output for files or stdin.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        metavar="INPUTFILE",
        help="File to read; input is read from stdin when omitted.",
    )
    parser.add_argument("-c", "--cols", type=_positive_int, help="Set column length.")
    parser.add_argument("-l", "--len", type=_nonneg_int, help="Set <len> bytes to read.")
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in NumericFormat],
        help="Set format of octet: Octal (o), LowerHex (x), UpperHex (X), Binary (b).",
    )
    parser.add_argument(
        "-t",
        "--color",
        type=_switch,
        help="Set color tint terminal output. 0 to disable, 1 to enable.",
    )
    parser.add_argument(
        "-a",
        "--array",
        choices=[grammar.value for grammar in ArrayGrammar],
        help=(
            "Set source code format output: rust (r), C (c), golang (g), python (p), "
            "kotlin (k), java (j), swift (s), fsharp (f)."
        ),
    )
    parser.add_argument(
        "-r",
        "--prefix",
        type=_switch,
        help="Include 0x prefix on hex octets. 0 to disable, 1 to enable.",
    )
    parser.add_argument("--theme", choices=sorted(THEMES), help="Color theme.")
    parser.add_argument(
        "-u",
        "--func",
        type=_positive_int,
        metavar="FUNC_LENGTH",
        help="Print a quarter sine wave table of this length instead of a dump.",
    )
    parser.add_argument(
        "-p",
        "--places",
        type=_nonneg_int,
        default=4,
        help="Decimal places for the wave table.",
    )
    return parser


def resolve_color(explicit: bool | None, preferred: bool, stream=None) -> bool:
    if explicit is not None:
        return explicit
    if os.environ.get("NO_COLOR"):
        return False
    out = stream if stream is not None else sys.stdout
    isatty = getattr(out, "isatty", None)
    if not isatty or not isatty():
        return False
    return preferred


def build_config(args: argparse.Namespace, defaults: RenderConfig, stream=None) -> RenderConfig:
    changes: dict[str, object] = {
        "color_enabled": resolve_color(args.color, defaults.color_enabled, stream),
    }
    if args.cols is not None:
        changes["columns"] = args.cols
    if args.format is not None:
        changes["numeric_format"] = NumericFormat.from_code(args.format)
    if args.prefix is not None:
        changes["prefix"] = args.prefix
    if args.theme is not None:
        changes["theme"] = args.theme
    if args.array is not None:
        changes["array_target"] = ArrayGrammar.from_code(args.array)
    return replace(defaults, **changes)


def _read_input(args: argparse.Namespace) -> bytes:
    if args.input:
        return read_bytes(args.input, args.len)
    if sys.stdin is None or sys.stdin.isatty():
        raise SourceError(NO_INPUT)
    return read_stream(sys.stdin.buffer, args.len)


def run(argv: Sequence[str] | None = None, defaults: RenderConfig | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.func is not None:
        if args.input:
            warn(f"input ignored with --func: {args.input}")
        for line in wave_lines(args.func, args.places):
            sys.stdout.write(line + "\n")
        return 0

    config = build_config(args, defaults if defaults is not None else load_config())
    try:
        data = _read_input(args)
    except SourceError as exc:
        err(str(exc))
        return 1

    write_render(data, config, sys.stdout)
    sys.stdout.flush()
    return 0


def main() -> None:
    try:
        code = run()
    except BrokenPipeError:
        # keep the interpreter from reporting the closed pipe when it flushes stdout at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        os.close(devnull)
        code = 0
    raise SystemExit(code)


if __name__ == "__main__":
    main()
