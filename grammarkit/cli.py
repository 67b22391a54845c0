"""Command line entry point for the grammar tools."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from grammarkit.cfg import CFG
from grammarkit.pda import PDA

DEFAULT_INPUT = "input-pda2cfg1.json"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grammarkit",
        description="Convert push-down automata to grammars and analyse grammars.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_INPUT,
        help="JSON file describing a PDA (default) or a CFG",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--cfg", action="store_true", help="read a CFG and print it")
    mode.add_argument("--cyk", metavar="STRING", help="read a CFG and test STRING with CYK")
    mode.add_argument("--ll", action="store_true", help="read a CFG and build its LL(1) table")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; without options, convert the PDA file to a CFG and print it."""
    args = _parser().parse_args(argv)
    try:
        if args.cfg or args.cyk is not None or args.ll:
            cfg = CFG.from_file(args.path)
            if args.cyk is not None:
                cfg.accepts(args.cyk)
            elif args.ll:
                cfg.ll()
            else:
                cfg.print()
        else:
            PDA.from_file(args.path).to_cfg().print()
    except (OSError, ValueError, KeyError) as error:
        print(f"grammarkit: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())