#!/usr/bin/env python3
"""
Name: linebreak
Description: re-flow text into lines no wider than WIDTH using greedy breaking

Every output line is followed by its length so the effect of the algorithm can
    be checked at a glance.
"""

import sys
import argparse

from scanner import scan
from greedy_break import greedy_break, render_lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='linebreak',
        description="Re-flow text into lines no wider than WIDTH.",
        usage="%(prog)s width [file]"
    )
    parser.add_argument(
        'width',
        type=int,
        help='Maximum line width, a positive integer.'
    )
    parser.add_argument(
        'file',
        nargs='?',
        default='-',
        help='File to process. Reads from stdin if none is given.'
    )
    return parser


def run(stream, width: int, out) -> None:
    """Breaks the text of the stream into lines and writes them to out."""
    out.write(render_lines(greedy_break(scan(stream), width), width))


def open_input(name):
    """
    Returns the stream to read from. Bytes that are not valid UTF-8 are
    replaced rather than raising, so any input can be tokenized.
    """
    if name == '-':
        if hasattr(sys.stdin, 'reconfigure'):
            sys.stdin.reconfigure(errors='replace')
        return sys.stdin
    return open(name, encoding='utf-8', errors='replace')


def main(argv=None):
    """Parses arguments and re-flows text from a file or stdin."""
    parser = build_parser()
    prog = parser.prog

    try:
        args = parser.parse_args(argv)
    except SystemExit:
        sys.exit(1)

    if args.width <= 0:
        print(f"{prog}: illegal width value '{args.width}'", file=sys.stderr)
        sys.exit(1)

    # --- Open Input ---
    try:
        stream = open_input(args.file)
    except OSError as e:
        # missing file, a directory or no permission
        print(f"{prog}: failed to open '{args.file}': {e.strerror}", file=sys.stderr)
        sys.exit(1)

    # --- Process Input ---
    name = 'standard input' if args.file == '-' else args.file
    try:
        if stream is sys.stdin:
            run(stream, args.width, sys.stdout)
        else:
            with stream:
                run(stream, args.width, sys.stdout)

    except OSError as e:
        # a failed read, or stdout went away
        print(f"{prog}: error while processing '{name}': {e.strerror or e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
