#!/usr/bin/env python3

# colcut: like cut, but for CSVs.
#
# Prints the requested columns of every input line. Commas inside single or
# double quotes don't split fields, and selected fields are printed exactly
# as they appear in the input.

import argparse
import fileinput
import os
import sys

from colspec import ColumnSpecError, parse
from splitline import select, tokenize

DEBUG = False


def print_spec_help():
    print("""
colcut Column Spec Help
=======================

The column spec is a comma-separated list of column numbers and ranges.
Columns are printed in the order given; repeats are allowed.

One-indexed (default, -1/--one):
    1,3,5          # Columns 1, 3 and 5
    2-4            # Columns 2 through 4 (inclusive)
    5,1-3,1        # Column 5, then 1 through 3, then 1 again

Zero-indexed (-0/--zero):
    0,2,4          # The first, third and fifth columns
    1-3            # Columns 1 and 2 (ranges are half-open, like [1, 3))

Columns past the end of a line are printed as empty fields.
Use -p/--preview to see the column numbers of the first line.
""")


def debug(msg):
    if DEBUG:
        print(f"[DEBUG] {msg}", file=sys.stderr)


def warn(msg):
    print(f"Warning: {msg}", file=sys.stderr)


def read_lines(stream):
    # Decode per line so a bad byte only stops the run where it occurs
    for line in stream:
        if stream.isfirstline():
            debug(f"Processing input: {stream.filename()}")
        yield line.decode("utf-8")


def preview(lines, offset):
    # Column numbers on one line, the first line's fields on the next
    for line in lines:
        fields = tokenize(line)
        debug(f"Preview line has {len(fields)} fields")
        print(",".join(str(i + offset) for i in range(len(fields))))
        print(",".join(fields))
        return


def cut_stream(lines, indices):
    for n, line in enumerate(lines):
        fields = tokenize(line)
        if n == 0 and indices and min(indices) >= len(fields):
            warn(f"none of the selected columns exist in the first line ({len(fields)} fields)")
        debug(f"Line {n}: {len(fields)} fields")
        yield select(fields, indices)


def build_parser():
    parser = argparse.ArgumentParser(prog="colcut", description="Like cut, but for CSVs")
    numbering = parser.add_mutually_exclusive_group()
    numbering.add_argument("-0", "--zero", dest="offset", action="store_const", const=0,
                           help="Zero-index columns. Ranges are half-open like [a, b)")
    numbering.add_argument("-1", "--one", dest="offset", action="store_const", const=1,
                           help="One-index columns (default). Ranges are closed like [a, b]")
    parser.set_defaults(offset=1)
    parser.add_argument("-p", "--preview", action="store_true",
                        help="Preview first line with column numbers")
    parser.add_argument("--debug", action="store_true", help="Print debug info to stderr")
    parser.add_argument("--help-spec", action="store_true", help="Show column spec help and exit")
    parser.add_argument("cols", nargs="?", help="Column indices to print")
    parser.add_argument("inputs", nargs="*", help="Input files (default: stdin)")
    return parser


def main(argv=None):
    global DEBUG

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.help_spec:
        print_spec_help()
        return 0

    DEBUG = args.debug

    inputs = list(args.inputs)
    if args.preview:
        # The spec is ignored here; a positional naming a real file is input
        if args.cols is not None and os.path.exists(args.cols):
            inputs.insert(0, args.cols)
        elif args.cols is not None:
            debug(f"Ignoring column spec '{args.cols}' in preview mode")
    elif args.cols is None:
        parser.error("the following arguments are required: cols")
    else:
        try:
            indices = parse(args.cols, args.offset)
        except ColumnSpecError as e:
            parser.error(str(e))
        debug(f"Output columns (zero-based): {indices}")

    count = 0
    try:
        with fileinput.input(files=inputs or ("-",), mode="rb") as stream:
            lines = read_lines(stream)
            if args.preview:
                preview(lines, args.offset)
                return 0
            for out in cut_stream(lines, indices):
                print(out)
                count += 1
    except BrokenPipeError:
        # Reader went away (e.g. `| head`); keep the interpreter from
        # complaining again when it flushes stdout on exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 0
    except (OSError, UnicodeDecodeError) as e:
        sys.stdout.flush()
        print(f"colcut: {e}", file=sys.stderr)
        return 1
    debug(f"Processed {count} lines")
    return 0


if __name__ == "__main__":
    sys.exit(main())
