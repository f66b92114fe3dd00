#!/usr/bin/env python3

# Column spec parsing for colcut: "1,3,5-7" -> zero-based column indices.

import re

DIGITS = re.compile(r'[0-9]+')

# Ranges are expanded eagerly, so cap how many columns one range may name
MAX_RANGE = 1000000


class ColumnSpecError(ValueError):
    """A column spec the user typed could not be parsed."""

    def __init__(self, elem, reason):
        self.elem = elem
        self.reason = reason
        super().__init__(f"invalid column spec '{elem}': {reason}")


def parse_int(text, elem, what):
    if not DIGITS.fullmatch(text):
        raise ColumnSpecError(elem, f"{what} is not an integer")
    return int(text)


def parse_range(elem, offset):
    parts = elem.split('-')
    if len(parts) != 2:
        raise ColumnSpecError(elem, f"invalid range, wrong part count ({len(parts)} parts)")
    a = parse_int(parts[0], elem, "start index")
    b = parse_int(parts[1], elem, "end index")
    if a < offset:
        raise ColumnSpecError(elem, f"start index must be at least {offset}")
    if offset == 0 and a >= b:
        raise ColumnSpecError(elem, f"overlapping end-points [{a}, {b})")
    if offset == 1 and a > b:
        raise ColumnSpecError(elem, f"overlapping end-points [{a}, {b}]")
    if b + offset - a > MAX_RANGE:
        raise ColumnSpecError(elem, f"range covers more than {MAX_RANGE} columns")
    return [i - offset for i in range(a, b + offset)]


def parse(spec, offset=1):
    """Parse a column spec into a list of zero-based column indices.

    ``offset`` is the number of the first column: 1 (default) makes ranges
    closed like [a, b], 0 makes them half-open like [a, b). Order and
    duplicates are kept, so "3,1-2,3" is a valid request for four columns.

    Raises ColumnSpecError for a malformed spec and ValueError for an offset
    other than 0 or 1.
    """
    if offset not in (0, 1):
        raise ValueError(f"Invalid offset, {offset}")

    indices = []
    for elem in spec.split(','):
        elem = elem.strip()
        if '-' in elem:
            indices.extend(parse_range(elem, offset))
            continue
        i = parse_int(elem, elem, "index")
        if i < offset:
            raise ColumnSpecError(elem, f"index must be at least {offset}")
        indices.append(i - offset)
    return indices
