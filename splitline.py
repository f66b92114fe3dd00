#!/usr/bin/env python3

# Quote-aware line splitting and column selection for colcut.

from enum import Enum


class QuoteState(Enum):
    NORMAL = "normal"
    SINGLE_QUOTE = "single_quote"
    DOUBLE_QUOTE = "double_quote"
    SINGLE_ESCAPE = "single_escape"
    DOUBLE_ESCAPE = "double_escape"


# (state, char) -> next state
TRANSITIONS = {
    (QuoteState.NORMAL, "'"): QuoteState.SINGLE_QUOTE,
    (QuoteState.SINGLE_QUOTE, "'"): QuoteState.NORMAL,
    (QuoteState.NORMAL, '"'): QuoteState.DOUBLE_QUOTE,
    (QuoteState.DOUBLE_QUOTE, '"'): QuoteState.NORMAL,
    (QuoteState.SINGLE_QUOTE, "\\"): QuoteState.SINGLE_ESCAPE,
    (QuoteState.DOUBLE_QUOTE, "\\"): QuoteState.DOUBLE_ESCAPE,
}

# Escape states consume any single character
ANY_CHAR = {
    QuoteState.SINGLE_ESCAPE: QuoteState.SINGLE_QUOTE,
    QuoteState.DOUBLE_ESCAPE: QuoteState.DOUBLE_QUOTE,
}


def next_state(state, c):
    if state in ANY_CHAR:
        return ANY_CHAR[state]
    return TRANSITIONS.get((state, c), state)


def tokenize(line):
    """Split a line on commas that are outside single or double quotes.

    Quotes and backslashes are kept in the returned fields; they only decide
    which commas count as separators. Joining the result with "," gives back
    the stripped line.
    """
    line = line.strip()
    fields = []
    state = QuoteState.NORMAL
    field_start = 0
    for i, c in enumerate(line):
        if state is QuoteState.NORMAL and c == ",":
            fields.append(line[field_start:i])
            field_start = i + 1
            continue
        state = next_state(state, c)
    fields.append(line[field_start:])
    return fields


def select(fields, indices):
    # Ragged rows: anything past the end of the row is an empty field
    out = []
    for i in indices:
        out.append(fields[i] if i < len(fields) else "")
    return ",".join(out)


def cut_line(line, indices):
    return select(tokenize(line), indices)
