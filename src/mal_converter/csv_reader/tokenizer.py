"""Line tokenizer for reading-list CSV rows.

Splits a single line on unquoted commas with a two-state scanner
(outside / inside double quotes). Quote characters are left in the
field text and removed afterwards by ``strip_wrapping_quotes``.

Known limitation: the quote state flips on every ``"`` character, so an
unmatched quote swallows the remainder of the line into one field, and a
quoted value can never continue on the next line. Use the header layout
in ``reader`` for input like that.
"""

from collections.abc import Sequence

from ..shared.models import RAW_ROW_COLUMNS, RawRow

QUOTE = '"'
SEPARATOR = ","


def split_csv_line(line: str) -> list[str]:
    """Split one CSV line into trimmed fields.

    Args:
        line: A single line of text, with or without its line terminator

    Returns:
        Fields in column order. An empty line yields a single empty field.

    Example:
        >>> split_csv_line('1,"Title, With Comma",Reading')
        ['1', '"Title, With Comma"', 'Reading']
    """
    fields: list[str] = []
    buffer: list[str] = []
    in_quotes = False

    for char in line.rstrip("\r\n"):
        if char == QUOTE:
            in_quotes = not in_quotes
            buffer.append(char)
        elif char == SEPARATOR and not in_quotes:
            fields.append("".join(buffer).strip())
            buffer = []
        else:
            buffer.append(char)

    fields.append("".join(buffer).strip())
    return fields


def strip_wrapping_quotes(value: str) -> str:
    """Trim a field and remove one pair of surrounding double quotes.

    Doubled quotes inside a wrapped value (``""``) collapse to one.
    Lone leading or trailing quotes are removed as well.
    """
    value = value.strip()
    wrapped = len(value) >= 2 and value.startswith(QUOTE) and value.endswith(QUOTE)

    if value.startswith(QUOTE):
        value = value[1:]
    if value.endswith(QUOTE):
        value = value[:-1]

    if wrapped:
        value = value.replace(QUOTE * 2, QUOTE)
    return value


def to_raw_row(fields: Sequence[str], line_number: int | None = None) -> RawRow:
    """Assign fields to RawRow columns by position.

    Missing trailing columns become empty strings; extra columns are ignored.
    """
    values = {
        column: strip_wrapping_quotes(fields[index]) if index < len(fields) else ""
        for index, column in enumerate(RAW_ROW_COLUMNS)
    }
    return RawRow(**values, line_number=line_number)
