"""Removal of the incidental indentation that comes from embedding code in other source."""

import re

_BLANK_LINE = re.compile(r'^\s*$')
_LEADING_WHITESPACE = re.compile(r'^\s+')


def correct_whitespace(text: str) -> str:
    """
    Strip an incidental leading blank line and the indentation of the second line.

    If the first line has any non-whitespace content the text is returned unchanged.
    Otherwise the first line is dropped and the literal leading whitespace of the
    second line is removed from the start of every remaining line.  Lines that don't
    start with exactly that prefix are left alone.  This is not a dedent to the
    minimum indentation.

    Args:
        text: Source text

    Returns:
        The normalized text
    """
    lines = text.split('\n')
    if not _BLANK_LINE.match(lines[0]):
        return text

    if len(lines) == 1:
        return ''

    match = _LEADING_WHITESPACE.match(lines[1])
    indent = match.group(0) if match else ''
    return '\n'.join(line.removeprefix(indent) for line in lines[1:])
