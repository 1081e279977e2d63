"""Merging of per-character colors into same-colored spans."""

from typing import List, Sequence

from codefade.code_token import CharColor, Span


def merge_tokens(chars: Sequence[CharColor]) -> List[Span]:
    """
    Join consecutive characters with the same color.

    Args:
        chars: Per-character colors in text order

    Returns:
        Spans in text order; no two adjacent spans share a color
    """
    spans: List[Span] = []
    for char in chars:
        if spans and spans[-1].color == char.color:
            spans[-1].text += char.text
            continue

        spans.append(Span(text=char.text, color=char.color))

    return spans
