"""
Splitting of colored spans into drawable clusters.

Spans are first split into grapheme clusters so that multi-code-point characters
(emoji sequences, combining marks) are never torn apart.  Runs of non-space
graphemes are then joined back together so the renderer can draw ligatures, while
whitespace graphemes stay on their own.
"""

import re
from typing import List, Sequence

from PySide6.QtCore import QTextBoundaryFinder

from codefade.code_token import Cluster, Span

_WHITESPACE = re.compile(r'\s')


def split_graphemes(text: str) -> List[str]:
    """
    Split text into user-perceived characters.

    Args:
        text: Text to split

    Returns:
        Grapheme clusters in order; joining them gives back the text
    """
    if not text:
        return []

    # Qt reports boundaries in UTF-16 code units, which differ from Python string
    # indices for characters outside the BMP.
    utf16 = text.encode('utf-16-le', 'surrogatepass')
    finder = QTextBoundaryFinder(QTextBoundaryFinder.BoundaryType.Grapheme, text)
    graphemes: List[str] = []
    start = 0
    while True:
        end = finder.toNextBoundary()
        if end == -1:
            break

        if end > start:
            graphemes.append(utf16[start * 2:end * 2].decode('utf-16-le', 'surrogatepass'))
            start = end

    if start * 2 < len(utf16):
        graphemes.append(utf16[start * 2:].decode('utf-16-le', 'surrogatepass'))

    return graphemes


def is_whitespace_cluster(text: str) -> bool:
    """True if a grapheme cluster contains whitespace."""
    return _WHITESPACE.search(text) is not None


def split_span(span: Span) -> List[Cluster]:
    """
    Split one span into drawable clusters, all with the span's color.

    Args:
        span: The span to split

    Returns:
        Whitespace graphemes as single clusters, with each run of non-space
        graphemes between them joined into one cluster
    """
    clusters: List[Cluster] = []
    after_whitespace = True
    for grapheme in split_graphemes(span.text):
        if is_whitespace_cluster(grapheme):
            clusters.append(Cluster(text=grapheme, color=span.color))
            after_whitespace = True
            continue

        if after_whitespace:
            clusters.append(Cluster(text=grapheme, color=span.color))
            after_whitespace = False
            continue

        clusters[-1].text += grapheme

    return clusters


def split_spans(spans: Sequence[Span]) -> List[Cluster]:
    """
    Split every span into drawable clusters.

    Clusters never cross span boundaries, so each keeps the color of its span.

    Args:
        spans: Same-colored spans in text order

    Returns:
        Clusters in text order
    """
    clusters: List[Cluster] = []
    for span in spans:
        clusters.extend(split_span(span))

    return clusters
