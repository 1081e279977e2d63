"""codefade - syntax highlighted code that cross-fades between themes."""

from codefade.code_block import CodeBlock
from codefade.code_error import CodeFadeError, CodeThemeError
from codefade.code_layout import CodeSize, DrawingSurface, TextMeasurer, draw_clusters, measure_clusters
from codefade.code_theme import CodeTheme
from codefade.code_token import CharColor, Cluster, Span, DEFAULT_RENDER_COLOR
from codefade.color_blender import ColorBlender, mix_hsl
from codefade.grapheme_splitter import split_graphemes, split_span, split_spans
from codefade.style_resolver import StyleResolver
from codefade.style_transition import (
    IdleState, StyleTransition, TransitionState, TransitioningState, easing_curve, linear
)
from codefade.token_builder import TokenBuilder
from codefade.token_merger import merge_tokens
from codefade.whitespace_normalizer import correct_whitespace


__version__ = "0.1"


__all__ = [
    "CharColor",
    "Cluster",
    "CodeBlock",
    "CodeFadeError",
    "CodeSize",
    "CodeTheme",
    "CodeThemeError",
    "ColorBlender",
    "DEFAULT_RENDER_COLOR",
    "DrawingSurface",
    "IdleState",
    "Span",
    "StyleResolver",
    "StyleTransition",
    "TextMeasurer",
    "TokenBuilder",
    "TransitionState",
    "TransitioningState",
    "correct_whitespace",
    "draw_clusters",
    "easing_curve",
    "linear",
    "measure_clusters",
    "merge_tokens",
    "mix_hsl",
    "split_graphemes",
    "split_span",
    "split_spans"
]
