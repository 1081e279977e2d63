"""Highlighted code that can transition between themes."""

import logging
from typing import Dict, List, Tuple

from syntax import ProgrammingLanguage, SyntaxTree, highlight_tree, parse_text

from codefade.code_layout import CodeSize, DrawingSurface, TextMeasurer, draw_clusters, measure_clusters
from codefade.code_theme import CodeTheme
from codefade.code_token import Cluster
from codefade.color_blender import ColorBlender
from codefade.grapheme_splitter import split_spans
from codefade.style_resolver import StyleResolver
from codefade.style_transition import EasingFunction, StyleTransition, TransitionState, linear
from codefade.token_builder import TokenBuilder
from codefade.token_merger import merge_tokens
from codefade.whitespace_normalizer import correct_whitespace


def _normalize_code(code: str) -> str:
    """Convert line endings to \\n and remove incidental indentation."""
    return correct_whitespace(code.replace('\r\n', '\n'))


class CodeBlock:
    """
    A block of source code, its language and its theme.

    Every derived value (the parse tree, the cluster stream for each theme, the final
    blended stream) is computed when first read and cached until one of the fields
    it depends on changes.
    """

    def __init__(
        self,
        theme: CodeTheme,
        code: str = "",
        language: ProgrammingLanguage = ProgrammingLanguage.JAVASCRIPT,
        dialect: str = "",
        fallback_color: str | None = None
    ) -> None:
        """
        Initialize the code block.

        Args:
            theme: Theme to highlight with
            code: Source code; line endings and indentation are normalized
            language: Language to parse the code as
            dialect: Grammar dialect, empty for the language's default
            fallback_color: Color for unclassified characters, None to use the theme's
        """
        self._theme = theme
        self._code = _normalize_code(code)
        self._language = language
        self._dialect = dialect
        self._fallback_color = fallback_color
        self._transition = StyleTransition()
        self._blender = ColorBlender()

        self._tree: SyntaxTree | None = None
        self._tree_valid = False
        self._highlighted: Dict[int, Tuple[CodeTheme, List[Cluster]]] = {}
        self._tokens: List[Cluster] | None = None

        self._logger = logging.getLogger("CodeBlock")

    @property
    def code(self) -> str:
        """The normalized source code."""
        return self._code

    def set_code(self, code: str) -> None:
        """
        Set the source code.

        Args:
            code: Source code; line endings and indentation are normalized before it is stored
        """
        code = _normalize_code(code)
        if code == self._code:
            return

        self._code = code
        self._invalidate_tree()

    @property
    def language(self) -> ProgrammingLanguage:
        """The language the code is parsed as."""
        return self._language

    def set_language(self, language: ProgrammingLanguage) -> None:
        """Set the language the code is parsed as."""
        if language == self._language:
            return

        self._language = language
        self._invalidate_tree()

    @property
    def dialect(self) -> str:
        """The grammar dialect."""
        return self._dialect

    def set_dialect(self, dialect: str) -> None:
        """Set the grammar dialect."""
        if dialect == self._dialect:
            return

        self._dialect = dialect
        self._invalidate_tree()

    @property
    def fallback_color(self) -> str | None:
        """Color override for unclassified characters."""
        return self._fallback_color

    def set_fallback_color(self, color: str | None) -> None:
        """
        Set the color for unclassified characters.

        Args:
            color: The color, or None to use each theme's own fallback color
        """
        if color == self._fallback_color:
            return

        self._fallback_color = color
        self._invalidate_highlights()

    @property
    def theme(self) -> CodeTheme:
        """The active theme."""
        return self._theme

    def set_theme(self, theme: CodeTheme) -> None:
        """
        Switch theme immediately, ending any running transition.

        Args:
            theme: The new theme
        """
        self._transition.stop()
        self._theme = theme
        self._tokens = None
        self._prune_highlights()

    @property
    def transition_state(self) -> TransitionState:
        """State of the theme transition."""
        return self._transition.state

    def tween_theme(self, theme: CodeTheme, duration_ms: float, easing: EasingFunction = linear) -> None:
        """
        Start a timed transition to a new theme.

        The new theme becomes the active theme at once; until the transition finishes
        tokens() blends its colors with those of the theme that was active before.  A
        transition that is already running is replaced.

        Args:
            theme: The theme to transition to
            duration_ms: Length of the transition
            easing: Timing curve applied to the elapsed fraction
        """
        old_theme = self._theme
        self._theme = theme
        self._transition.start(old_theme, duration_ms, easing)
        self._tokens = None
        self._prune_highlights()

    def advance_transition(self, delta_ms: float) -> bool:
        """
        Advance the running transition.

        Args:
            delta_ms: Time since the previous call

        Returns:
            True if the transition is still running
        """
        if not self._transition.is_active:
            return False

        running = self._transition.tick(delta_ms)
        self._tokens = None
        if not running:
            self._prune_highlights()

        return running

    def tokens(self) -> List[Cluster]:
        """
        Get the clusters to draw for the current code, theme and transition.

        Returns:
            Clusters in text order; empty if the code could not be parsed
        """
        if self._tokens is not None:
            return self._tokens

        new_clusters = self._highlight(self._theme)
        state = self._transition.state
        old_theme = self._transition.old_theme
        if old_theme is None:
            self._tokens = new_clusters
            return self._tokens

        old_clusters = self._highlight(old_theme)
        self._tokens = self._blender.blend(new_clusters, old_clusters, self._transition.progress)
        self._logger.debug("Blended %d clusters for %s", len(self._tokens), state)
        return self._tokens

    def desired_size(self, measurer: TextMeasurer) -> CodeSize:
        """
        Get the size needed to draw the code.

        Args:
            measurer: Font metrics to measure with

        Returns:
            The size; zero if there is nothing to draw
        """
        return measure_clusters(self.tokens(), measurer)

    def draw(self, surface: DrawingSurface) -> None:
        """
        Draw the code centered on the surface's origin.

        Args:
            surface: Surface to draw on
        """
        tokens = self.tokens()
        draw_clusters(tokens, surface, measure_clusters(tokens, surface))

    def _parsed(self) -> SyntaxTree | None:
        if self._tree_valid:
            return self._tree

        try:
            self._tree = parse_text(self._language, self._code, self._dialect)

        except Exception:
            self._logger.exception("Failed to parse %s code", self._language.name)
            self._tree = None

        self._tree_valid = True
        return self._tree

    def _highlight(self, theme: CodeTheme) -> List[Cluster]:
        cached = self._highlighted.get(id(theme))
        if cached is not None and cached[0] is theme:
            return cached[1]

        tree = self._parsed()
        clusters: List[Cluster] = []
        if tree is not None:
            fallback_color = self._fallback_color or theme.fallback_color
            builder = TokenBuilder(self._code, fallback_color, StyleResolver(theme))
            try:
                chars = builder.build(lambda callback: highlight_tree(tree, callback))
                clusters = split_spans(merge_tokens(chars))

            except Exception:
                self._logger.exception("Failed to highlight %s code with theme '%s'", self._language.name, theme.name)
                clusters = []

        self._highlighted[id(theme)] = (theme, clusters)
        return clusters

    def _prune_highlights(self) -> None:
        """Drop cached streams for themes that are no longer in use."""
        live = {id(self._theme)}
        old_theme = self._transition.old_theme
        if old_theme is not None:
            live.add(id(old_theme))

        self._highlighted = {key: value for key, value in self._highlighted.items() if key in live}

    def _invalidate_highlights(self) -> None:
        self._highlighted = {}
        self._tokens = None

    def _invalidate_tree(self) -> None:
        self._tree = None
        self._tree_valid = False
        self._invalidate_highlights()
