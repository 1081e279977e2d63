"""
Tests for the code block pipeline.
"""
import logging

import pytest

from codefade.code_block import CodeBlock
from codefade.code_layout import CodeSize, TextMeasurer
from codefade.code_theme import CodeTheme
from codefade.style_transition import IdleState, TransitioningState
from syntax import ProgrammingLanguage


class FixedMeasurer(TextMeasurer):
    """Every character is 10 wide and lines are 20 high."""

    def measure_text(self, text):
        return 10.0 * len(text)

    def line_height(self):
        return 20.0


FALLBACK = "#c9d1d9"


class TestCodeBlockTokens:
    """Test the cluster stream for a single theme."""

    def test_javascript_clusters(self, simple_theme):
        """Test classification, fallback coloring and cluster splitting together."""
        block = CodeBlock(simple_theme, "const x = 1;")
        tokens = block.tokens()
        assert [(c.text, c.color) for c in tokens] == [
            ("const", "#ff0000"),
            (" ", FALLBACK),
            ("x", "#0000ff"),
            (" ", FALLBACK),
            ("=", FALLBACK),
            (" ", FALLBACK),
            ("1", "#ffff00"),
            (";", FALLBACK),
        ]

    def test_text_is_preserved(self, simple_theme):
        """Test that the clusters concatenate back to the normalized code."""
        code = "function f(a) {\n  return 'x' + a; // done\n}\n"
        block = CodeBlock(simple_theme, code)
        assert "".join(c.text for c in block.tokens()) == code

    def test_code_is_normalized(self, simple_theme):
        """Test that incidental indentation is removed."""
        block = CodeBlock(simple_theme, "\n    let a;\n    let b;")
        assert block.code == "let a;\nlet b;"

    def test_empty_code(self, simple_theme):
        """Test that empty code gives no clusters and no size."""
        block = CodeBlock(simple_theme, "")
        assert block.tokens() == []
        assert block.desired_size(FixedMeasurer()) == CodeSize(0.0, 0.0)

    def test_fallback_override(self, simple_theme):
        """Test that the block's fallback color beats the theme's."""
        block = CodeBlock(simple_theme, "a = b", fallback_color="#123456")
        assert block.tokens()[2].color == "#123456"

    def test_parse_failure_gives_empty_stream(self, simple_theme, caplog):
        """Test that a language without a parser logs an error and draws nothing."""
        block = CodeBlock(simple_theme, "x", language=ProgrammingLanguage.UNKNOWN)
        with caplog.at_level(logging.ERROR, logger="CodeBlock"):
            assert block.tokens() == []

        assert any(r.levelno == logging.ERROR for r in caplog.records)

    def test_tokens_are_cached(self, simple_theme):
        """Test that reading twice without changes gives the same stream."""
        block = CodeBlock(simple_theme, "let a")
        assert block.tokens() is block.tokens()

    def test_changes_invalidate(self, simple_theme):
        """Test that code, language and dialect changes are picked up."""
        block = CodeBlock(simple_theme, "let a")
        first = block.tokens()
        block.set_code("let b")
        assert block.tokens() is not first
        assert block.tokens()[-1].text == "b"

        block.set_code("interface")
        assert block.tokens()[0].color == "#0000ff"
        block.set_dialect("ts")
        assert block.tokens()[0].color == "#ff0000"

        block.set_language(ProgrammingLanguage.JSON)
        assert block.tokens()[0].color == FALLBACK

    def test_crlf_line_endings(self, simple_theme):
        """Test that CR LF line endings are stored and laid out as line breaks."""
        block = CodeBlock(simple_theme, "let a;\r\nlet b;")
        assert block.code == "let a;\nlet b;"
        assert block.desired_size(FixedMeasurer()) == CodeSize(60.0, 40.0)

        block.set_code("ab\r\nabcd\r\n")
        assert block.code == "ab\nabcd\n"

    def test_desired_size(self, simple_theme):
        """Test the size of a two line block."""
        block = CodeBlock(simple_theme, "ab\nabcd")
        assert block.desired_size(FixedMeasurer()) == CodeSize(40.0, 40.0)


class TestCodeBlockTransitions:
    """Test theme switching and transitions."""

    def test_set_theme(self, simple_theme, other_theme):
        """Test that switching theme recolors immediately."""
        block = CodeBlock(simple_theme, "let a")
        block.set_theme(other_theme)
        assert block.theme is other_theme
        assert block.tokens()[0].color == "#000080"

    def test_transition_runs_from_old_to_new(self, simple_theme, other_theme):
        """Test the colors at the start, middle and end of a transition."""
        block = CodeBlock(simple_theme, "let a")
        block.tween_theme(other_theme, 100)
        assert isinstance(block.transition_state, TransitioningState)
        assert block.transition_state.old_theme is simple_theme
        assert block.tokens()[0].color == "#ff0000"

        assert block.advance_transition(50)
        middle = block.tokens()[0].color
        assert middle not in ("#ff0000", "#000080")

        assert not block.advance_transition(50)
        assert block.transition_state == IdleState()
        assert block.tokens()[0].color == "#000080"

    def test_transition_keeps_text(self, simple_theme, other_theme):
        """Test that blending never changes the clusters' text."""
        block = CodeBlock(simple_theme, "const s = 'hi';")
        texts = [c.text for c in block.tokens()]
        block.tween_theme(other_theme, 100)
        block.advance_transition(30)
        assert [c.text for c in block.tokens()] == texts

    def test_zero_duration(self, simple_theme, other_theme):
        """Test that a zero length transition switches immediately."""
        block = CodeBlock(simple_theme, "let a")
        block.tween_theme(other_theme, 0)
        assert block.transition_state == IdleState()
        assert block.tokens()[0].color == "#000080"

    def test_set_theme_ends_transition(self, simple_theme, other_theme):
        """Test that a direct theme change abandons a running transition."""
        block = CodeBlock(simple_theme, "let a")
        block.tween_theme(other_theme, 100)
        block.set_theme(simple_theme)
        assert block.transition_state == IdleState()
        assert block.tokens()[0].color == "#ff0000"

    def test_reentrant_transition(self, simple_theme, other_theme):
        """Test that a new transition starts from the theme active at that moment."""
        third = CodeTheme(name="third", rules={"tok-keyword": "#00ffff"})
        block = CodeBlock(simple_theme, "let a")
        block.tween_theme(other_theme, 100)
        block.advance_transition(50)
        block.tween_theme(third, 100)
        assert block.transition_state.old_theme is other_theme
        assert block.tokens()[0].color == "#000080"

    def test_advance_when_idle(self, simple_theme):
        """Test that advancing without a transition does nothing."""
        block = CodeBlock(simple_theme, "let a")
        assert not block.advance_transition(16)

    @pytest.mark.parametrize("progress_ms", [0, 25, 75])
    def test_blend_lengths_match(self, simple_theme, other_theme, progress_ms):
        """Test that the blended stream has one cluster per cluster of the new theme."""
        block = CodeBlock(simple_theme, "let a = [1, 2];")
        count = len(block.tokens())
        block.tween_theme(other_theme, 100)
        block.advance_transition(progress_ms)
        assert len(block.tokens()) == count
