"""Tests for HTML highlighting of LMC source and language routing."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lmcmode.config import HighlightConfig, highlight_config_context
from lmcmode.highlighting import LmcHighlighter, highlight
from lmcmode.stream import split_lines


class TestLmcHighlighter:
    """Rendering of LMC source."""

    def test_spans_per_token(self) -> None:
        html = LmcHighlighter().highlight("LOOP LDA X", "lmc")
        assert html == (
            '<pre class="lmc"><code>'
            '<span class="cm-link">LOOP</span> '
            '<span class="cm-keyword">LDA</span> '
            '<span class="cm-variable">X</span>'
            "</code></pre>"
        )

    def test_style_names(self) -> None:
        html = LmcHighlighter().highlight("X DAT 5\n     OUT", "lmc")
        assert '<span class="cm-def">DAT</span>' in html
        assert '<span class="cm-number">5</span>' in html
        assert '<span class="cm-string">OUT</span>' in html

    def test_escapes_comments(self) -> None:
        html = LmcHighlighter().highlight("<b>&", "lmc")
        assert '<span class="cm-comment">&lt;b&gt;&amp;</span>' in html

    def test_state_carries_across_lines(self) -> None:
        html = LmcHighlighter().highlight("     BRA\nTOP", "lmc")
        assert '<span class="cm-link">TOP</span>' in html

    def test_preserves_whitespace(self) -> None:
        html = LmcHighlighter().highlight("\tHLT  ", "lmc")
        assert '<code>\t<span class="cm-keyword">HLT</span>  </code>' in html

    def test_line_numbers_and_emphasis(self) -> None:
        html = LmcHighlighter().highlight("INP\nOUT", "lmc", hl_lines=[2], show_linenos=True)
        lines = html.removeprefix('<pre class="lmc"><code>').removesuffix("</code></pre>").split("\n")
        assert lines[0] == '<span class="lineno">1</span><span class="cm-string">INP</span>'
        assert lines[1] == (
            '<span class="hll"><span class="lineno">2</span>'
            '<span class="cm-string">OUT</span></span>'
        )

    def test_config_prefix_and_wrapper(self) -> None:
        with highlight_config_context(HighlightConfig(class_prefix="lmc-", wrap_class="asm")):
            html = LmcHighlighter().highlight("HLT")
        assert html == '<pre class="asm"><code><span class="lmc-keyword">HLT</span></code></pre>'

    @pytest.mark.parametrize("language", ["lmc", "lmc-asm", "littlemancomputer", "text/x-lmc"])
    def test_supports_aliases(self, language: str) -> None:
        assert LmcHighlighter().supports_language(language)

    def test_does_not_support_others(self) -> None:
        assert not LmcHighlighter().supports_language("python")

    @given(st.text(alphabet="LDASTOBRAHLT DATX0123<&>;\t\n", max_size=120))
    @settings(max_examples=100)
    def test_text_round_trips_through_markup(self, source: str) -> None:
        """Stripping the tags and unescaping gives back every line."""
        import html as html_module
        import re

        rendered = LmcHighlighter().highlight(source, "lmc")
        body = rendered.removeprefix('<pre class="lmc"><code>').removesuffix("</code></pre>")
        text = html_module.unescape(re.sub(r"<[^>]+>", "", body))
        assert text == "\n".join(split_lines(source))


class TestRouting:
    """Module-level highlight() dispatch."""

    @pytest.mark.parametrize("language", ["lmc", "lmc-asm", "littlemancomputer", "text/x-lmc"])
    def test_lmc_languages_use_lmc_highlighter(self, language: str) -> None:
        assert 'class="cm-keyword"' in highlight("HLT", language)

    def test_language_defaults_to_lmc(self) -> None:
        assert highlight("HLT") == highlight("HLT", "lmc")

    def test_plain_fallback(self) -> None:
        assert highlight("a < b", "python") == '<pre><code class="language-python">a &lt; b</code></pre>'
        assert highlight("x", "") == "<pre><code>x</code></pre>"

    def test_fallback_escapes_language(self) -> None:
        assert highlight("x", '"><b>') == '<pre><code class="language-&quot;&gt;&lt;b&gt;">x</code></pre>'


class TestLineSplitting:
    """Lines break only where an editor breaks them."""

    def test_form_feed_stays_on_its_line(self) -> None:
        html = LmcHighlighter().highlight("INP\x0cOUT", "lmc", show_linenos=True)
        assert '<span class="lineno">2</span>' not in html

    def test_carriage_returns(self) -> None:
        html = LmcHighlighter().highlight("INP\rOUT\r\nHLT", "lmc", show_linenos=True)
        assert '<span class="lineno">3</span><span class="cm-keyword">HLT</span>' in html

    def test_zero_tab_size_rejected_before_rendering(self) -> None:
        with pytest.raises(ValueError, match="tab_size"):
            HighlightConfig(tab_size=0)
        with highlight_config_context(HighlightConfig(tab_size=1)):
            assert '<span class="cm-keyword">HLT</span>' in highlight("\tHLT", "lmc")
