"""Property-based tests for text normalization."""

from hypothesis import given
from hypothesis import strategies as st

from feed2text.text import collapse_whitespace, normalize_value, strip_tags


class TestTextProperties:
    """Property-based tests for the normalizer."""

    @given(st.text())
    def test_collapse_whitespace_is_idempotent(self, text):
        once = collapse_whitespace(text)

        assert collapse_whitespace(once) == once

    @given(st.text())
    def test_strip_tags_is_idempotent(self, text):
        once = strip_tags(text)

        assert strip_tags(once) == once

    @given(st.text())
    def test_collapsed_text_has_no_whitespace_runs(self, text):
        result = collapse_whitespace(text)

        assert "  " not in result
        assert "\n" not in result
        assert "\t" not in result

    @given(st.text(), st.booleans(), st.booleans())
    def test_normalized_value_is_trimmed(self, text, strip_html, remove_space):
        result = normalize_value(text, strip_html=strip_html, remove_space=remove_space)

        assert result == result.strip()

    @given(st.text())
    def test_normalized_value_is_tag_free(self, text):
        result = normalize_value(text)

        assert strip_tags(result) == result
