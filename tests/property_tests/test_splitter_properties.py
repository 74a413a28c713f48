"""
Property-Based Tests for the Bundle Splitter

For any text and any non-empty delimiter, split() must produce one more
variant than there are delimiter occurrences, and joining the variants
with the delimiter must reproduce the text exactly.
"""

from hypothesis import given, strategies as st, assume, settings

from docbundle.errors import InvalidArgumentError
from docbundle.splitter import count_occurrences, join, make_delimiter, split


delimiters = st.one_of(
    st.text(min_size=1, max_size=5),
    st.text(alphabet="0123456789abcdef", min_size=1, max_size=8).map(make_delimiter),
)

# Small alphabet so delimiters actually occur in generated text
bundle_text = st.text(alphabet="ab<|>-\n\r é", max_size=60)


class TestSplitterProperties:

    @given(text=bundle_text, delimiter=delimiters)
    @settings(max_examples=200)
    def test_round_trip(self, text, delimiter):
        """Joining the variants with the delimiter reproduces the bundle."""
        assert delimiter.join(split(text, delimiter)) == text

    @given(text=bundle_text, delimiter=delimiters)
    @settings(max_examples=200)
    def test_count_law(self, text, delimiter):
        """k occurrences give k + 1 variants."""
        assert len(split(text, delimiter)) == count_occurrences(text, delimiter) + 1

    @given(text=bundle_text, delimiter=delimiters)
    def test_no_variant_contains_delimiter(self, text, delimiter):
        assert all(delimiter not in variant for variant in split(text, delimiter))

    @given(text=bundle_text, delimiter=delimiters)
    def test_deterministic(self, text, delimiter):
        assert split(text, delimiter) == split(text, delimiter)

    @given(text=bundle_text, delimiter=delimiters)
    def test_no_occurrence_returns_whole_text(self, text, delimiter):
        assume(delimiter not in text)
        assert split(text, delimiter) == (text,)

    @given(
        variants=st.lists(st.text(alphabet="ab\n é", max_size=20), min_size=1, max_size=6),
        suffix=st.text(alphabet="0123456789abcdef", min_size=1, max_size=8),
    )
    def test_split_inverts_join(self, variants, suffix):
        """Variants without markup characters always survive a join/split cycle."""
        delimiter = make_delimiter(suffix)
        assert split(join(variants, delimiter), delimiter) == tuple(variants)

    @given(
        variants=st.lists(st.text(alphabet="ab", max_size=4), min_size=1, max_size=4),
        delimiter=st.text(alphabet="ab", min_size=1, max_size=3),
    )
    def test_join_output_always_splits_back(self, variants, delimiter):
        """join() either refuses or produces a bundle that splits back unchanged."""
        try:
            bundle = join(variants, delimiter)
        except InvalidArgumentError:
            return
        assert split(bundle, delimiter) == tuple(variants)

    @given(text=bundle_text)
    def test_empty_delimiter_always_rejected(self, text):
        try:
            split(text, "")
        except InvalidArgumentError:
            pass
        else:
            raise AssertionError("empty delimiter was accepted")
