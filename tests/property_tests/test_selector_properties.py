"""
Property-Based Tests for the Variant Selector

For any non-empty sequence of variants, the selector returns one of the
input elements itself, and an index outside the sequence is always an
error rather than a fallback.
"""

import pytest
from hypothesis import given, strategies as st

from docbundle.errors import OutOfRangeError
from docbundle.selector import SelectionPolicy, parse_policy, resolve_index, select


variant_lists = st.lists(st.text(max_size=10), min_size=1, max_size=8)

policies = st.one_of(
    st.just(SelectionPolicy.first()),
    st.just(SelectionPolicy.last()),
    st.integers(min_value=0, max_value=7).map(SelectionPolicy.at),
)


class TestSelectorProperties:

    @given(variants=variant_lists, policy=policies)
    def test_selection_is_identity(self, variants, policy):
        """The returned value is the very element at the resolved ordinal."""
        try:
            ordinal = resolve_index(len(variants), policy)
        except OutOfRangeError:
            with pytest.raises(OutOfRangeError):
                select(variants, policy)
            return
        assert select(variants, policy) is variants[ordinal]

    @given(variants=variant_lists)
    def test_first_and_last(self, variants):
        assert select(variants, SelectionPolicy.first()) is variants[0]
        assert select(variants, SelectionPolicy.last()) is variants[-1]

    @given(variants=variant_lists, index=st.integers(min_value=0, max_value=20))
    def test_index_in_range_iff_selectable(self, variants, index):
        policy = SelectionPolicy.at(index)
        if index < len(variants):
            assert select(variants, policy) is variants[index]
        else:
            with pytest.raises(OutOfRangeError) as exc_info:
                select(variants, policy)
            assert exc_info.value.count == len(variants)

    @given(variants=variant_lists, index=st.integers(max_value=-1))
    def test_negative_index_never_wraps(self, variants, index):
        with pytest.raises(OutOfRangeError):
            select(variants, SelectionPolicy.at(index))

    @given(policy=policies)
    def test_str_parses_back(self, policy):
        assert parse_policy(str(policy)) == policy

    @given(
        index=st.integers(min_value=0, max_value=1000),
        spelling=st.sampled_from(["index({})", "INDEX( {} )", "index:{}", " index {} "]),
    )
    def test_index_spellings(self, index, spelling):
        assert parse_policy(spelling.format(index)) == SelectionPolicy.at(index)
