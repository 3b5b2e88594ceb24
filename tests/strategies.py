"""Hypothesis strategies for property-based testing of maybe-chain types."""

import msgspec
from hypothesis import strategies as st

# Basic value strategies
integers = st.integers()
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()

# Values that are never absence sentinels (no NaN, which breaks equality)
present_values = st.one_of(
    integers,
    texts,
    booleans,
    st.lists(integers, max_size=10),
    st.dictionaries(texts, integers, max_size=5),
)

# The two absence sentinels
sentinels = st.sampled_from([None, msgspec.UNSET])

# Anything from_value accepts
maybe_values = st.one_of(present_values, sentinels)

# Records for extend/assign
records = st.dictionaries(st.text(min_size=1, max_size=10), integers, max_size=5)
