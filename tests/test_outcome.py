"""Tests for the Just / Nothing outcome types."""

import msgspec
import pytest

from maybe_chain.absent import Absent
from maybe_chain.outcome import NOTHING, UNSET_NOTHING, Just, Nothing, classify


class TestJust:
    """Tests for Just."""

    def test_wraps_value(self):
        assert Just(42).value == 42
        assert Just(42).raw() == 42

    def test_can_wrap_none(self):
        """Just(None) is present, not Nothing."""
        just = Just(None)
        assert just.is_just()
        assert just != NOTHING

    def test_is_frozen(self):
        just = Just(42)
        with pytest.raises(AttributeError):
            just.value = 100  # type: ignore[misc]

    def test_equality(self):
        assert Just(1) == Just(1)
        assert Just(1) != Just(2)


class TestNothing:
    """Tests for Nothing."""

    def test_default_reason_is_canonical(self):
        assert Nothing().reason is Absent.NULL
        assert Nothing() == NOTHING

    def test_raw_returns_sentinel(self):
        assert NOTHING.raw() is None
        assert UNSET_NOTHING.raw() is msgspec.UNSET

    def test_tags_are_distinct(self):
        assert NOTHING != UNSET_NOTHING

    def test_predicates(self):
        assert NOTHING.is_nothing()
        assert not NOTHING.is_just()


class TestClassify:
    """Tests for classify()."""

    def test_present(self):
        assert classify(0) == Just(0)
        assert classify('') == Just('')

    def test_none(self):
        assert classify(None) == NOTHING

    def test_unset(self):
        assert classify(msgspec.UNSET) == UNSET_NOTHING

    def test_does_not_unwrap_outcomes(self):
        """An outcome passed as a raw value is just a payload."""
        assert classify(NOTHING) == Just(NOTHING)
