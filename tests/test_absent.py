"""Tests for absence tags and sentinel predicates."""

import msgspec
import pytest
from hypothesis import given

from maybe_chain.absent import Absent, absent_of, is_absent, is_present

from tests.strategies import present_values


class TestAbsentEnum:
    """Tests for the Absent enum."""

    def test_values(self):
        assert Absent.NULL.value == 'null'
        assert Absent.UNSET.value == 'unset'

    def test_from_string(self):
        assert Absent('null') is Absent.NULL
        assert Absent('unset') is Absent.UNSET

    def test_invalid_raises(self):
        with pytest.raises(ValueError):
            Absent('missing')

    def test_sentinels(self):
        assert Absent.NULL.sentinel is None
        assert Absent.UNSET.sentinel is msgspec.UNSET


class TestPredicates:
    """Tests for is_absent / is_present / absent_of."""

    @pytest.mark.parametrize('sentinel', [None, msgspec.UNSET])
    def test_sentinels_are_absent(self, sentinel):
        assert is_absent(sentinel)
        assert not is_present(sentinel)

    @pytest.mark.parametrize('falsy', [0, '', [], {}, False, 0.0])
    def test_falsy_values_are_present(self, falsy):
        """Only the two sentinels count as absence, not falsiness."""
        assert is_present(falsy)
        assert absent_of(falsy) is None

    def test_absent_of(self):
        assert absent_of(None) is Absent.NULL
        assert absent_of(msgspec.UNSET) is Absent.UNSET

    @given(present_values)
    def test_present_values(self, value):
        assert is_present(value)
        assert absent_of(value) is None
