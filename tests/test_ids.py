import pytest

from zorbworld.ids import Id


def test_default_is_zero():
    assert Id() == Id(0)


def test_next_increments():
    assert Id(3).next() == Id(4)
    assert Id(0).next().next() == Id(2)


def test_equality_and_hash_by_value():
    assert Id(7) == Id(7)
    assert hash(Id(7)) == hash(Id(7))
    assert len({Id(1), Id(1), Id(2)}) == 2


def test_repr_is_bare_value():
    assert repr(Id(42)) == "42"


def test_next_overflow_raises():
    with pytest.raises(OverflowError):
        Id(2**32 - 1).next()


def test_out_of_range_rejected():
    with pytest.raises(ValueError):
        Id(-1)
    with pytest.raises(ValueError):
        Id(2**32)