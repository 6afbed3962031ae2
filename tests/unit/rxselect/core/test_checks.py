"""Unit test methods for rxselect.core.utils module."""

from rxselect.core import first_member, fmap, ifnone


def test_ifnone():
    assert ifnone(val=True, default=False) is True
    assert ifnone(val=None, default=False) is False
    assert ifnone(val=0, default=10) == 0


def test_first_member_follows_the_given_order():
    assert first_member({"c", "b"}, ["a", "b", "c"]) == "b"
    assert first_member(["c"], ["a", "b", "c"]) == "c"


def test_first_member_falls_back_to_any_member():
    assert first_member({"z"}, ["a", "b"]) == "z"
    assert first_member(set(), ["a"], default="none") == "none"


def test_first_member_with_none_as_a_member():
    assert first_member({None, "b"}, ["b", None]) == "b"
    assert first_member({None}, ["b", None]) is None


def test_fmap():
    assert fmap(lambda v: v * 2, {"a": 1, "b": 2}) == {"a": 2, "b": 4}
    assert fmap(str, {}) == {}
