import operator

from joywork.generic import compare, top


def test_compare_default_ordering():
    assert compare(2, 1) == 1
    assert compare(1, 10) == -1
    assert compare(10, 10) == 0


def test_compare_custom_ordering():
    assert compare(2, 1, operator.gt) == -1
    assert compare(1, 2, operator.gt) == 1


def test_compare_strings_by_length():
    by_length = lambda a, b: len(a) < len(b)  # noqa: E731
    assert compare("abc", "xyz", by_length) == 0
    assert compare("a", "xyz", by_length) == -1


def test_top_nonempty():
    assert top([4, 5, 6]) == 6
    assert top("abc") == "c"


def test_top_empty_uses_factory():
    assert top([], int) == 0
    assert top([], str) == ""
    assert top([]) is None