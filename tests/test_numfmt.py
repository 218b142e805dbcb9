import pytest

from codelessons.numfmt import format_integer

VALUES = [0, 7, -7, 999, 1000, -1000, 1005, 123456, -123456789777666555, 2**63 - 1]


def test_source_example():
    assert format_integer(-123_456_789_777_666_555) == "-123,456,789,777,666,555"


def test_zero():
    assert format_integer(0) == "0"


def test_inner_groups_are_zero_padded():
    assert format_integer(1005) == "1,005"


@pytest.mark.parametrize("value", VALUES)
def test_commas_removed_gives_plain_number(value):
    assert format_integer(value).replace(",", "") == str(value)


@pytest.mark.parametrize("value", VALUES)
def test_group_sizes(value):
    groups = format_integer(value).lstrip("-").split(",")
    assert 1 <= len(groups[0]) <= 3
    assert all(len(group) == 3 for group in groups[1:])


@pytest.mark.parametrize("value", VALUES)
def test_sign_only_for_negatives(value):
    assert format_integer(value).startswith("-") == (value < 0)


@pytest.mark.parametrize("value", [1.5, "12", True, None])
def test_non_integers_rejected(value):
    with pytest.raises(TypeError):
        format_integer(value)