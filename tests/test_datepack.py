import pytest

from codelessons.datepack import DateTime, pack_date_time, unpack_date_time


def test_source_example_round_trip():
    packed = pack_date_time(2024, 8, 19, 12 + 6, 38, 13)
    assert len(packed) == 5
    assert str(unpack_date_time(packed)) == "2024-08-19 18:38:13"


def test_str_pads_fields():
    assert str(DateTime(2024, 8, 19, 12 + 5, 47, 0)) == "2024-08-19 17:47:00"


def test_zero_packs_to_zero_bytes():
    assert pack_date_time(0, 0, 0, 0, 0, 0) == b"\x00" * 5


def test_maximum_fields_fill_every_bit():
    assert pack_date_time((1 << 14) - 1, 15, 31, 31, 63, 63) == b"\xff" * 5


@pytest.mark.parametrize(
    "fields",
    [
        (2024, 8, 19, 18, 38, 13),
        (1999, 12, 31, 23, 59, 59),
        (1, 1, 1, 0, 0, 0),
        (16383, 15, 31, 31, 63, 63),
        (2000, 2, 29, 12, 30, 45),
    ],
)
def test_round_trip(fields):
    assert unpack_date_time(pack_date_time(*fields)) == DateTime(*fields)


def test_year_in_low_bits():
    packed = pack_date_time(2024, 0, 0, 0, 0, 0)
    assert int.from_bytes(packed, "little") == 2024


def test_out_of_range_bits_are_dropped():
    assert pack_date_time(2024 + (1 << 14), 8 + 16, 19, 18, 38, 13) == pack_date_time(
        2024, 8, 19, 18, 38, 13
    )


def test_fields_do_not_overlap():
    combined = 0
    for position in range(6):
        fields = [0] * 6
        fields[position] = (1 << 14) - 1
        bits = int.from_bytes(pack_date_time(*fields), "little")
        assert combined & bits == 0
        combined |= bits
    assert combined == (1 << 40) - 1


@pytest.mark.parametrize("data", [b"", b"\x00" * 4, b"\x00" * 6])
def test_wrong_length_rejected(data):
    with pytest.raises(ValueError):
        unpack_date_time(data)