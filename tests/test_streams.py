import pytest

from joywork.streams import InputMemoryStream, OutputMemoryStream, StreamOverflowError


def test_initial_state():
    stream = OutputMemoryStream()
    assert stream.capacity == 32
    assert len(stream) == 0
    assert stream.getvalue() == b""


def test_uint32_little_endian_layout():
    stream = OutputMemoryStream()
    stream.write_uint32(1)
    assert stream.getvalue() == b"\x01\x00\x00\x00"


def test_write_collects_bytes_in_order():
    stream = OutputMemoryStream()
    stream.write(b"abc")
    stream.write(bytearray(b"de"))
    assert stream.getvalue() == b"abcde"
    assert len(stream) == 5


def test_growth_doubles_capacity():
    stream = OutputMemoryStream()
    stream.write(b"x" * 32)
    assert stream.capacity == 32
    stream.write(b"y")
    assert stream.capacity == 64
    assert stream.getvalue() == b"x" * 32 + b"y"


def test_growth_to_needed_size_when_larger():
    stream = OutputMemoryStream()
    payload = b"z" * 100
    stream.write(payload)
    assert stream.capacity == len(payload)
    assert stream.getvalue() == payload


def test_round_trip_integers():
    out = OutputMemoryStream()
    values = [0, 7, 2**32 - 1]
    for value in values:
        out.write_uint32(value)
    out.write_int32(-12345)
    reader = InputMemoryStream(out.getvalue())
    assert [reader.read_uint32() for _ in values] == values
    assert reader.read_int32() == -12345
    assert reader.remaining == 0


def test_write_rejects_out_of_range():
    stream = OutputMemoryStream()
    with pytest.raises(ValueError):
        stream.write_uint32(-1)
    with pytest.raises(ValueError):
        stream.write_int32(2**31)
    assert len(stream) == 0


def test_read_tracks_remaining():
    reader = InputMemoryStream(b"hello world")
    assert reader.read(5) == b"hello"
    assert reader.remaining == len(b" world")
    assert reader.read(6) == b" world"
    assert reader.remaining == 0


def test_overflow_raises_and_keeps_position():
    reader = InputMemoryStream(b"abc")
    with pytest.raises(StreamOverflowError):
        reader.read(4)
    assert reader.read(3) == b"abc"


def test_read_int_from_short_buffer():
    reader = InputMemoryStream(b"\x01\x02")
    with pytest.raises(StreamOverflowError):
        reader.read_uint32()
    assert reader.remaining == 2


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        InputMemoryStream(b"abc").read(-1)