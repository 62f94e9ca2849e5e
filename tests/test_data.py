import pytest

from pdfconform.data import Data


def test_round_trip_bytes():
    d = Data(b"\x00\x01abc")
    assert d.as_bytes() == b"\x00\x01abc"
    assert bytes(d) == b"\x00\x01abc"
    assert len(d) == 5


def test_copies_mutable_input():
    buf = bytearray(b"hello")
    d = Data(buf)
    buf[0] = ord("j")
    assert d.as_bytes() == b"hello"


def test_memoryview_input():
    assert Data(memoryview(b"xyz")).as_bytes() == b"xyz"


def test_wrap_data():
    d = Data(b"abc")
    assert Data(d) == d


def test_equality_and_hash_by_content():
    a = Data(b"same")
    b = Data(bytearray(b"same"))
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, Data(b"other")}) == 2
    assert Data(b"x") != Data(b"y")


def test_not_equal_to_plain_bytes():
    assert (Data(b"abc") == b"abc") is False


def test_repr_hides_content():
    assert repr(Data(b"secret-bytes")) == "Data {..}"


def test_default_is_empty():
    assert Data().as_bytes() == b""


@pytest.mark.parametrize("bad", [5, "text", [1, 2], None])
def test_rejects_non_bytes(bad):
    with pytest.raises(TypeError):
        Data(bad)