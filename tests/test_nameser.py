import pytest

from fenix import nameser
from fenix.nameser import (
    RRClass,
    RRType,
    Rcode,
    Section,
    get16,
    get32,
    is_meta_rr,
    is_qtype,
    is_rtype,
    is_udp_type,
    is_xfr_type,
    nxt_bit_clear,
    nxt_bit_isset,
    nxt_bit_set,
    put16,
    put32,
)


def test_put16_wire_bytes():
    assert put16(0x1234) == b"\x12\x34"


def test_put32_wire_bytes():
    assert put32(0x01020304) == b"\x01\x02\x03\x04"


def test_put16_truncates_to_16_bits():
    assert put16(0x12345) == b"\x23\x45"


@pytest.mark.parametrize("value", [0, 1, 0xFF, 0x1234, 0xFFFF])
def test_get16_put16_round_trip(value):
    assert get16(put16(value)) == value


@pytest.mark.parametrize("value", [0, 1, 0xDEADBEEF, 0xFFFFFFFF])
def test_get32_put32_round_trip(value):
    assert get32(put32(value)) == value


def test_get_with_offset():
    data = b"\x00" + put16(0xABCD) + put32(0x11223344)
    assert get16(data, 1) == 0xABCD
    assert get32(data, 3) == 0x11223344


def test_get_short_data_raises():
    with pytest.raises(ValueError):
        get16(b"\x01")
    with pytest.raises(ValueError):
        get32(b"\x01\x02\x03\x04", 1)


def test_section_lookup_by_value_and_aliases():
    assert Section(0) is Section.ZN
    assert Section(1) is Section.PR
    assert Section(2) is Section.UD
    assert Section(3) is Section.AR


def test_documented_type_and_class_lookup():
    assert RRType(28) is RRType.AAAA
    assert RRType(255) is RRType.ANY
    assert RRClass(1) is RRClass.IN
    assert Rcode(18) is Rcode.BADTIME


def test_key_reserved_bitmask_wire_value():
    assert put16(nameser.KEY_RESERVED_BITMASK) == b"\x18\x30"
    assert get16(put16(nameser.KEY_RESERVED_BITMASK)) & nameser.KEY_ZONEKEY == 0


def test_md5rsa_sizes_wire_values():
    assert get16(put16(nameser.MD5RSA_MAX_BYTES)) == 5107
    assert get16(put16(nameser.MD5RSA_MAX_BASE64)) == 6812


@pytest.mark.parametrize("t", [RRType.AXFR, RRType.IXFR, RRType.ZXFR])
def test_xfr_types(t):
    assert is_xfr_type(t)
    assert is_qtype(t)
    assert not is_rtype(t)


@pytest.mark.parametrize("t", [RRType.ANY, RRType.MAILA, RRType.MAILB])
def test_other_query_types(t):
    assert not is_xfr_type(t)
    assert is_qtype(t)
    assert not is_rtype(t)


@pytest.mark.parametrize("t", [RRType.TSIG, RRType.OPT])
def test_meta_types(t):
    assert is_meta_rr(t)
    assert not is_qtype(t)
    assert not is_rtype(t)


@pytest.mark.parametrize("t", [RRType.A, RRType.MX, RRType.AAAA, RRType.SOA])
def test_record_types(t):
    assert is_rtype(t)
    assert not is_qtype(t)
    assert not is_meta_rr(t)
    assert is_udp_type(t)


def test_udp_types():
    assert not is_udp_type(RRType.AXFR)
    assert not is_udp_type(RRType.ZXFR)
    assert is_udp_type(RRType.IXFR)


def test_nxt_first_bit_is_most_significant():
    bitmap = bytearray(2)
    nxt_bit_set(0, bitmap)
    assert bitmap == bytearray(b"\x80\x00")


def test_nxt_set_isset_clear_round_trip():
    bitmap = bytearray(4)
    for n in (1, 7, 8, 15, 31):
        nxt_bit_set(n, bitmap)
    for n in range(32):
        assert nxt_bit_isset(n, bitmap) == (n in (1, 7, 8, 15, 31))
    for n in (1, 7, 8, 15, 31):
        nxt_bit_clear(n, bitmap)
    assert bitmap == bytearray(4)


def test_nxt_clear_leaves_other_bits():
    bitmap = bytearray(b"\xff")
    nxt_bit_clear(3, bitmap)
    assert not nxt_bit_isset(3, bitmap)
    assert all(nxt_bit_isset(n, bitmap) for n in range(8) if n != 3)


def test_nxt_out_of_range():
    with pytest.raises(IndexError):
        nxt_bit_set(16, bytearray(2))
    with pytest.raises(ValueError):
        nxt_bit_isset(-1, b"\x00")