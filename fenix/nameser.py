"""Name-server protocol constants and wire helpers.

Record types, classes, opcodes and response codes, the fixed sizes of
protocol fields, network-order integer packing and the bitmap helpers
used by NXT records.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "NAMESER_VERSION",
    "PACKETSZ",
    "MAXDNAME",
    "MAXCDNAME",
    "MAXLABEL",
    "HFIXEDSZ",
    "QFIXEDSZ",
    "RRFIXEDSZ",
    "INT32SZ",
    "INT16SZ",
    "INT8SZ",
    "INADDRSZ",
    "IN6ADDRSZ",
    "CMPRSFLGS",
    "DEFAULTPORT",
    "TSIG_FUDGE",
    "TSIG_TCP_COUNT",
    "TSIG_ALG_HMAC_MD5",
    "TSIG_ERROR_NO_TSIG",
    "TSIG_ERROR_NO_SPACE",
    "TSIG_ERROR_FORMERR",
    "KEY_TYPEMASK",
    "KEY_TYPE_AUTH_CONF",
    "KEY_TYPE_CONF_ONLY",
    "KEY_TYPE_AUTH_ONLY",
    "KEY_TYPE_NO_KEY",
    "KEY_NO_AUTH",
    "KEY_NO_CONF",
    "KEY_EXPERIMENTAL",
    "KEY_RESERVED3",
    "KEY_RESERVED4",
    "KEY_USERACCOUNT",
    "KEY_ENTITY",
    "KEY_ZONEKEY",
    "KEY_IPSEC",
    "KEY_EMAIL",
    "KEY_RESERVED10",
    "KEY_RESERVED11",
    "KEY_SIGNATORYMASK",
    "KEY_RESERVED_BITMASK",
    "ALG_MD5RSA",
    "ALG_DH",
    "ALG_DSA",
    "ALG_DSS",
    "ALG_EXPIRE_ONLY",
    "ALG_PRIVATE_OID",
    "MD5RSA_MIN_BITS",
    "MD5RSA_MAX_BITS",
    "MD5RSA_MAX_BYTES",
    "MD5RSA_MAX_BASE64",
    "SIG_TYPE",
    "SIG_ALG",
    "SIG_LABELS",
    "SIG_OTTL",
    "SIG_EXPIR",
    "SIG_SIGNED",
    "SIG_FOOT",
    "SIG_SIGNER",
    "NXT_BITS",
    "Section",
    "Flag",
    "Opcode",
    "Rcode",
    "UpdateOperation",
    "RRType",
    "RRClass",
    "KeyType",
    "CertType",
    "get16",
    "get32",
    "put16",
    "put32",
    "is_xfr_type",
    "is_qtype",
    "is_meta_rr",
    "is_rtype",
    "is_udp_type",
    "nxt_bit_set",
    "nxt_bit_clear",
    "nxt_bit_isset",
]

NAMESER_VERSION = 19961001

PACKETSZ = 512
MAXDNAME = 1025
MAXCDNAME = 255
MAXLABEL = 63
HFIXEDSZ = 12
QFIXEDSZ = 4
RRFIXEDSZ = 10
INT32SZ = 4
INT16SZ = 2
INT8SZ = 1
INADDRSZ = 4
IN6ADDRSZ = 16
CMPRSFLGS = 0xC0
DEFAULTPORT = 53

TSIG_FUDGE = 300
TSIG_TCP_COUNT = 100
TSIG_ALG_HMAC_MD5 = "HMAC-MD5.SIG-ALG.REG.INT"
TSIG_ERROR_NO_TSIG = -10
TSIG_ERROR_NO_SPACE = -11
TSIG_ERROR_FORMERR = -12

# Flags field of the KEY record data.
KEY_TYPEMASK = 0xC000
KEY_TYPE_AUTH_CONF = 0x0000
KEY_TYPE_CONF_ONLY = 0x8000
KEY_TYPE_AUTH_ONLY = 0x4000
KEY_TYPE_NO_KEY = 0xC000
KEY_NO_AUTH = 0x8000
KEY_NO_CONF = 0x4000
KEY_EXPERIMENTAL = 0x2000
KEY_RESERVED3 = 0x1000
KEY_RESERVED4 = 0x0800
KEY_USERACCOUNT = 0x0400
KEY_ENTITY = 0x0200
KEY_ZONEKEY = 0x0100
KEY_IPSEC = 0x0080
KEY_EMAIL = 0x0040
KEY_RESERVED10 = 0x0020
KEY_RESERVED11 = 0x0010
KEY_SIGNATORYMASK = 0x000F
KEY_RESERVED_BITMASK = KEY_RESERVED3 | KEY_RESERVED4 | KEY_RESERVED10 | KEY_RESERVED11

# Algorithm field of KEY and SIG records.
ALG_MD5RSA = 1
ALG_DH = 2
ALG_DSA = 3
ALG_DSS = ALG_DSA
ALG_EXPIRE_ONLY = 253
ALG_PRIVATE_OID = 254

MD5RSA_MIN_BITS = 512
MD5RSA_MAX_BITS = 2552
# The rounding term divides in integers and so contributes nothing.
MD5RSA_MAX_BYTES = (MD5RSA_MAX_BITS + 7 // 8) * 2 + 3
MD5RSA_MAX_BASE64 = ((MD5RSA_MAX_BYTES + 2) // 3) * 4

# Offsets into SIG record data.
SIG_TYPE = 0
SIG_ALG = 2
SIG_LABELS = 3
SIG_OTTL = 4
SIG_EXPIR = 8
SIG_SIGNED = 12
SIG_FOOT = 16
SIG_SIGNER = 18

NXT_BITS = 8


class Section(IntEnum):
    """Message sections; update messages reuse the query section numbers."""

    QD = 0
    ZN = 0
    AN = 1
    PR = 1
    NS = 2
    UD = 2
    AR = 3
    MAX = 4


class Flag(IntEnum):
    """Fields of the header flags word."""

    QR = 0
    OPCODE = 1
    AA = 2
    TC = 3
    RD = 4
    RA = 5
    Z = 6
    AD = 7
    CD = 8
    RCODE = 9
    MAX = 10


class Opcode(IntEnum):
    """Operation codes."""

    QUERY = 0
    IQUERY = 1
    STATUS = 2
    NOTIFY = 4
    UPDATE = 5
    MAX = 6


class Rcode(IntEnum):
    """Response codes, including the extended TSIG errors."""

    NOERROR = 0
    FORMERR = 1
    SERVFAIL = 2
    NXDOMAIN = 3
    NOTIMPL = 4
    REFUSED = 5
    YXDOMAIN = 6
    YXRRSET = 7
    NXRRSET = 8
    NOTAUTH = 9
    NOTZONE = 10
    MAX = 11
    BADSIG = 16
    BADKEY = 17
    BADTIME = 18


class UpdateOperation(IntEnum):
    """Operations of an update record."""

    DELETE = 0
    ADD = 1
    MAX = 2


class RRType(IntEnum):
    """Resource record and query types."""

    INVALID = 0
    A = 1
    NS = 2
    MD = 3
    MF = 4
    CNAME = 5
    SOA = 6
    MB = 7
    MG = 8
    MR = 9
    NULL = 10
    WKS = 11
    PTR = 12
    HINFO = 13
    MINFO = 14
    MX = 15
    TXT = 16
    RP = 17
    AFSDB = 18
    X25 = 19
    ISDN = 20
    RT = 21
    NSAP = 22
    NSAP_PTR = 23
    SIG = 24
    KEY = 25
    PX = 26
    GPOS = 27
    AAAA = 28
    LOC = 29
    NXT = 30
    EID = 31
    NIMLOC = 32
    SRV = 33
    ATMA = 34
    NAPTR = 35
    KX = 36
    CERT = 37
    A6 = 38
    DNAME = 39
    SINK = 40
    OPT = 41
    TSIG = 250
    IXFR = 251
    AXFR = 252
    MAILB = 253
    MAILA = 254
    ANY = 255
    ZXFR = 256
    MAX = 65536


class RRClass(IntEnum):
    """Resource record classes."""

    IN = 1
    CHAOS = 3
    HS = 4
    NONE = 254
    ANY = 255
    MAX = 65536


class KeyType(IntEnum):
    """DNSSEC key types."""

    RSA = 1
    DH = 2
    DSA = 3
    PRIVATE = 254


class CertType(IntEnum):
    """CERT record types."""

    PKIX = 1
    SPKI = 2
    PGP = 3
    URL = 253
    OID = 254


def _read(data: bytes, offset: int, size: int) -> int:
    if offset < 0 or offset + size > len(data):
        raise ValueError(f"need {size} bytes at offset {offset}, have {len(data)}")
    return int.from_bytes(data[offset:offset + size], "big")


def get16(data: bytes, offset: int = 0) -> int:
    """Read a network-order 16-bit value at ``offset``."""
    return _read(data, offset, INT16SZ)


def get32(data: bytes, offset: int = 0) -> int:
    """Read a network-order 32-bit value at ``offset``."""
    return _read(data, offset, INT32SZ)


def put16(value: int) -> bytes:
    """Encode the low 16 bits of ``value`` in network order."""
    return (value & 0xFFFF).to_bytes(INT16SZ, "big")


def put32(value: int) -> bytes:
    """Encode the low 32 bits of ``value`` in network order."""
    return (value & 0xFFFFFFFF).to_bytes(INT32SZ, "big")


def is_xfr_type(t: int) -> bool:
    """True for the zone-transfer query types."""
    return t in (RRType.AXFR, RRType.IXFR, RRType.ZXFR)


def is_qtype(t: int) -> bool:
    """True for types that exist only as query types."""
    return is_xfr_type(t) or t in (RRType.ANY, RRType.MAILB, RRType.MAILA)


def is_meta_rr(t: int) -> bool:
    """True for meta records, which are neither query nor record types."""
    return t in (RRType.TSIG, RRType.OPT)


def is_rtype(t: int) -> bool:
    """True for types that exist only as record types."""
    return not is_qtype(t) and not is_meta_rr(t)


def is_udp_type(t: int) -> bool:
    """True for types that may be queried over UDP."""
    return t not in (RRType.AXFR, RRType.ZXFR)


def _bit_position(n: int) -> tuple[int, int]:
    if n < 0:
        raise ValueError(f"bit number must not be negative: {n}")
    return n // NXT_BITS, 0x80 >> (n % NXT_BITS)


def nxt_bit_set(n: int, bitmap: bytearray) -> None:
    """Set bit ``n`` (most significant bit first) in ``bitmap``."""
    index, mask = _bit_position(n)
    bitmap[index] |= mask


def nxt_bit_clear(n: int, bitmap: bytearray) -> None:
    """Clear bit ``n`` (most significant bit first) in ``bitmap``."""
    index, mask = _bit_position(n)
    bitmap[index] &= ~mask & 0xFF


def nxt_bit_isset(n: int, bitmap: bytes) -> bool:
    """True when bit ``n`` (most significant bit first) is set in ``bitmap``."""
    index, mask = _bit_position(n)
    return bool(bitmap[index] & mask)