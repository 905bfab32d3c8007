"""Older name-server names and the fixed message header.

The short names here (``T_A``, ``C_IN``, ``NOERROR`` and so on) are aliases
for the values in :mod:`fenix.nameser`. :class:`Header` is the fixed
12-byte header that starts every message.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

from fenix.nameser import (
    CMPRSFLGS,
    DEFAULTPORT,
    HFIXEDSZ,
    IN6ADDRSZ,
    INADDRSZ,
    INT16SZ,
    INT32SZ,
    MAXCDNAME,
    MAXDNAME,
    MAXLABEL,
    PACKETSZ as NS_PACKETSZ,
    QFIXEDSZ,
    RRFIXEDSZ,
    Opcode,
    RRClass,
    RRType,
    Rcode,
    Section,
    UpdateOperation,
    get16,
    get32,
    put16,
    put32,
)

__all__ = [
    "BIND_VERSION",
    "Header",
    "PACKETSZ",
    "MAXDNAME",
    "MAXCDNAME",
    "MAXLABEL",
    "HFIXEDSZ",
    "QFIXEDSZ",
    "RRFIXEDSZ",
    "INT32SZ",
    "INT16SZ",
    "INADDRSZ",
    "IN6ADDRSZ",
    "INDIR_MASK",
    "NAMESERVER_PORT",
]

BIND_VERSION = 19950621

PACKETSZ = NS_PACKETSZ
INDIR_MASK = CMPRSFLGS
NAMESERVER_PORT = DEFAULTPORT

S_ZONE = Section.ZN
S_PREREQ = Section.PR
S_UPDATE = Section.UD
S_ADDT = Section.AR

QUERY = Opcode.QUERY
IQUERY = Opcode.IQUERY
STATUS = Opcode.STATUS
NS_NOTIFY_OP = Opcode.NOTIFY
NS_UPDATE_OP = Opcode.UPDATE

NOERROR = Rcode.NOERROR
FORMERR = Rcode.FORMERR
SERVFAIL = Rcode.SERVFAIL
NXDOMAIN = Rcode.NXDOMAIN
NOTIMP = Rcode.NOTIMPL
REFUSED = Rcode.REFUSED
YXDOMAIN = Rcode.YXDOMAIN
YXRRSET = Rcode.YXRRSET
NXRRSET = Rcode.NXRRSET
NOTAUTH = Rcode.NOTAUTH
NOTZONE = Rcode.NOTZONE

DELETE = UpdateOperation.DELETE
ADD = UpdateOperation.ADD

T_A = RRType.A
T_NS = RRType.NS
T_MD = RRType.MD
T_MF = RRType.MF
T_CNAME = RRType.CNAME
T_SOA = RRType.SOA
T_MB = RRType.MB
T_MG = RRType.MG
T_MR = RRType.MR
T_NULL = RRType.NULL
T_WKS = RRType.WKS
T_PTR = RRType.PTR
T_HINFO = RRType.HINFO
T_MINFO = RRType.MINFO
T_MX = RRType.MX
T_TXT = RRType.TXT
T_RP = RRType.RP
T_AFSDB = RRType.AFSDB
T_X25 = RRType.X25
T_ISDN = RRType.ISDN
T_RT = RRType.RT
T_NSAP = RRType.NSAP
T_NSAP_PTR = RRType.NSAP_PTR
T_SIG = RRType.SIG
T_KEY = RRType.KEY
T_PX = RRType.PX
T_GPOS = RRType.GPOS
T_AAAA = RRType.AAAA
T_LOC = RRType.LOC
T_NXT = RRType.NXT
T_EID = RRType.EID
T_NIMLOC = RRType.NIMLOC
T_SRV = RRType.SRV
T_ATMA = RRType.ATMA
T_NAPTR = RRType.NAPTR
T_OPT = RRType.OPT
T_IXFR = RRType.IXFR
T_AXFR = RRType.AXFR
T_MAILB = RRType.MAILB
T_MAILA = RRType.MAILA
T_ANY = RRType.ANY

C_IN = RRClass.IN
C_CHAOS = RRClass.CHAOS
C_HS = RRClass.HS
C_NONE = RRClass.NONE
C_ANY = RRClass.ANY

GETSHORT = get16
GETLONG = get32
PUTSHORT = put16
PUTLONG = put32

_LAYOUT = struct.Struct("!HBBHHHH")


@dataclass
class Header:
    """The fixed header of a name-server message."""

    id: int = 0
    qr: bool = False
    opcode: int = 0
    aa: bool = False
    tc: bool = False
    rd: bool = False
    ra: bool = False
    unused: bool = False
    ad: bool = False
    cd: bool = False
    rcode: int = 0
    qdcount: int = 0
    ancount: int = 0
    nscount: int = 0
    arcount: int = 0

    SIZE: ClassVar[int] = HFIXEDSZ

    def _check(self) -> None:
        for name in ("id", "qdcount", "ancount", "nscount", "arcount"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"{name} must fit in 16 bits: {value}")
        for name in ("opcode", "rcode"):
            value = getattr(self, name)
            if not 0 <= value <= 0xF:
                raise ValueError(f"{name} must fit in 4 bits: {value}")

    def pack(self) -> bytes:
        """Encode the header in wire order."""
        self._check()
        third = (
            int(self.qr) << 7
            | self.opcode << 3
            | int(self.aa) << 2
            | int(self.tc) << 1
            | int(self.rd)
        )
        fourth = (
            int(self.ra) << 7
            | int(self.unused) << 6
            | int(self.ad) << 5
            | int(self.cd) << 4
            | self.rcode
        )
        return _LAYOUT.pack(
            self.id, third, fourth,
            self.qdcount, self.ancount, self.nscount, self.arcount,
        )

    @classmethod
    def unpack(cls, data: bytes) -> Header:
        """Decode the header at the start of ``data``."""
        if len(data) < HFIXEDSZ:
            raise ValueError(f"header needs {HFIXEDSZ} bytes, have {len(data)}")
        ident, third, fourth, qd, an, ns, ar = _LAYOUT.unpack_from(data)
        return cls(
            id=ident,
            qr=bool(third & 0x80),
            opcode=(third >> 3) & 0xF,
            aa=bool(third & 0x04),
            tc=bool(third & 0x02),
            rd=bool(third & 0x01),
            ra=bool(fourth & 0x80),
            unused=bool(fourth & 0x40),
            ad=bool(fourth & 0x20),
            cd=bool(fourth & 0x10),
            rcode=fourth & 0xF,
            qdcount=qd,
            ancount=an,
            nscount=ns,
            arcount=ar,
        )