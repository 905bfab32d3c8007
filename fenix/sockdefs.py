"""Socket interface definitions: families, types, flags, protocols, options.

:class:`SockAddrIn` is the 16-byte IPv4 socket address. Its fields are laid
out in the platform's little-endian order; byte-order conversion on this
platform is the identity, so port and address are stored as given.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import ClassVar

__all__ = [
    "AddressFamily",
    "SocketType",
    "ShutdownHow",
    "MessageFlag",
    "IPProto",
    "SockAddrIn",
    "SOMAXCONN",
    "MSG_CMSG_CLOEXEC",
    "MSG_CMSG_COMPAT",
]

SOMAXCONN = 128

MSG_CMSG_CLOEXEC = 0x40000000
MSG_CMSG_COMPAT = 0


class AddressFamily(IntEnum):
    """Protocol and address families."""

    UNSPEC = 0
    LOCAL = 1
    UNIX = 1
    FILE = 1
    INET = 2
    AX25 = 3
    IPX = 4
    APPLETALK = 5
    NETROM = 6
    BRIDGE = 7
    ATMPVC = 8
    X25 = 9
    INET6 = 10
    ROSE = 11
    DECNET = 12
    NETBEUI = 13
    SECURITY = 14
    KEY = 15
    NETLINK = 16
    ROUTE = 16
    PACKET = 17
    ASH = 18
    ECONET = 19
    ATMSVC = 20
    RDS = 21
    SNA = 22
    IRDA = 23
    PPPOX = 24
    WANPIPE = 25
    LLC = 26
    IB = 27
    MPLS = 28
    CAN = 29
    TIPC = 30
    BLUETOOTH = 31
    IUCV = 32
    RXRPC = 33
    ISDN = 34
    PHONET = 35
    IEEE802154 = 36
    CAIF = 37
    ALG = 38
    NFC = 39
    VSOCK = 40
    KCM = 41
    QIPCRTR = 42
    SMC = 43
    XDP = 44
    MCTP = 45
    MAX = 46


class SocketType(IntEnum):
    """Socket types."""

    STREAM = 1
    DGRAM = 2
    RAW = 3
    RDM = 4
    SEQPACKET = 5
    DCCP = 6
    PACKET = 10


class ShutdownHow(IntEnum):
    """Directions for shutdown."""

    RD = 0
    WR = 1
    RDWR = 2


class MessageFlag(IntFlag):
    """Flags for send and receive."""

    OOB = 0x1
    PEEK = 0x2
    DONTROUTE = 0x4
    TRYHARD = 0x4
    CTRUNC = 0x8
    PROBE = 0x10
    TRUNC = 0x20
    DONTWAIT = 0x40
    EOR = 0x80
    WAITALL = 0x100
    FIN = 0x200
    EOF = 0x200
    SYN = 0x400
    CONFIRM = 0x800
    RST = 0x1000
    ERRQUEUE = 0x2000
    NOSIGNAL = 0x4000
    MORE = 0x8000
    WAITFORONE = 0x10000


class IPProto(IntEnum):
    """IP protocol numbers."""

    IP = 0
    ICMP = 1
    IGMP = 2
    IPIP = 4
    TCP = 6
    EGP = 8
    PUP = 12
    UDP = 17
    IDP = 22
    TP = 29
    DCCP = 33
    IPV6 = 41
    RSVP = 46
    GRE = 47
    ESP = 50
    AH = 51
    MTP = 92
    BEETPH = 94
    ENCAP = 98
    PIM = 103
    COMP = 108
    SCTP = 132
    UDPLITE = 136
    MPLS = 137
    ETHERNET = 143
    RAW = 255
    MPTCP = 262
    MAX = 263


# Option levels.
SOL_IP = 0
SOL_TCP = 6
SOL_UDP = 17
SOL_IPV6 = 41
SOL_ICMPV6 = 58
SOL_SCTP = 132
SOL_UDPLITE = 136
SOL_RAW = 255
SOL_IPX = 256
SOL_AX25 = 257
SOL_ATALK = 258
SOL_NETROM = 259
SOL_ROSE = 260
SOL_DECNET = 261
SOL_X25 = 262
SOL_PACKET = 263
SOL_ATM = 264
SOL_AAL = 265
SOL_IRDA = 266
SOL_NETBEUI = 267
SOL_LLC = 268
SOL_DCCP = 269
SOL_NETLINK = 270
SOL_TIPC = 271
SOL_RXRPC = 272
SOL_PPPOL2TP = 273
SOL_BLUETOOTH = 274
SOL_PNPIPE = 275
SOL_RDS = 276
SOL_IUCV = 277
SOL_CAIF = 278
SOL_ALG = 279
SOL_SOCKET = 1

IPX_TYPE = 1

# Socket-level options.
SO_DEBUG = 1
SO_REUSEADDR = 2
SO_TYPE = 3
SO_ERROR = 4
SO_DONTROUTE = 5
SO_BROADCAST = 6
SO_SNDBUF = 7
SO_RCVBUF = 8
SO_SNDBUFFORCE = 32
SO_RCVBUFFORCE = 33
SO_KEEPALIVE = 9
SO_OOBINLINE = 10
SO_NO_CHECK = 11
SO_PRIORITY = 12
SO_LINGER = 13
SO_BSDCOMPAT = 14
SO_PASSCRED = 16
SO_PEERCRED = 17
SO_RCVLOWAT = 18
SO_SNDLOWAT = 19
SO_RCVTIMEO = 20
SO_SNDTIMEO = 21
SO_SECURITY_AUTHENTICATION = 22
SO_SECURITY_ENCRYPTION_TRANSPORT = 23
SO_SECURITY_ENCRYPTION_NETWORK = 24
SO_BINDTODEVICE = 25
SO_ATTACH_FILTER = 26
SO_DETACH_FILTER = 27
SO_PEERNAME = 28
SO_TIMESTAMP = 29
SCM_TIMESTAMP = SO_TIMESTAMP
SO_ACCEPTCONN = 30
SO_PEERSEC = 31
SO_PASSSEC = 34
SO_TIMESTAMPNS = 35
SCM_TIMESTAMPNS = SO_TIMESTAMPNS
SO_MARK = 36
SO_TIMESTAMPING = 37
SCM_TIMESTAMPING = SO_TIMESTAMPING
SO_PROTOCOL = 38
SO_DOMAIN = 39
SO_RXQ_OVFL = 40

_LAYOUT = struct.Struct("<HHI8x")


@dataclass(frozen=True)
class SockAddrIn:
    """An IPv4 socket address: family, port and 32-bit address."""

    family: int = AddressFamily.INET
    port: int = 0
    addr: int = 0

    SIZE: ClassVar[int] = _LAYOUT.size

    def __post_init__(self) -> None:
        if not 0 <= self.family <= 0xFFFF:
            raise ValueError(f"family must fit in 16 bits: {self.family}")
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"port must fit in 16 bits: {self.port}")
        if not 0 <= self.addr <= 0xFFFFFFFF:
            raise ValueError(f"address must fit in 32 bits: {self.addr}")

    def pack(self) -> bytes:
        """Encode the address as the 16-byte structure, padding zeroed."""
        return _LAYOUT.pack(self.family, self.port, self.addr)

    @classmethod
    def unpack(cls, data: bytes) -> SockAddrIn:
        """Decode a 16-byte structure; the padding is ignored."""
        if len(data) != _LAYOUT.size:
            raise ValueError(f"socket address needs {_LAYOUT.size} bytes, have {len(data)}")
        family, port, addr = _LAYOUT.unpack(data)
        try:
            family = AddressFamily(family)
        except ValueError:
            pass
        return cls(family=family, port=port, addr=addr)