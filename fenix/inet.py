"""Internet address conversion: dotted text to binary and host to network order.

Byte-order conversion is the identity on this platform, so the values
returned by :func:`inet_aton` and :func:`inet_addr` equal the host-order
integers that the text describes.
"""

from __future__ import annotations

import errno
import string

__all__ = [
    "AF_INET",
    "AF_INET6",
    "INADDR_ANY",
    "INADDR_NONE",
    "INET_ADDRSTRLEN",
    "INET6_ADDRSTRLEN",
    "AddressError",
    "htonl",
    "htons",
    "inet_aton",
    "inet_addr",
    "inet_pton",
]

AF_INET = 2
AF_INET6 = 10

INET_ADDRSTRLEN = 16
INET6_ADDRSTRLEN = 46

INADDR_ANY = 0x00000000
INADDR_NONE = 0xFFFFFFFF

_INADDRSZ = 4
_IN6ADDRSZ = 16
_INT16SZ = 2

_ULONG_MAX = 0xFFFFFFFF
_SPACE = frozenset(" \t\n\v\f\r")
_DECIMAL = frozenset("0123456789")
_HEX_VALUE = {ch: int(ch, 16) for ch in string.hexdigits}

# The largest value the last part may take, keyed by the number of parts.
_LAST_PART_LIMIT = {1: 0xFFFFFFFF, 2: 0xFFFFFF, 3: 0xFFFF, 4: 0xFF}


class AddressError(ValueError):
    """Raised when text is not a valid address of the requested kind."""


def htonl(hostlong: int) -> int:
    """Convert a 32-bit value from host to network byte order."""
    return hostlong & 0xFFFFFFFF


def htons(hostshort: int) -> int:
    """Convert a 16-bit value from host to network byte order."""
    return hostshort & 0xFFFF


def _until_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def _strtoul(text: str, pos: int) -> tuple[int, int]:
    """Parse an unsigned number with automatic base, as strtoul with base 0.

    Returns the value and the position just past the digits.
    """
    end = len(text)
    while pos < end and text[pos] in _SPACE:
        pos += 1

    negative = False
    if pos < end and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1

    if text.startswith(("0x", "0X"), pos) and pos + 2 < end and text[pos + 2] in _HEX_VALUE:
        base = 16
        pos += 2
    elif text.startswith("0", pos):
        base = 8
    else:
        base = 10

    digits_start = pos
    value = 0
    while pos < end:
        digit = _HEX_VALUE.get(text[pos])
        if digit is None or digit >= base:
            break
        value = value * base + digit
        pos += 1

    if pos == digits_start:
        raise AddressError(f"expected a number in {text!r}")
    if value > _ULONG_MAX:
        raise AddressError(f"number out of range in {text!r}")
    if negative:
        value = (-value) & _ULONG_MAX
    return value, pos


def inet_aton(cp: str) -> int:
    """Interpret an IPv4 address in any of the a, a.b, a.b.c, a.b.c.d forms.

    Each part may be decimal, octal (leading 0) or hexadecimal (leading 0x).
    Parsing stops at the end of the text or at the first whitespace.
    Raises :class:`AddressError` when the text is not a valid address.
    """
    text = _until_nul(cp)
    parts: list[int] = []
    pos = 0
    while True:
        value, pos = _strtoul(text, pos)
        parts.append(value)
        ch = text[pos] if pos < len(text) else ""
        if ch == ".":
            if len(parts) == 4:
                raise AddressError(f"too many parts in {cp!r}")
            pos += 1
            continue
        if ch == "" or ch in _SPACE:
            break
        raise AddressError(f"invalid character {ch!r} in {cp!r}")

    *head, val = parts
    if val > _LAST_PART_LIMIT[len(parts)] or any(part > 0xFF for part in head):
        raise AddressError(f"part out of range in {cp!r}")
    for shift, part in zip((24, 16, 8), head):
        val |= part << shift
    return htonl(val)


def inet_addr(cp: str) -> int:
    """Like :func:`inet_aton`, but return :data:`INADDR_NONE` for invalid text."""
    try:
        return inet_aton(cp)
    except AddressError:
        return INADDR_NONE


def _pton4(src: str) -> bytes | None:
    octets = 0
    saw_digit = False
    current = [0]
    for ch in src:
        if ch in _DECIMAL:
            new = current[-1] * 10 + int(ch)
            if new > 255:
                return None
            current[-1] = new
            if not saw_digit:
                octets += 1
                if octets > 4:
                    return None
                saw_digit = True
        elif ch == "." and saw_digit:
            if octets == 4:
                return None
            current.append(0)
            saw_digit = False
        else:
            return None
    if octets < 4:
        return None
    return bytes(current)


def _pton6(src: str) -> bytes | None:
    if src.startswith(":"):
        if not src.startswith("::"):
            return None
        src = src[1:]

    tmp = bytearray(_IN6ADDRSZ)
    tp = 0
    colonp: int | None = None
    curtok = 0
    saw_xdigit = False
    val = 0

    for index, ch in enumerate(src):
        digit = _HEX_VALUE.get(ch)
        if digit is not None:
            val = (val << 4) | digit
            if val > 0xFFFF:
                return None
            saw_xdigit = True
            continue
        if ch == ":":
            curtok = index + 1
            if not saw_xdigit:
                if colonp is not None:
                    return None
                colonp = tp
                continue
            if tp + _INT16SZ > _IN6ADDRSZ:
                return None
            tmp[tp] = val >> 8
            tmp[tp + 1] = val & 0xFF
            tp += _INT16SZ
            saw_xdigit = False
            val = 0
            continue
        if ch == "." and tp + _INADDRSZ <= _IN6ADDRSZ:
            quad = _pton4(src[curtok:])
            if quad is not None:
                tmp[tp:tp + _INADDRSZ] = quad
                tp += _INADDRSZ
                saw_xdigit = False
                break
        return None

    if saw_xdigit:
        if tp + _INT16SZ > _IN6ADDRSZ:
            return None
        tmp[tp] = val >> 8
        tmp[tp + 1] = val & 0xFF
        tp += _INT16SZ

    if colonp is not None:
        tail = bytes(tmp[colonp:tp])
        tmp[colonp:] = bytes(_IN6ADDRSZ - colonp - len(tail)) + tail
        tp = _IN6ADDRSZ

    if tp != _IN6ADDRSZ:
        return None
    return bytes(tmp)


def inet_pton(af: int, src: str) -> bytes:
    """Convert a textual IPv4 or IPv6 address to its network-order bytes.

    Raises :class:`AddressError` when ``src`` is not a valid address for the
    family, and :class:`OSError` with ``EAFNOSUPPORT`` for any other family.
    """
    text = _until_nul(src)
    if af == AF_INET:
        result = _pton4(text)
    elif af == AF_INET6:
        result = _pton6(text)
    else:
        raise OSError(errno.EAFNOSUPPORT, f"address family {af} not supported")
    if result is None:
        raise AddressError(f"invalid address {src!r}")
    return result