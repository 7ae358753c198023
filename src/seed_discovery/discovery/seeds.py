"""
Embedded Seed Table

Historically long-lived nodes used as a last-resort bootstrap source.

Each entry packs an IPv4 address into a 32-bit unsigned integer with the
first octet in the least-significant byte::

    octet 0 = bits  0..7
    octet 1 = bits  8..15
    octet 2 = bits 16..23
    octet 3 = bits 24..31

So 0x4774c836 is 54.200.116.71, not 71.116.200.54.

The table is opaque historical data. Repeated entries and the ordering are
kept exactly as collected.
"""

from __future__ import annotations

import operator
from ipaddress import IPv4Address
from typing import Final, SupportsIndex

from ..types import Uint32

SEED_ADDRS: Final[tuple[int, ...]] = (
    0x4774C836, 0x082B20B4, 0x156B91B4, 0x86CB079D, 0xDE257899, 0x48037899, 0x5D33F285, 0xE132F285,
    0x7E17F285, 0xF713F285, 0x0D56ED80, 0x11217B7E, 0x6E90767E, 0xF690367D, 0xB905357D, 0xCD4F297C,
    0x29616F79, 0xD3A13F77, 0x50CEF176, 0x20C39A76, 0x7B0D6C75, 0x668C1E73, 0xF6409A71, 0xBEB5E96F,
    0x1088153D, 0x03517B3D, 0xFD35263C, 0x595FF131, 0x4854D431, 0x3DF85EDB, 0xDDF85EDB, 0x59EB5EDB,
    0x1B496ADB, 0x61FF83D3, 0x529CB0B7, 0xC9DCAAB6, 0x0874553B, 0x8693507E, 0xFC23547C, 0xDB7D1176,
    0x82D696DE, 0x41F0AA99, 0xA5C0A099, 0x6945F9C0, 0x290AF285, 0x6AABD13D, 0xE9DEEE3C, 0xD00B8A3A,
    0x33C7A799, 0x412B7999, 0x12351E7D, 0x114C007B, 0x82F31276, 0xC55B1176, 0x37094A75, 0x8AA43A74,
    0xA1FEAA72,
)  # fmt: skip
"""Packed IPv4 addresses of the seed nodes, in connection order."""


def decode_seed_address(seed: SupportsIndex) -> IPv4Address:
    """
    Unpack a seed table entry into an IPv4 address.

    Pure conversion: no name resolution or other I/O happens.

    Args:
        seed: Packed address, least-significant byte first.

    Returns:
        The IPv4 address whose first octet is the low byte of `seed`.

    Raises:
        ValueError: If `seed` is not an integer in [0, 2**32).
    """
    try:
        value = Uint32(operator.index(seed))
    except (OverflowError, TypeError) as e:
        raise ValueError(f"Cannot decode seed address {seed!r}: {e}") from e
    return IPv4Address(value.to_bytes(4, "little"))


def encode_seed_address(address: IPv4Address | str) -> int:
    """Pack an IPv4 address into the seed table encoding."""
    return int.from_bytes(IPv4Address(address).packed, "little")
