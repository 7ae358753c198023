"""Resolved peer endpoints handed out by discovery providers."""

from __future__ import annotations

from ipaddress import IPv4Address

from ..params import Port
from ..types import StrictBaseModel


class PeerAddress(StrictBaseModel):
    """An IPv4 host and TCP port, ready to be dialed."""

    host: IPv4Address
    """Numeric IPv4 address of the peer."""

    port: Port
    """Port the peer is expected to listen on."""

    def as_tuple(self) -> tuple[str, int]:
        """Return the `(host, port)` pair accepted by socket APIs."""
        return str(self.host), int(self.port)

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"
