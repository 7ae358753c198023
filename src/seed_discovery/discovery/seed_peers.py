"""
Seed Peer Discovery

A discovery provider backed by the embedded seed table.

This is the last resort when DNS seeds, IRC and gossip all come up empty.
Nothing here touches the network: the table is already numeric, so handing
out a peer is a pure conversion plus a cursor bump.

Two ways to consume it:

- `get_peer()` walks the table once, front to back, then returns None forever.
- `get_peers()` returns the whole table every time and leaves the cursor alone.

A provider instance belongs to one consumer. Threads that need seed peers
concurrently should each build their own `SeedPeers`; the table is shared.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from ..params import NetworkParameters, Port
from .address import PeerAddress
from .errors import PeerDiscoveryError
from .interface import PeerDiscovery
from .seeds import SEED_ADDRS, decode_seed_address

logger = logging.getLogger(__name__)


class SeedPeers(PeerDiscovery):
    """Hands out the embedded seed nodes of a network."""

    def __init__(self, params: NetworkParameters, seeds: Sequence[int] = SEED_ADDRS) -> None:
        """
        Create a provider positioned at the start of the table.

        Args:
            params: Network whose default port every peer is given.
            seeds: Packed seed addresses. Defaults to the embedded table.
        """
        self._port = params.port
        self._seeds: tuple[int, ...] = seeds if isinstance(seeds, tuple) else tuple(seeds)
        self._cursor = 0
        self._exhausted_logged = False

    @property
    def port(self) -> Port:
        """Port attached to every peer this provider returns."""
        return self._port

    @property
    def seeds(self) -> tuple[int, ...]:
        """Packed seed addresses this provider walks, in table order."""
        return self._seeds

    @property
    def cursor(self) -> int:
        """Number of table entries consumed by `get_peer()`."""
        return self._cursor

    @property
    def remaining(self) -> int:
        """Number of entries `get_peer()` has yet to return."""
        return len(self._seeds) - self._cursor

    def __len__(self) -> int:
        return len(self._seeds)

    def __iter__(self) -> Iterator[PeerAddress]:
        """Drain the provider through `get_peer()`."""
        while (peer := self.get_peer()) is not None:
            yield peer

    def get_peer(self) -> PeerAddress | None:
        """
        Return the next seed node, or None once the table is exhausted.

        Each call consumes one entry, including one that fails to decode, so
        the next call moves on to the following entry. The cursor never resets
        or wraps: every call after the last entry returns None.

        Raises:
            PeerDiscoveryError: If the current entry cannot be decoded.
        """
        if self._cursor >= len(self._seeds):
            if not self._exhausted_logged:
                logger.debug("Seed table exhausted after %d peers", len(self._seeds))
                self._exhausted_logged = True
            return None

        seed = self._seeds[self._cursor]
        self._cursor += 1
        peer = self._resolve(seed)
        logger.debug("Seed peer %d/%d: %s", self._cursor, len(self._seeds), peer)
        return peer

    def get_peers(self, timeout_secs: float | None = None) -> list[PeerAddress]:
        """
        Return every seed node in table order.

        The timeout is accepted for compatibility with providers that do
        network lookups. Decoding is in-memory, so it is ignored.

        Raises:
            PeerDiscoveryError: If any entry cannot be decoded.
        """
        return [self._resolve(seed) for seed in self._seeds]

    def shutdown(self) -> None:
        """Nothing to release: the provider holds no sockets or threads."""
        logger.debug("Seed peer discovery shut down at %d/%d", self._cursor, len(self._seeds))

    def _resolve(self, seed: int) -> PeerAddress:
        """Turn one table entry into a dialable address."""
        try:
            host = decode_seed_address(seed)
        except ValueError as e:
            raise PeerDiscoveryError(f"Invalid seed address {seed!r}", cause=e) from e
        return PeerAddress(host=host, port=self._port)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(port={int(self._port)}, cursor={self._cursor}/{len(self)})"
