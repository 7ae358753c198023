"""
Peer Discovery Interface

The contract every discovery source implements.

The connection bootstrap logic holds a list of providers (DNS seeds, IRC,
the embedded seed table, ...) and asks each in turn for candidates. A
provider answers either one peer at a time or with its whole set.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .address import PeerAddress


class PeerDiscovery(ABC):
    """A source of candidate peers for bootstrapping connections."""

    @abstractmethod
    def get_peer(self) -> PeerAddress | None:
        """
        Return the next candidate peer.

        Returns:
            The next peer, or None once the provider has nothing more to offer.

        Raises:
            PeerDiscoveryError: If a candidate could not be produced.
        """

    @abstractmethod
    def get_peers(self, timeout_secs: float | None = None) -> list[PeerAddress]:
        """
        Return every candidate peer the provider knows of.

        Args:
            timeout_secs: Upper bound on how long the lookup may take.
                Providers that answer from memory may ignore it.

        Raises:
            PeerDiscoveryError: If the candidates could not be produced.
        """

    @abstractmethod
    def shutdown(self) -> None:
        """Release any resources held by the provider. Must never raise."""
