"""
Peer Discovery

Providers that yield candidate peers to the connection bootstrap logic.

Every provider implements `PeerDiscovery`. This package ships the one that
needs no network access: `SeedPeers`, backed by a compiled-in table of
long-lived nodes.
"""

from .address import PeerAddress
from .errors import PeerDiscoveryError
from .interface import PeerDiscovery
from .seed_peers import SeedPeers
from .seeds import SEED_ADDRS, decode_seed_address, encode_seed_address

__all__ = [
    # Contract
    "PeerDiscovery",
    "PeerDiscoveryError",
    "PeerAddress",
    # Seed table
    "SEED_ADDRS",
    "SeedPeers",
    "decode_seed_address",
    "encode_seed_address",
]
