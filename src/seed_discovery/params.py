"""
Network Parameters

The slice of network configuration that discovery providers depend on.

A provider needs exactly one value from here: the default TCP port peers of
the network listen on. Everything else about a network (magic bytes, genesis,
DNS seed hosts) belongs to the client and is not modelled.
"""

from typing import Final

from .types import StrictBaseModel, Uint16

Port = Uint16
"""TCP port number (0-65535)."""


class NetworkParameters(StrictBaseModel):
    """Identity and default peer port of one network."""

    id: str
    """Reverse-DNS style network identifier."""

    port: Port
    """Default port peers of this network accept connections on."""


MAINNET: Final = NetworkParameters(id="org.monacoin.production", port=Port(9401))
"""Parameters of the production network."""

TESTNET: Final = NetworkParameters(id="org.monacoin.test", port=Port(19403))
"""Parameters of the public test network."""

NETWORKS: Final[dict[str, NetworkParameters]] = {
    "mainnet": MAINNET,
    "testnet": TESTNET,
}
"""Known networks keyed by their short name."""


def get_network(name: str) -> NetworkParameters:
    """
    Look up network parameters by short name.

    Args:
        name: Short network name, case-insensitive (e.g. "mainnet").

    Returns:
        The matching network parameters.

    Raises:
        ValueError: If the name does not match a known network.
    """
    try:
        return NETWORKS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown network: '{name}'. Supported values: {sorted(NETWORKS)}"
        ) from None
