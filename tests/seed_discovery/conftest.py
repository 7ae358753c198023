"""
Shared pytest fixtures for seed discovery tests.

Provides network parameters and small seed tables used across test modules.
"""

from __future__ import annotations

import pytest

from seed_discovery.params import MAINNET, NetworkParameters, Port


@pytest.fixture
def mainnet_params() -> NetworkParameters:
    """Production network parameters."""
    return MAINNET


@pytest.fixture
def custom_params() -> NetworkParameters:
    """Parameters of a private network on a non-default port."""
    return NetworkParameters(id="org.example.private", port=Port(12345))


@pytest.fixture
def small_table() -> tuple[int, ...]:
    """Three packed addresses: 1.2.3.4, 10.0.0.1 and 1.2.3.4 again."""
    return (0x04030201, 0x0100000A, 0x04030201)
