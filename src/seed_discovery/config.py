"""
Global configuration for seed discovery.

This module holds environment-specific settings shared by every module.
"""

import os

from .params import NETWORKS

SEED_NETWORK = os.environ.get("SEED_NETWORK", "mainnet").lower()
"""The default network ('mainnet' or 'testnet'). Defaults to 'mainnet'."""

if SEED_NETWORK not in NETWORKS:
    raise ValueError(
        f"Invalid SEED_NETWORK environment variable: '{SEED_NETWORK}'. "
        f"Supported values: {sorted(NETWORKS)}"
    )
