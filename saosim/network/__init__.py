"""Tie storage consumed by network-dependent behavior effects."""

from saosim.network.network import Network

__all__ = [
    "Network",
]
