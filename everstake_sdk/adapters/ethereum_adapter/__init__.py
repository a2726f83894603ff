"""Ethereum Adapter - Everstake ETH pool staking."""

from .adapter import Ethereum

__all__ = ["Ethereum"]
