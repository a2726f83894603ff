"""Berachain Adapter - BGT boosts towards the Everstake validator."""

from .adapter import BGTContract, Berachain, MainnetBGT, TestnetBGT

__all__ = ["BGTContract", "Berachain", "MainnetBGT", "TestnetBGT"]
