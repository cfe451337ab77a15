"""Stored atomic swaps."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice

from ..primitives import Expiration
from ..storage import Map, Order
from .messages import Cw20Balance, NativeBalance

SWAPS = Map("atomic_swap")


@dataclass(frozen=True)
class AtomicSwap:
    """An open swap; ``hash`` is the raw sha-256 hash of the preimage."""

    hash: bytes
    recipient: str
    source: str
    expires: Expiration = field(default_factory=Expiration.never)
    balance: NativeBalance | Cw20Balance = field(default_factory=NativeBalance)

    def is_expired(self, block):
        return self.expires.is_expired(block)


def all_swap_ids(storage, start, limit):
    """Return the ids of active swaps in ascending order, at most ``limit``."""
    keys = SWAPS.keys(storage, start, None, Order.ASCENDING)
    return list(islice(keys, limit))