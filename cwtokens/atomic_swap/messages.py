"""Messages and responses of the atomic swap contract."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field

from ..primitives import Expiration

_MIN_NAME_BYTES = 3
_MAX_NAME_BYTES = 20


def is_valid_name(name):
    """A swap id must be 3 to 20 bytes of UTF-8 text."""
    return _MIN_NAME_BYTES <= len(name.encode("utf-8")) <= _MAX_NAME_BYTES


@dataclass(frozen=True)
class Coin:
    """An amount of a native token."""

    denom: str
    amount: int


@dataclass(frozen=True)
class Cw20Coin:
    """An amount of a cw20 token, identified by its contract address."""

    address: str
    amount: int


@dataclass(frozen=True)
class NativeBalance:
    """A balance held in native tokens."""

    coins: tuple = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "coins", tuple(self.coins))


@dataclass(frozen=True)
class Cw20Balance:
    """A balance held in a single cw20 token."""

    coin: Cw20Coin


def _coin_json(coin):
    return {"denom": coin.denom, "amount": str(coin.amount)}


def _cw20_coin_json(coin):
    return {"address": coin.address, "amount": str(coin.amount)}


def _balance_human_json(balance):
    if isinstance(balance, NativeBalance):
        return {"Native": [_coin_json(coin) for coin in balance.coins]}
    if isinstance(balance, Cw20Balance):
        return {"Cw20": _cw20_coin_json(balance.coin)}
    raise TypeError(f"unsupported balance {balance!r}")


@dataclass(frozen=True)
class Cw20ReceiveMsg:
    """Sent by a cw20 contract when tokens are transferred to this contract."""

    sender: str
    amount: int
    msg: bytes


@dataclass(frozen=True)
class InstantiateMsg:
    """Sets up the contract; it takes no parameters."""


# Execute messages


@dataclass(frozen=True)
class CreateMsg:
    """Open a swap.

    ``id`` is a human-readable name of 3 to 20 bytes, ``hash`` the hex-encoded
    sha-256 hash of the preimage (64 characters). Funds go to ``recipient`` on
    release; after ``expires`` they can be returned to the funder.
    """

    id: str
    hash: str
    recipient: str
    expires: Expiration


@dataclass(frozen=True)
class Release:
    """Send all tokens of a swap to its recipient.

    ``preimage`` is 32 bytes in hex, with sha256(preimage) equal to the hash.
    """

    id: str
    preimage: str


@dataclass(frozen=True)
class Refund:
    """Return all remaining tokens of an expired swap to its source."""

    id: str


@dataclass(frozen=True)
class Receive:
    """Carries a receive hook from a cw20 contract."""

    msg: Cw20ReceiveMsg


# Query messages


@dataclass(frozen=True)
class ListSwaps:
    """List the ids of all open swaps."""

    start_after: str | None = None
    limit: int | None = None


@dataclass(frozen=True)
class Details:
    """Show one swap; an error if it was never created."""

    id: str


# Responses


@dataclass(frozen=True)
class ListResponse:
    """The ids of open swaps."""

    swaps: tuple

    def __post_init__(self):
        object.__setattr__(self, "swaps", tuple(self.swaps))

    def to_json(self):
        return {"swaps": list(self.swaps)}


@dataclass(frozen=True)
class DetailsResponse:
    """Everything known about one swap."""

    id: str
    hash: str
    recipient: str
    source: str
    expires: Expiration
    balance: NativeBalance | Cw20Balance

    def to_json(self):
        return {
            "id": self.id,
            "hash": self.hash,
            "recipient": self.recipient,
            "source": self.source,
            "expires": self.expires.to_json(),
            "balance": _balance_human_json(self.balance),
        }