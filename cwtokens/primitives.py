"""Basic values shared by the contracts: integers, addresses, blocks, responses."""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field
from typing import Any

from . import errors

UINT128_MAX = 2**128 - 1

_MIN_ADDRESS_LENGTH = 3
_MAX_ADDRESS_LENGTH = 54


def _check_uint128(value):
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if not 0 <= value <= UINT128_MAX:
        raise ValueError(f"{value} is outside the unsigned 128-bit range")


def checked_add(a, b):
    """Add two unsigned 128-bit integers, raising on overflow."""
    _check_uint128(a)
    _check_uint128(b)
    total = a + b
    if total > UINT128_MAX:
        raise errors.OverflowError(f"Overflow: Cannot Add with {a} and {b}")
    return total


def checked_sub(a, b):
    """Subtract two unsigned 128-bit integers, raising on underflow."""
    _check_uint128(a)
    _check_uint128(b)
    if b > a:
        raise errors.OverflowError(f"Overflow: Cannot Sub with {a} and {b}")
    return a - b


def validate_address(addr):
    """Return the address unchanged if it is well formed."""
    if not isinstance(addr, str):
        raise errors.InvalidAddressError("Invalid input: address must be a string")
    if len(addr) < _MIN_ADDRESS_LENGTH:
        raise errors.InvalidAddressError("Invalid input: human address too short")
    if len(addr) > _MAX_ADDRESS_LENGTH:
        raise errors.InvalidAddressError("Invalid input: human address too long")
    if addr != addr.lower():
        raise errors.InvalidAddressError("Invalid input: address not normalized")
    return addr


def maybe_address(addr):
    """Validate an optional address; None passes through."""
    return None if addr is None else validate_address(addr)


def to_binary(data):
    """Serialize a value (or anything with ``to_json``) to compact JSON bytes."""
    if hasattr(data, "to_json"):
        data = data.to_json()
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


@dataclass(frozen=True)
class BlockInfo:
    """The block a message is executed in; ``time`` is in nanoseconds."""

    height: int = 12_345
    time: int = 1_571_797_419_879_305_533
    chain_id: str = "cosmos-testnet-14002"


@dataclass(frozen=True)
class Env:
    """Execution environment of a contract call."""

    block: BlockInfo = field(default_factory=BlockInfo)
    contract_address: str = "cosmos2contract"


@dataclass(frozen=True)
class MessageInfo:
    """Who sent a message and which funds came with it."""

    sender: str
    funds: tuple = ()


@dataclass(frozen=True)
class Expiration:
    """A point after which something is no longer valid."""

    kind: str = "never"
    value: int | None = None

    _KINDS = ("at_height", "at_time", "never")

    def __post_init__(self):
        if self.kind not in self._KINDS:
            raise ValueError(f"unknown expiration kind {self.kind!r}")
        if self.kind == "never":
            if self.value is not None:
                raise ValueError("a never-expiring value takes no argument")
        else:
            _check_uint128(self.value)

    @classmethod
    def at_height(cls, height):
        return cls("at_height", height)

    @classmethod
    def at_time(cls, time):
        return cls("at_time", time)

    @classmethod
    def never(cls):
        return cls("never", None)

    def is_expired(self, block):
        if self.kind == "at_height":
            return block.height >= self.value
        if self.kind == "at_time":
            return block.time >= self.value
        return False

    def to_json(self):
        if self.kind == "at_height":
            return {"at_height": self.value}
        if self.kind == "at_time":
            return {"at_time": str(self.value)}
        return {"never": {}}

    @classmethod
    def from_json(cls, data):
        if not isinstance(data, dict) or len(data) != 1:
            raise errors.StdError("Error parsing into type Expiration")
        ((kind, value),) = data.items()
        try:
            if kind == "at_height":
                return cls.at_height(int(value))
            if kind == "at_time":
                return cls.at_time(int(value))
            if kind == "never" and value == {}:
                return cls.never()
        except (TypeError, ValueError) as exc:
            raise errors.StdError(f"Error parsing into type Expiration: {exc}") from exc
        raise errors.StdError(f"Error parsing into type Expiration: unknown variant {kind!r}")


@dataclass(frozen=True)
class WasmExecuteMsg:
    """A message that executes another contract."""

    contract_addr: str
    msg: bytes
    funds: tuple = ()

    def to_json(self):
        return {
            "wasm": {
                "execute": {
                    "contract_addr": self.contract_addr,
                    "msg": base64.b64encode(self.msg).decode("ascii"),
                    "funds": [
                        coin.to_json() if hasattr(coin, "to_json") else coin
                        for coin in self.funds
                    ],
                }
            }
        }


@dataclass
class Response:
    """The outcome of an execution: sub-messages to send and event attributes."""

    messages: list[Any] = field(default_factory=list)
    attributes: list[tuple[str, str]] = field(default_factory=list)

    def add_attribute(self, key, value):
        self.attributes.append((str(key), str(value)))
        return self

    def add_message(self, msg):
        self.messages.append(msg)
        return self