"""Messages, responses and events of the multi-token contract."""

from __future__ import annotations

import base64
from dataclasses import dataclass

from ..primitives import Expiration, WasmExecuteMsg, to_binary


def _freeze(instance, name, convert=tuple):
    object.__setattr__(instance, name, convert(getattr(instance, name)))


def _freeze_batch(instance):
    _freeze(instance, "batch", lambda pairs: tuple(tuple(pair) for pair in pairs))


@dataclass(frozen=True)
class InstantiateMsg:
    """Sets up the contract.

    The minter is the only one who can create new tokens.
    """

    minter: str


# Execute messages


@dataclass(frozen=True)
class SendFrom:
    """Move ``value`` of ``token_id`` from one owner to another."""

    from_: str
    to: str
    token_id: str
    value: int
    msg: bytes | None = None


@dataclass(frozen=True)
class BatchSendFrom:
    """Move several tokens from one owner to another."""

    from_: str
    to: str
    batch: tuple
    msg: bytes | None = None

    def __post_init__(self):
        _freeze_batch(self)


@dataclass(frozen=True)
class Mint:
    """Create new tokens; only the minter may send it."""

    to: str
    token_id: str
    value: int
    msg: bytes | None = None


@dataclass(frozen=True)
class BatchMint:
    """Create several tokens at once; only the minter may send it."""

    to: str
    batch: tuple
    msg: bytes | None = None

    def __post_init__(self):
        _freeze_batch(self)


@dataclass(frozen=True)
class Burn:
    """Destroy ``value`` of ``token_id`` held by ``from_``."""

    from_: str
    token_id: str
    value: int


@dataclass(frozen=True)
class BatchBurn:
    """Destroy several tokens held by ``from_``."""

    from_: str
    batch: tuple

    def __post_init__(self):
        _freeze_batch(self)


@dataclass(frozen=True)
class ApproveAll:
    """Let ``operator`` move all of the sender's tokens until ``expires``."""

    operator: str
    expires: Expiration | None = None


@dataclass(frozen=True)
class RevokeAll:
    """Withdraw an operator's approval."""

    operator: str


# Query messages


@dataclass(frozen=True)
class Balance:
    owner: str
    token_id: str


@dataclass(frozen=True)
class BatchBalance:
    owner: str
    token_ids: tuple

    def __post_init__(self):
        _freeze(self, "token_ids")


@dataclass(frozen=True)
class IsApprovedForAll:
    owner: str
    operator: str


@dataclass(frozen=True)
class ApprovedForAll:
    owner: str
    include_expired: bool | None = None
    start_after: str | None = None
    limit: int | None = None


@dataclass(frozen=True)
class TokenInfo:
    token_id: str


@dataclass(frozen=True)
class Tokens:
    owner: str
    start_after: str | None = None
    limit: int | None = None


@dataclass(frozen=True)
class AllTokens:
    start_after: str | None = None
    limit: int | None = None


# Responses


@dataclass(frozen=True)
class BalanceResponse:
    balance: int

    def to_json(self):
        return {"balance": str(self.balance)}


@dataclass(frozen=True)
class BatchBalanceResponse:
    balances: tuple

    def __post_init__(self):
        _freeze(self, "balances")

    def to_json(self):
        return {"balances": [str(balance) for balance in self.balances]}


@dataclass(frozen=True)
class Approval:
    """An operator allowed to act for an owner, and until when."""

    spender: str
    expires: Expiration

    def to_json(self):
        return {"spender": self.spender, "expires": self.expires.to_json()}


@dataclass(frozen=True)
class ApprovedForAllResponse:
    operators: tuple

    def __post_init__(self):
        _freeze(self, "operators")

    def to_json(self):
        return {"operators": [approval.to_json() for approval in self.operators]}


@dataclass(frozen=True)
class IsApprovedForAllResponse:
    approved: bool

    def to_json(self):
        return {"approved": self.approved}


@dataclass(frozen=True)
class TokenInfoResponse:
    url: str

    def to_json(self):
        return {"url": self.url}


@dataclass(frozen=True)
class TokensResponse:
    tokens: tuple

    def __post_init__(self):
        _freeze(self, "tokens")

    def to_json(self):
        return {"tokens": list(self.tokens)}


# Hooks sent to receiving contracts


def _encode(payload):
    return base64.b64encode(payload).decode("ascii")


@dataclass(frozen=True)
class ReceiveMsg:
    """Notifies a contract that it received a single token."""

    operator: str
    from_: str | None
    token_id: str
    amount: int
    msg: bytes

    def to_json(self):
        return {
            "operator": self.operator,
            "from": self.from_,
            "token_id": self.token_id,
            "amount": str(self.amount),
            "msg": _encode(self.msg),
        }

    def into_cosmos_msg(self, contract_addr):
        """Wrap the hook in a message that executes ``contract_addr``."""
        return WasmExecuteMsg(contract_addr, to_binary({"receive": self.to_json()}))


@dataclass(frozen=True)
class BatchReceiveMsg:
    """Notifies a contract that it received several tokens."""

    operator: str
    from_: str | None
    batch: tuple
    msg: bytes

    def __post_init__(self):
        _freeze_batch(self)

    def to_json(self):
        return {
            "operator": self.operator,
            "from": self.from_,
            "batch": [[token_id, str(amount)] for token_id, amount in self.batch],
            "msg": _encode(self.msg),
        }

    def into_cosmos_msg(self, contract_addr):
        """Wrap the hook in a message that executes ``contract_addr``."""
        return WasmExecuteMsg(contract_addr, to_binary({"batch_receive": self.to_json()}))


# Events


@dataclass(frozen=True)
class TransferEvent:
    """A balance change; no ``from_`` means a mint, no ``to`` a burn."""

    from_: str | None
    to: str | None
    token_id: str
    amount: int

    def add_attributes(self, response):
        response.add_attribute("action", "transfer")
        response.add_attribute("token_id", self.token_id)
        response.add_attribute("amount", self.amount)
        if self.from_ is not None:
            response.add_attribute("from", self.from_)
        if self.to is not None:
            response.add_attribute("to", self.to)
        return response


@dataclass(frozen=True)
class ApproveAllEvent:
    """An operator approval was granted or revoked."""

    sender: str
    operator: str
    approved: bool

    def add_attributes(self, response):
        response.add_attribute("action", "approve_all")
        response.add_attribute("sender", self.sender)
        response.add_attribute("operator", self.operator)
        response.add_attribute("approved", int(self.approved))
        return response