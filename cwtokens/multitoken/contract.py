"""A multi-token contract: balances, minting, burning and operator approvals."""

from __future__ import annotations

from contextlib import contextmanager
from itertools import islice

from .. import errors
from ..primitives import (
    Expiration,
    Response,
    checked_add,
    checked_sub,
    maybe_address,
    to_binary,
    validate_address,
)
from ..storage import Bound, Item, Map, Order, Storage
from .messages import (
    AllTokens,
    Approval,
    ApproveAll,
    ApproveAllEvent,
    ApprovedForAll,
    ApprovedForAllResponse,
    Balance,
    BalanceResponse,
    BatchBalance,
    BatchBalanceResponse,
    BatchBurn,
    BatchMint,
    BatchReceiveMsg,
    BatchSendFrom,
    Burn,
    IsApprovedForAll,
    IsApprovedForAllResponse,
    Mint,
    ReceiveMsg,
    RevokeAll,
    SendFrom,
    TokenInfo,
    TokenInfoResponse,
    Tokens,
    TokensResponse,
    TransferEvent,
)

CONTRACT_NAME = "crates.io:cw1155-base"
CONTRACT_VERSION = "0.1.0"

DEFAULT_LIMIT = 10
MAX_LIMIT = 30

CONTRACT_INFO = Item("contract_info")
# The address allowed to mint new tokens.
MINTER = Item("minter")
# (owner, token_id) -> balance
BALANCES = Map("balances")
# (owner, operator) -> expiration
APPROVES = Map("approves")
# token_id -> metadata url; an entry exists for every token ever minted
TOKENS = Map("tokens")


def _page_size(limit):
    return min(DEFAULT_LIMIT if limit is None else limit, MAX_LIMIT)


class MultiTokenContract:
    """The contract bound to one storage.

    A failing ``instantiate`` or ``execute`` leaves the storage as it was.
    """

    def __init__(self, storage=None):
        self.storage = Storage() if storage is None else storage

    @contextmanager
    def _transaction(self):
        snapshot = dict(self.storage.items())
        try:
            yield
        except Exception:
            self.storage.clear()
            self.storage.update(snapshot)
            raise

    def instantiate(self, env, info, msg):
        with self._transaction():
            CONTRACT_INFO.save(
                self.storage, {"contract": CONTRACT_NAME, "version": CONTRACT_VERSION}
            )
            MINTER.save(self.storage, validate_address(msg.minter))
            return Response()

    def execute(self, env, info, msg):
        with self._transaction():
            match msg:
                case SendFrom():
                    return self._send_from(env, info, msg)
                case BatchSendFrom():
                    return self._batch_send_from(env, info, msg)
                case Mint():
                    return self._mint(info, msg)
                case BatchMint():
                    return self._batch_mint(info, msg)
                case Burn():
                    return self._burn(env, info, msg)
                case BatchBurn():
                    return self._batch_burn(env, info, msg)
                case ApproveAll():
                    return self._approve_all(env, info, msg)
                case RevokeAll():
                    return self._revoke_all(info, msg)
                case _:
                    raise TypeError(f"unsupported execute message {msg!r}")

    # Execution helpers

    def _transfer(self, from_addr, to_addr, token_id, amount):
        """Move ``amount``; a missing sender mints, a missing receiver burns.

        Permissions must be checked by the caller.
        """
        if from_addr is not None:
            BALANCES.update(
                self.storage,
                (from_addr, token_id),
                lambda balance: checked_sub(balance or 0, amount),
            )
        if to_addr is not None:
            BALANCES.update(
                self.storage,
                (to_addr, token_id),
                lambda balance: checked_add(balance or 0, amount),
            )
        return TransferEvent(from_addr, to_addr, token_id, amount)

    def _can_approve(self, env, owner, operator):
        if owner == operator:
            return True
        expires = APPROVES.may_load(self.storage, (owner, operator))
        return expires is not None and not expires.is_expired(env.block)

    def _guard_can_approve(self, env, owner, operator):
        if not self._can_approve(env, owner, operator):
            raise errors.UnauthorizedError()

    def _guard_minter(self, sender):
        if sender != MINTER.load(self.storage):
            raise errors.UnauthorizedError()

    def _register_token(self, token_id):
        if not TOKENS.has(self.storage, token_id):
            TOKENS.save(self.storage, token_id, "")

    def _send_from(self, env, info, msg):
        from_addr = validate_address(msg.from_)
        to_addr = validate_address(msg.to)
        self._guard_can_approve(env, from_addr, info.sender)

        rsp = Response()
        self._transfer(from_addr, to_addr, msg.token_id, msg.value).add_attributes(rsp)
        if msg.msg is not None:
            hook = ReceiveMsg(info.sender, msg.from_, msg.token_id, msg.value, msg.msg)
            rsp.add_message(hook.into_cosmos_msg(msg.to))
        return rsp

    def _mint(self, info, msg):
        to_addr = validate_address(msg.to)
        self._guard_minter(info.sender)

        rsp = Response()
        self._transfer(None, to_addr, msg.token_id, msg.value).add_attributes(rsp)
        if msg.msg is not None:
            hook = ReceiveMsg(info.sender, None, msg.token_id, msg.value, msg.msg)
            rsp.add_message(hook.into_cosmos_msg(msg.to))
        self._register_token(msg.token_id)
        return rsp

    def _burn(self, env, info, msg):
        from_addr = validate_address(msg.from_)
        # whoever can transfer these tokens can burn them
        self._guard_can_approve(env, from_addr, info.sender)

        rsp = Response()
        self._transfer(from_addr, None, msg.token_id, msg.value).add_attributes(rsp)
        return rsp

    def _batch_send_from(self, env, info, msg):
        from_addr = validate_address(msg.from_)
        to_addr = validate_address(msg.to)
        self._guard_can_approve(env, from_addr, info.sender)

        rsp = Response()
        for token_id, amount in msg.batch:
            self._transfer(from_addr, to_addr, token_id, amount).add_attributes(rsp)
        if msg.msg is not None:
            hook = BatchReceiveMsg(info.sender, msg.from_, msg.batch, msg.msg)
            rsp.add_message(hook.into_cosmos_msg(msg.to))
        return rsp

    def _batch_mint(self, info, msg):
        self._guard_minter(info.sender)
        to_addr = validate_address(msg.to)

        rsp = Response()
        for token_id, amount in msg.batch:
            self._transfer(None, to_addr, token_id, amount).add_attributes(rsp)
            self._register_token(token_id)
        if msg.msg is not None:
            hook = BatchReceiveMsg(info.sender, None, msg.batch, msg.msg)
            rsp.add_message(hook.into_cosmos_msg(msg.to))
        return rsp

    def _batch_burn(self, env, info, msg):
        from_addr = validate_address(msg.from_)
        self._guard_can_approve(env, from_addr, info.sender)

        rsp = Response()
        for token_id, amount in msg.batch:
            self._transfer(from_addr, None, token_id, amount).add_attributes(rsp)
        return rsp

    def _approve_all(self, env, info, msg):
        expires = Expiration.never() if msg.expires is None else msg.expires
        if expires.is_expired(env.block):
            raise errors.ExpiredError()

        operator_addr = validate_address(msg.operator)
        APPROVES.save(self.storage, (info.sender, operator_addr), expires)
        return ApproveAllEvent(info.sender, msg.operator, True).add_attributes(Response())

    def _revoke_all(self, info, msg):
        operator_addr = validate_address(msg.operator)
        APPROVES.remove(self.storage, (info.sender, operator_addr))
        return ApproveAllEvent(info.sender, msg.operator, False).add_attributes(Response())

    # Queries

    def query(self, env, msg):
        """Answer a query with the JSON-encoded response."""
        match msg:
            case Balance():
                owner = validate_address(msg.owner)
                balance = BALANCES.may_load(self.storage, (owner, msg.token_id)) or 0
                return to_binary(BalanceResponse(balance))
            case BatchBalance():
                owner = validate_address(msg.owner)
                balances = [
                    BALANCES.may_load(self.storage, (owner, token_id)) or 0
                    for token_id in msg.token_ids
                ]
                return to_binary(BatchBalanceResponse(balances))
            case IsApprovedForAll():
                owner = validate_address(msg.owner)
                operator = validate_address(msg.operator)
                return to_binary(
                    IsApprovedForAllResponse(self._can_approve(env, owner, operator))
                )
            case ApprovedForAll():
                owner = validate_address(msg.owner)
                start_addr = maybe_address(msg.start_after)
                return to_binary(
                    self._all_approvals(
                        env, owner, bool(msg.include_expired), start_addr, msg.limit
                    )
                )
            case TokenInfo():
                return to_binary(TokenInfoResponse(TOKENS.load(self.storage, msg.token_id)))
            case Tokens():
                owner = validate_address(msg.owner)
                return to_binary(self._tokens(owner, msg.start_after, msg.limit))
            case AllTokens():
                return to_binary(self._all_tokens(msg.start_after, msg.limit))
            case _:
                raise TypeError(f"unsupported query message {msg!r}")

    def _all_approvals(self, env, owner, include_expired, start_after, limit):
        start = None if start_after is None else Bound.exclusive(start_after)
        entries = APPROVES.prefix(owner).range(self.storage, start, None, Order.ASCENDING)
        live = (
            Approval(spender, expires)
            for spender, expires in entries
            if include_expired or not expires.is_expired(env.block)
        )
        return ApprovedForAllResponse(list(islice(live, _page_size(limit))))

    def _tokens(self, owner, start_after, limit):
        start = None if start_after is None else Bound.exclusive(start_after)
        keys = BALANCES.prefix(owner).keys(self.storage, start, None, Order.ASCENDING)
        return TokensResponse(list(islice(keys, _page_size(limit))))

    def _all_tokens(self, start_after, limit):
        start = None if start_after is None else Bound.exclusive(start_after)
        keys = TOKENS.keys(self.storage, start, None, Order.ASCENDING)
        return TokensResponse(list(islice(keys, _page_size(limit))))