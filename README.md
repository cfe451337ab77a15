# cwtokens

A multi-token ledger contract, and the messages and stored state of a
hash-locked atomic swap, both running on top of a small ordered in-memory
key-value store.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Multi-token contract

`cwtokens.multitoken.contract.MultiTokenContract` keeps balances per
`(owner, token_id)`, a single minter set at instantiation, and operator
approvals that can expire at a block height or a block time.

```python
from cwtokens.storage import Storage
from cwtokens.primitives import Env, BlockInfo, MessageInfo
from cwtokens.multitoken.contract import MultiTokenContract
from cwtokens.multitoken.messages import (
    InstantiateMsg, Mint, SendFrom, ApproveAll, Balance,
)

contract = MultiTokenContract(Storage())
env = Env(block=BlockInfo(height=12345, time=1_571_797_419_879_305_533, chain_id="testing"))

contract.instantiate(env, MessageInfo(sender="operator"), InstantiateMsg(minter="minter"))
contract.execute(env, MessageInfo(sender="minter"),
                 Mint(to="user1", token_id="token1", value=1, msg=None))
contract.execute(env, MessageInfo(sender="user1"),
                 ApproveAll(operator="minter", expires=None))
contract.execute(env, MessageInfo(sender="minter"),
                 SendFrom(from_="user1", to="user2", token_id="token1", value=1, msg=None))

print(contract.query(env, Balance(owner="user2", token_id="token1")))
# b'{"balance":"1"}'
```

Execute messages in `cwtokens.multitoken.messages`: `SendFrom`,
`BatchSendFrom`, `Mint`, `BatchMint`, `Burn`, `BatchBurn`, `ApproveAll`
and `RevokeAll`. Query messages: `Balance`, `BatchBalance`,
`IsApprovedForAll`, `ApprovedForAll`, `TokenInfo`, `Tokens` and
`AllTokens`.

`execute` returns a `Response` (from `cwtokens.primitives`) whose
`attributes` describe each transfer or approval. When a `msg` payload is
given, a `WasmExecuteMsg` carrying a `ReceiveMsg` or `BatchReceiveMsg` hook
for the receiving address is added to `messages`. `query` returns
JSON-encoded bytes, as produced by `cwtokens.primitives.to_binary`.

A failing `instantiate` or `execute` leaves the storage as it was. Failures
are raised as subclasses of `cwtokens.errors.ContractError`:
`UnauthorizedError` when the sender lacks permission, `ExpiredError` when
an approval would already be expired, `OverflowError` when a balance would
leave the unsigned 128-bit range, `InvalidAddressError` for an address that
is shorter than 3 or longer than 54 characters or not lower case, and
`NotFoundError` for a `TokenInfo` query on a token never minted.

Listing queries (`Tokens`, `AllTokens`, `ApprovedForAll`) page through keys
in ascending order, 10 at a time by default and at most 30.

## Atomic swap messages and state

`cwtokens.atomic_swap.messages` holds the swap message types (`CreateMsg`,
`Release`, `Refund`, `Receive`, `ListSwaps`, `Details`), the response types
`ListResponse` and `DetailsResponse`, balance types (`NativeBalance`,
`Cw20Balance`, `Coin`, `Cw20Coin`) and `is_valid_name`, which accepts ids of
3 to 20 bytes of UTF-8 text.

`cwtokens.atomic_swap.state.AtomicSwap` records a swap's hash, recipient,
source, expiration and balance, and `all_swap_ids(storage, start, limit)`
lists the ids of stored swaps in ascending order.

## Storage

`cwtokens.storage` provides `Storage`, a mutable mapping from tuples of
strings to Python values that iterates its keys in sorted order and copies
values in and out, along with `Item`, `Map`, `Bound` and `Order` for single
values, composite keys, prefixes and ranged iteration.

## What this package does not do

- There is no atomic swap contract that executes `CreateMsg`, `Release` or
  `Refund`: only the message types and the stored `AtomicSwap` state are
  provided.
- Storage lives in memory only; nothing is written to disk.
- There is no command-line program and no JSON schema export.