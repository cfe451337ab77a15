import json

import pytest

from cwtokens.atomic_swap.messages import (
    Coin,
    CreateMsg,
    Cw20Balance,
    Cw20Coin,
    Cw20ReceiveMsg,
    Details,
    DetailsResponse,
    ListResponse,
    ListSwaps,
    NativeBalance,
    Receive,
    Release,
    is_valid_name,
)
from cwtokens.primitives import Expiration, to_binary


@pytest.mark.parametrize("name", ["abc", "a" * 20, "swap-one"])
def test_valid_names(name):
    assert is_valid_name(name) is True


@pytest.mark.parametrize("name", ["", "ab", "a" * 21])
def test_invalid_names(name):
    assert is_valid_name(name) is False


def test_name_length_counts_bytes():
    # two characters, four bytes
    assert is_valid_name("\u00e9\u00e9") is True
    # twenty characters, forty bytes
    assert is_valid_name("\u00e9" * 20) is False


def test_list_response_json():
    response = ListResponse(["assign", "lazy"])
    assert response.to_json() == {"swaps": ["assign", "lazy"]}
    assert response.swaps == ("assign", "lazy")


def test_list_response_binary_round_trip():
    response = ListResponse(["zen"])
    assert json.loads(to_binary(response)) == {"swaps": ["zen"]}


def test_details_response_native_balance():
    response = DetailsResponse(
        id="swap1",
        hash="ab" * 32,
        recipient="recip",
        source="source",
        expires=Expiration.at_height(100),
        balance=NativeBalance([Coin("atom", 5)]),
    )
    data = response.to_json()
    assert data["balance"] == {"Native": [{"denom": "atom", "amount": "5"}]}
    assert data["expires"] == Expiration.at_height(100).to_json()
    assert data["id"] == "swap1"
    assert data["hash"] == "ab" * 32
    assert data["recipient"] == "recip"
    assert data["source"] == "source"


def test_details_response_cw20_balance():
    response = DetailsResponse(
        id="swap2",
        hash="cd" * 32,
        recipient="recip",
        source="source",
        expires=Expiration.never(),
        balance=Cw20Balance(Cw20Coin("token_contract", 7)),
    )
    data = response.to_json()
    assert data["balance"] == {"Cw20": {"address": "token_contract", "amount": "7"}}
    assert data["expires"] == {"never": {}}


def test_details_response_rejects_unknown_balance():
    response = DetailsResponse("swap3", "", "recip", "source", Expiration.never(), 5)
    with pytest.raises(TypeError):
        response.to_json()


def test_native_balance_is_frozen_tuple():
    balance = NativeBalance([Coin("atom", 1), Coin("btc", 2)])
    assert balance.coins == (Coin("atom", 1), Coin("btc", 2))
    assert NativeBalance().coins == ()


def test_messages_compare_by_value():
    expires = Expiration.at_time(1000)
    assert CreateMsg("id1", "aa", "recip", expires) == CreateMsg("id1", "aa", "recip", expires)
    assert Release("id1", "bb") != Release("id1", "cc")
    hook = Cw20ReceiveMsg("sender", 3, b"{}")
    assert Receive(hook).msg.amount == 3
    assert ListSwaps() == ListSwaps(None, None)
    assert Details("id1").id == "id1"