import pytest

from cwtokens import errors
from cwtokens.storage import Bound, Item, Map, Order, Storage


@pytest.fixture
def storage():
    return Storage()


@pytest.fixture
def swaps(storage):
    ids = Map("atomic_swap")
    for name in ("lazy", "assign", "zen"):
        ids.save(storage, name, {"id": name})
    return ids


def test_item_load_missing_raises(storage):
    minter = Item("minter")
    with pytest.raises(errors.NotFoundError):
        minter.load(storage)
    assert minter.may_load(storage) is None


def test_item_save_and_load(storage):
    minter = Item("minter")
    minter.save(storage, "minter")
    assert minter.load(storage) == "minter"
    assert minter.may_load(storage) == "minter"


def test_map_save_load_has_remove(storage):
    tokens = Map("tokens")
    assert not tokens.has(storage, "token1")
    tokens.save(storage, "token1", "")
    assert tokens.has(storage, "token1")
    assert tokens.load(storage, "token1") == ""
    tokens.remove(storage, "token1")
    assert tokens.may_load(storage, "token1") is None
    tokens.remove(storage, "token1")
    assert len(storage) == 0


def test_map_load_missing_raises(storage):
    with pytest.raises(errors.NotFoundError):
        Map("tokens").load(storage, "nothing")


def test_map_values_are_copied(storage):
    data = Map("data")
    value = [1, 2]
    data.save(storage, "k", value)
    value.append(3)
    loaded = data.load(storage, "k")
    loaded.append(4)
    assert data.load(storage, "k") == [1, 2]


def test_update_applies_action(storage):
    balances = Map("balances")
    key = ("user1", "token1")
    assert balances.update(storage, key, lambda old: (old or 0) + 5) == 5
    assert balances.update(storage, key, lambda old: (old or 0) + 5) == 10
    assert balances.load(storage, key) == 10


def test_update_failure_leaves_value(storage):
    balances = Map("balances")
    balances.save(storage, "k", 1)

    def fail(_old):
        raise errors.OverflowError()

    with pytest.raises(errors.OverflowError):
        balances.update(storage, "k", fail)
    assert balances.load(storage, "k") == 1


def test_keys_ascending(storage, swaps):
    assert list(swaps.keys(storage)) == ["assign", "lazy", "zen"]


def test_keys_descending(storage, swaps):
    assert list(swaps.keys(storage, order=Order.DESCENDING)) == ["zen", "lazy", "assign"]


def test_range_yields_values(storage, swaps):
    assert dict(swaps.range(storage)) == {
        name: {"id": name} for name in ("assign", "lazy", "zen")
    }


def test_exclusive_and_inclusive_bounds(storage, swaps):
    assert list(swaps.keys(storage, start=Bound.exclusive("lazy"))) == ["zen"]
    assert list(swaps.keys(storage, start=Bound.inclusive("lazy"))) == ["lazy", "zen"]
    assert list(swaps.keys(storage, end=Bound.exclusive("lazy"))) == ["assign"]
    assert list(swaps.keys(storage, end=Bound.inclusive("lazy"))) == ["assign", "lazy"]


def test_empty_range(storage):
    assert list(Map("atomic_swap").keys(storage)) == []


def test_prefix_selects_one_owner(storage):
    balances = Map("balances")
    for owner in ("user0", "user1"):
        for token in ("token2", "token0", "token1"):
            balances.save(storage, (owner, token), 1)
    assert list(balances.prefix("user1").keys(storage)) == ["token0", "token1", "token2"]
    assert list(
        balances.prefix("user0").keys(storage, start=Bound.exclusive("token0"))
    ) == ["token1", "token2"]


def test_composite_keys_without_prefix_are_tuples(storage):
    approves = Map("approves")
    approves.save(storage, ("b", "x"), 1)
    approves.save(storage, ("a", "y"), 2)
    assert list(approves.range(storage)) == [(("a", "y"), 2), (("b", "x"), 1)]


def test_namespaces_do_not_collide(storage):
    Map("tokens").save(storage, "k", "tokens")
    Map("balances").save(storage, "k", "balances")
    Item("tokens").save(storage, "item")
    assert list(Map("tokens").range(storage)) == [("k", "tokens")]
    assert Item("tokens").load(storage) == "item"


def test_invalid_key_type(storage):
    with pytest.raises(TypeError):
        Map("tokens").save(storage, 5, "x")