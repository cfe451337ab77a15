import pytest

from cwtokens import errors


@pytest.mark.parametrize(
    "cls, message",
    [
        (errors.UnauthorizedError, "Unauthorized"),
        (errors.ExpiredError, "Expired"),
        (errors.InvalidIdError, "Invalid atomic swap id"),
        (errors.InvalidPreimageError, "Invalid preimage"),
        (errors.EmptyBalanceError, "Send some coins to create an atomic swap"),
        (errors.NotExpiredError, "Atomic swap not yet expired"),
        (errors.AlreadyExistsError, "Atomic swap already exists"),
    ],
)
def test_default_messages(cls, message):
    err = cls()
    assert str(err) == message
    assert err.message == message


def test_custom_message_overrides_default():
    err = errors.ExpiredError("Expired atomic swap")
    assert str(err) == "Expired atomic swap"


def test_parse_error_message():
    err = errors.ParseError("odd length")
    assert str(err) == "Hash parse error: odd length"
    assert err.detail == "odd length"


def test_invalid_hash_message():
    err = errors.InvalidHashError(12)
    assert str(err) == "Invalid hash (12 chars): must be 64 characters"
    assert err.length == 12


@pytest.mark.parametrize(
    "cls", [errors.OverflowError, errors.NotFoundError, errors.InvalidAddressError]
)
def test_std_errors_are_contract_errors(cls):
    err = cls("boom")
    assert str(err) == "boom"
    assert isinstance(err, errors.StdError)
    assert isinstance(err, errors.ContractError)


def test_unauthorized_is_not_std_error():
    err = errors.UnauthorizedError()
    assert str(err) == "Unauthorized"
    assert isinstance(err, errors.ContractError)
    assert not isinstance(err, errors.StdError)