"""Errors reported by the token contracts."""


class ContractError(Exception):
    """Base class of every error a contract reports."""

    default_message = "Contract error"

    def __init__(self, message=None):
        self.message = self.default_message if message is None else message
        super().__init__(self.message)


class StdError(ContractError):
    """A failure of the underlying runtime: storage, arithmetic, addresses."""

    default_message = "Generic error"


class OverflowError(StdError):  # noqa: A001
    """An arithmetic operation left the range of an unsigned 128-bit integer."""

    default_message = "Overflow"


class NotFoundError(StdError):
    """A value expected in storage is missing."""

    default_message = "Not found"


class InvalidAddressError(StdError):
    """An address did not pass validation."""

    default_message = "Invalid address"


class UnauthorizedError(ContractError):
    """The sender may not perform the requested action."""

    default_message = "Unauthorized"


class ExpiredError(ContractError):
    """An expiration lies in the past."""

    default_message = "Expired"


class ParseError(ContractError):
    """A hash could not be decoded."""

    def __init__(self, detail):
        self.detail = detail
        super().__init__(f"Hash parse error: {detail}")


class InvalidIdError(ContractError):
    """An atomic swap id is not acceptable."""

    default_message = "Invalid atomic swap id"


class InvalidPreimageError(ContractError):
    """A preimage does not match the stored hash."""

    default_message = "Invalid preimage"


class InvalidHashError(ContractError):
    """A hex-encoded hash has the wrong length."""

    def __init__(self, length):
        self.length = length
        super().__init__(f"Invalid hash ({length} chars): must be 64 characters")


class EmptyBalanceError(ContractError):
    """A swap was created without any funds."""

    default_message = "Send some coins to create an atomic swap"


class NotExpiredError(ContractError):
    """A refund was requested before the swap expired."""

    default_message = "Atomic swap not yet expired"


class AlreadyExistsError(ContractError):
    """A swap with the same id already exists."""

    default_message = "Atomic swap already exists"