"""Exceptions raised by wallet operations."""

from decimal import Decimal


class WalletError(Exception):
    """Base class for rejected wallet operations."""
    pass


class InvalidAmount(WalletError):
    pass


class InsufficientFunds(WalletError):
    def __init__(self, required: Decimal, available: Decimal):
        self.required = required
        self.available = available
        super().__init__(f"Insufficient funds: need ${required:.2f}, have ${available:.2f}")


class AccountFrozen(WalletError):
    """Raised when spending while credit is outstanding."""

    def __init__(self, credits: Decimal):
        self.credits = credits
        super().__init__(f"Account frozen: pay off ${credits:.2f} of credit first")


class BelowMinimumPayout(WalletError):
    def __init__(self, amount: Decimal, minimum: Decimal):
        self.amount = amount
        self.minimum = minimum
        super().__init__(f"Minimum payout amount is ${minimum:.2f}, got ${amount:.2f}")


class NoPaymentMethod(WalletError):
    """Raised when an operation needs a payment method and none is set up."""
    pass


class UnknownPaymentMethod(WalletError):
    def __init__(self, method_id: str):
        self.method_id = method_id
        super().__init__(f"No payment method with id {method_id}")
