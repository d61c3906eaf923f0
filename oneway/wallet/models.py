"""Wallet records: transactions and the derived wallet summary."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any


class TransactionType(str, Enum):
    DEPOSIT = "deposit"
    SEND = "send"
    RECEIVE = "receive"
    REQUEST = "request"
    PURCHASE = "purchase"
    SALE = "sale"
    DEMO = "demo"
    TOUR = "tour"
    SPONSOR = "sponsor"
    PAYOUT = "payout"
    REPAYMENT = "repayment"
    ADJUSTMENT = "adjustment"


class Funding(str, Enum):
    """Where the money for a transaction comes from."""
    BALANCE = "balance"
    CREDIT = "credit"
    NONE = "none"  # records with no wallet effect, e.g. money requests


@dataclass(frozen=True)
class Transaction:
    """An immutable wallet ledger record.

    Attributes:
        amount: Gross amount, always positive except for adjustments
        fee: Platform fee taken out of ``amount``
        balance_delta: Signed change this record makes to the balance
        credit_delta: Signed change this record makes to outstanding credit
        from_id, to_id: Counterparties for transfers, if any
    """
    id: str
    type: TransactionType
    amount: Decimal
    fee: Decimal
    description: str
    timestamp: datetime
    balance_delta: Decimal
    credit_delta: Decimal = Decimal("0")
    from_id: str | None = None
    to_id: str | None = None

    @property
    def net_amount(self) -> Decimal:
        """What the receiving side ends up with after the fee."""
        return self.amount - self.fee

    def to_dict(self) -> dict[str, Any]:
        data = {
            "id": self.id,
            "type": self.type.value,
            "amount": str(self.amount),
            "fee": str(self.fee),
            "net_amount": str(self.net_amount),
            "description": self.description,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.from_id is not None:
            data["from_id"] = self.from_id
        if self.to_id is not None:
            data["to_id"] = self.to_id
        return data


@dataclass(frozen=True)
class Wallet:
    """Wallet summary computed from the transaction ledger."""
    balance: Decimal
    credits: Decimal
    frozen: bool


class PaymentMethodType(str, Enum):
    CARD = "card"
    PAYPAL = "paypal"
    CASHAPP = "cashapp"
    CHIME = "chime"
    APPLEPAY = "applepay"
    BANK = "bank"


@dataclass(frozen=True)
class PaymentMethod:
    """An external account used to add funds or receive payouts."""
    id: str
    type: PaymentMethodType
    name: str
    is_default: bool = False
    last4: str | None = None
    email: str | None = None


class ReceiptType(str, Enum):
    PURCHASE = "purchase"
    SUBSCRIPTION = "subscription"
    PAYOUT = "payout"
    DEPOSIT = "deposit"


class ReceiptStatus(str, Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    FAILED = "failed"


@dataclass(frozen=True)
class Receipt:
    """A receipt for money moved through an external payment method."""
    id: str
    type: ReceiptType
    amount: Decimal
    fee: Decimal
    description: str
    payment_method: str
    timestamp: datetime
    status: ReceiptStatus = ReceiptStatus.COMPLETED
    transaction_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "amount": str(self.amount),
            "fee": str(self.fee),
            "description": self.description,
            "payment_method": self.payment_method,
            "status": self.status.value,
            "timestamp": self.timestamp.isoformat(),
        }
