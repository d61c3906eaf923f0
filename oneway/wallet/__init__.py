"""Wallet ledger, payment methods, receipts and the platform fee policy."""

from .errors import (  # noqa: F401
    AccountFrozen,
    BelowMinimumPayout,
    InsufficientFunds,
    InvalidAmount,
    NoPaymentMethod,
    UnknownPaymentMethod,
    WalletError,
)
from .fees import FEE_RATES, compute_fee  # noqa: F401
from .ledger import SaleQuote, WalletLedger  # noqa: F401
from .models import (  # noqa: F401
    Funding,
    PaymentMethod,
    PaymentMethodType,
    Receipt,
    ReceiptStatus,
    ReceiptType,
    Transaction,
    TransactionType,
    Wallet,
)
from .payments import PaymentMethods  # noqa: F401
from .service import WalletService  # noqa: F401
