"""Platform fee policy."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from oneway.wallet.errors import InvalidAmount
from oneway.wallet.models import TransactionType

CENT = Decimal("0.01")

SALES_FEE_RATE = Decimal("0.20")
PAYOUT_FEE_RATE = Decimal("0.02")

# Fee rate charged on each transaction type. Types missing here are free.
FEE_RATES: dict[TransactionType, Decimal] = {
    TransactionType.DEMO: SALES_FEE_RATE,
    TransactionType.TOUR: SALES_FEE_RATE,
    TransactionType.PURCHASE: SALES_FEE_RATE,
    TransactionType.SALE: SALES_FEE_RATE,
    TransactionType.PAYOUT: PAYOUT_FEE_RATE,
}


def to_money(value: Decimal | int | str) -> Decimal:
    """Round a value to whole cents.

    Raises:
        InvalidAmount: If the value is not a finite number
    """
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmount(f"Not a valid amount: {value!r}") from None
    if not amount.is_finite():
        raise InvalidAmount(f"Not a valid amount: {value!r}")
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def fee_rate(tx_type: TransactionType) -> Decimal:
    return FEE_RATES.get(tx_type, Decimal("0"))


def compute_fee(tx_type: TransactionType, amount: Decimal | int | str) -> Decimal:
    """Fee for a transaction of the given type and gross amount.

    >>> compute_fee(TransactionType.DEMO, 100)
    Decimal('20.00')
    >>> compute_fee(TransactionType.PAYOUT, 250)
    Decimal('5.00')
    """
    return to_money(to_money(amount) * fee_rate(tx_type))
