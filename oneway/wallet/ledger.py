"""The wallet ledger: append-only transactions and the balance folded from them."""

import logging
import threading
import uuid
from dataclasses import dataclass
from decimal import Decimal

from oneway.clock import Clock, SystemClock
from oneway.config import settings
from oneway.wallet.errors import (  # noqa: F401
    AccountFrozen,
    BelowMinimumPayout,
    InsufficientFunds,
    InvalidAmount,
    NoPaymentMethod,
    UnknownPaymentMethod,
    WalletError,
)
from oneway.wallet.fees import compute_fee, to_money
from oneway.wallet.models import (
    Funding,
    Receipt,
    ReceiptType,
    Transaction,
    TransactionType,
    Wallet,
)
from oneway.wallet.payments import PaymentMethods

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

# Money coming into the wallet
INCOMING_TYPES = {TransactionType.DEPOSIT, TransactionType.RECEIVE, TransactionType.SALE}
# Money leaving the wallet, from the balance or on credit
OUTGOING_TYPES = {
    TransactionType.SEND,
    TransactionType.PURCHASE,
    TransactionType.DEMO,
    TransactionType.TOUR,
    TransactionType.SPONSOR,
    TransactionType.PAYOUT,
}


@dataclass(frozen=True)
class SaleQuote:
    """Split of a sale price between the seller and the platform."""
    price: Decimal
    fee: Decimal

    @property
    def earnings(self) -> Decimal:
        return self.price - self.fee


class WalletLedger:
    """A single user's wallet.

    Every change goes through one append path, and the balance, outstanding
    credit and frozen flag are always folded from the recorded transactions.
    Spending checks (positive amount, enough balance, no outstanding credit)
    are enforced here for every caller.

    Args:
        owner_id: The user the wallet belongs to
        clock: Source of transaction timestamps
        starting_balance: Recorded as an opening deposit when positive
    """

    def __init__(
        self,
        owner_id: str,
        clock: Clock | None = None,
        starting_balance: Decimal | int | str | None = None,
        min_payout: Decimal | int | str | None = None,
        demo_price: Decimal | int | str | None = None,
        tour_price: Decimal | int | str | None = None,
    ):
        self.owner_id = owner_id
        self.clock = clock or SystemClock()
        self.min_payout = to_money(min_payout if min_payout is not None else settings.MIN_PAYOUT)
        self.demo_price = to_money(demo_price if demo_price is not None else settings.DEMO_PRICE)
        self.tour_price = to_money(tour_price if tour_price is not None else settings.TOUR_PRICE)
        self._transactions: list[Transaction] = []
        self._receipts: list[Receipt] = []
        self._lock = threading.RLock()
        self.payment_methods = PaymentMethods()

        opening = to_money(starting_balance if starting_balance is not None else settings.STARTING_BALANCE)
        if opening < ZERO:
            raise InvalidAmount(f"Starting balance must not be negative, got {opening}")
        if opening > ZERO:
            self.record_transaction(TransactionType.DEPOSIT, opening, description="Opening balance")

    # -- summary ---------------------------------------------------------

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    @property
    def receipts(self) -> tuple[Receipt, ...]:
        """Receipts, newest first."""
        return tuple(reversed(self._receipts))

    @property
    def balance(self) -> Decimal:
        return sum((tx.balance_delta for tx in self._transactions), ZERO)

    @property
    def credits(self) -> Decimal:
        return sum((tx.credit_delta for tx in self._transactions), ZERO)

    @property
    def frozen(self) -> bool:
        return self.credits > ZERO

    @property
    def wallet(self) -> Wallet:
        credits = self.credits
        return Wallet(balance=self.balance, credits=credits, frozen=credits > ZERO)

    # -- core operations -------------------------------------------------

    def _append(self, tx_type: TransactionType, amount: Decimal, fee: Decimal,
                description: str, balance_delta: Decimal, credit_delta: Decimal = ZERO,
                from_id: str | None = None, to_id: str | None = None) -> Transaction:
        tx = Transaction(
            id=uuid.uuid4().hex,
            type=tx_type,
            amount=amount,
            fee=fee,
            description=description,
            timestamp=self.clock.now(),
            balance_delta=balance_delta,
            credit_delta=credit_delta,
            from_id=from_id,
            to_id=to_id,
        )
        self._transactions.append(tx)
        logger.info("Wallet %s: %s $%s (fee $%s) %s", self.owner_id, tx_type.value, amount, fee, description)
        return tx

    def record_transaction(
        self,
        tx_type: TransactionType,
        amount: Decimal | int | str,
        fee: Decimal | int | str | None = None,
        description: str = "",
        from_id: str | None = None,
        to_id: str | None = None,
        funding: Funding = Funding.BALANCE,
    ) -> Transaction:
        """Append a transaction and apply its effect on the wallet.

        Args:
            tx_type: Kind of movement; decides the direction of the money
            amount: Gross amount, must be positive
            fee: Platform fee; defaults to the fee policy for ``tx_type``
            funding: For outgoing types, whether the balance pays or the
                amount is taken on credit. Ignored for incoming types.

        Returns:
            The recorded Transaction

        Raises:
            InvalidAmount: If the amount is not positive or the type cannot
                be funded the requested way
            AccountFrozen: If spending while credit is outstanding
            InsufficientFunds: If the balance cannot cover a debit
        """
        amount = to_money(amount)
        if amount <= ZERO:
            raise InvalidAmount(f"Amount must be positive, got {amount}")
        fee = compute_fee(tx_type, amount) if fee is None else to_money(fee)
        if fee < ZERO or fee > amount:
            raise InvalidAmount(f"Fee ${fee} is outside 0..${amount}")

        with self._lock:
            balance_delta = ZERO
            credit_delta = ZERO

            if tx_type in INCOMING_TYPES:
                # Sales land in the wallet net of the platform fee
                balance_delta = amount - fee if tx_type == TransactionType.SALE else amount
            elif tx_type in OUTGOING_TYPES:
                if self.frozen:
                    raise AccountFrozen(self.credits)
                if funding == Funding.CREDIT:
                    credit_delta = amount
                elif funding == Funding.BALANCE:
                    self._require_balance(amount)
                    balance_delta = -amount
                else:
                    raise InvalidAmount(f"{tx_type.value} must be paid from balance or credit")
            elif tx_type == TransactionType.REPAYMENT:
                outstanding = self.credits
                if amount > outstanding:
                    raise InvalidAmount(f"Repayment ${amount} exceeds outstanding credit ${outstanding}")
                self._require_balance(amount)
                balance_delta = -amount
                credit_delta = -amount
            elif tx_type == TransactionType.REQUEST:
                pass
            else:
                raise InvalidAmount(f"Use adjust_balance for {tx_type.value} transactions")

            return self._append(tx_type, amount, fee, description, balance_delta, credit_delta,
                                from_id=from_id, to_id=to_id)

    def _require_balance(self, amount: Decimal) -> None:
        available = self.balance
        if available < amount:
            raise InsufficientFunds(amount, available)

    def adjust_balance(self, delta: Decimal | int | str, description: str = "Balance adjustment") -> Transaction:
        """Move the balance by a signed amount, recorded as an adjustment."""
        delta = to_money(delta)
        if delta == ZERO:
            raise InvalidAmount("Adjustment must not be zero")
        with self._lock:
            if delta < ZERO:
                if self.frozen:
                    raise AccountFrozen(self.credits)
                self._require_balance(-delta)
            return self._append(TransactionType.ADJUSTMENT, delta, ZERO, description, delta)

    def grant_credit(self, amount: Decimal | int | str, tx_type: TransactionType,
                     description: str = "", to_id: str | None = None) -> Transaction:
        """Pay for an outgoing transaction on credit. Freezes the wallet."""
        if tx_type not in OUTGOING_TYPES:
            raise InvalidAmount(f"{tx_type.value} cannot be taken on credit")
        return self.record_transaction(tx_type, amount, description=description,
                                       to_id=to_id, funding=Funding.CREDIT)

    def add_receipt(self, receipt_type: ReceiptType, amount: Decimal | int | str,
                    fee: Decimal | int | str, description: str, payment_method: str,
                    transaction_id: str | None = None) -> Receipt:
        receipt = Receipt(
            id=uuid.uuid4().hex,
            type=ReceiptType(receipt_type),
            amount=to_money(amount),
            fee=to_money(fee),
            description=description,
            payment_method=payment_method,
            timestamp=self.clock.now(),
            transaction_id=transaction_id,
        )
        with self._lock:
            self._receipts.append(receipt)
        return receipt

    # -- app operations --------------------------------------------------

    def add_funds(self, amount: Decimal | int | str, method_id: str | None = None) -> Transaction:
        """Deposit from a payment method, the default one unless given.

        Raises:
            NoPaymentMethod: If no method is given and none is registered
            UnknownPaymentMethod: If ``method_id`` is not registered
        """
        with self._lock:
            method = self.payment_methods.resolve(method_id)
            tx = self.record_transaction(
                TransactionType.DEPOSIT, amount, description=f"Added funds via {method.name}"
            )
            self.add_receipt(ReceiptType.DEPOSIT, tx.amount, tx.fee, "Added funds to wallet",
                             method.name, transaction_id=tx.id)
            return tx

    def book_demo(self, use_credit: bool = False) -> Transaction:
        """Book a demo session at the configured price (20% fee)."""
        if use_credit:
            return self.grant_credit(self.demo_price, TransactionType.DEMO, "Demo Session (Credit)")
        return self.record_transaction(TransactionType.DEMO, self.demo_price, description="Demo Session")

    def book_live_tour(self, virtual: bool = True, use_credit: bool = False) -> Transaction:
        """Book a live screen (virtual) or studio tour (20% fee)."""
        description = f"Live {'Screen' if virtual else 'Studio'} Tour"
        if use_credit:
            return self.grant_credit(self.tour_price, TransactionType.TOUR, f"{description} (Credit)")
        return self.record_transaction(TransactionType.TOUR, self.tour_price, description=description)

    def purchase_item(self, title: str, price: Decimal | int | str,
                      artist_id: str | None = None) -> Transaction:
        return self.record_transaction(
            TransactionType.PURCHASE, price, description=f"Purchased {title}", to_id=artist_id
        )

    @staticmethod
    def quote_sale(price: Decimal | int | str) -> SaleQuote:
        """Show what a seller earns per sale at the given price."""
        price = to_money(price)
        if price <= ZERO:
            raise InvalidAmount(f"Price must be positive, got {price}")
        return SaleQuote(price=price, fee=compute_fee(TransactionType.SALE, price))

    def record_sale(self, title: str, price: Decimal | int | str,
                    buyer_id: str | None = None) -> Transaction:
        """Credit the seller with a sale, net of the 20% fee."""
        return self.record_transaction(
            TransactionType.SALE, price, description=f"Sold {title}",
            from_id=buyer_id, to_id=self.owner_id,
        )

    def instant_payout(self, amount: Decimal | int | str, method_id: str | None = None) -> Transaction:
        """Cash out to a payment method. 2% fee, minimum payout applies."""
        amount = to_money(amount)
        if amount < self.min_payout:
            raise BelowMinimumPayout(amount, self.min_payout)
        with self._lock:
            method = self.payment_methods.resolve(method_id)
            description = f"Instant payout to {method.name}"
            tx = self.record_transaction(TransactionType.PAYOUT, amount, description=description)
            self.add_receipt(ReceiptType.PAYOUT, tx.amount, tx.fee, description,
                             method.name, transaction_id=tx.id)
            return tx

    def send_money(self, to_id: str, amount: Decimal | int | str,
                   recipient_name: str, note: str = "") -> Transaction:
        description = f"Sent to {recipient_name}" + (f": {note}" if note else "")
        return self.record_transaction(
            TransactionType.SEND, amount, description=description,
            from_id=self.owner_id, to_id=to_id,
        )

    def request_money(self, from_id: str, amount: Decimal | int | str,
                      sender_name: str) -> Transaction:
        """Record a money request. It does not move the balance."""
        amount = to_money(amount)
        return self.record_transaction(
            TransactionType.REQUEST, amount,
            description=f"Requested ${amount:.2f} from {sender_name}",
            from_id=from_id, to_id=self.owner_id, funding=Funding.NONE,
        )

    def sponsor(self, artist_id: str, amount: Decimal | int | str,
                artist_name: str, tier_name: str | None = None) -> Transaction:
        description = f"Sponsored {artist_name}" + (f" ({tier_name})" if tier_name else "")
        return self.record_transaction(
            TransactionType.SPONSOR, amount, description=description,
            from_id=self.owner_id, to_id=artist_id,
        )

    def repay_credit(self, amount: Decimal | int | str | None = None) -> Transaction:
        """Pay down outstanding credit from the balance, all of it by default."""
        if amount is None:
            amount = self.credits
        return self.record_transaction(TransactionType.REPAYMENT, amount, description="Credit repayment")
