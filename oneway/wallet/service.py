"""Wallet operations as the app screens use them: record, then notify."""

from decimal import Decimal

from oneway.notifications import NotificationSink, NotificationType, transaction_message
from oneway.wallet.ledger import WalletLedger
from oneway.wallet.models import Transaction


class WalletService:
    """Runs wallet operations and pushes a system notification for each one.

    Nothing is pushed when the ledger rejects an operation; the exception
    propagates to the caller unchanged.
    """

    def __init__(self, ledger: WalletLedger, notifications: NotificationSink):
        self.ledger = ledger
        self.notifications = notifications

    def _notify(self, tx: Transaction) -> Transaction:
        title, message = transaction_message(tx)
        self.notifications.push(
            NotificationType.SYSTEM, title, message,
            data={"transaction_id": tx.id, "type": tx.type.value},
        )
        return tx

    def add_funds(self, amount: Decimal | int | str, method_id: str | None = None) -> Transaction:
        return self._notify(self.ledger.add_funds(amount, method_id))

    def book_demo(self, use_credit: bool = False) -> Transaction:
        return self._notify(self.ledger.book_demo(use_credit))

    def book_live_tour(self, virtual: bool = True, use_credit: bool = False) -> Transaction:
        return self._notify(self.ledger.book_live_tour(virtual, use_credit))

    def purchase_item(self, title: str, price: Decimal | int | str,
                      artist_id: str | None = None) -> Transaction:
        return self._notify(self.ledger.purchase_item(title, price, artist_id))

    def record_sale(self, title: str, price: Decimal | int | str,
                    buyer_id: str | None = None) -> Transaction:
        return self._notify(self.ledger.record_sale(title, price, buyer_id))

    def instant_payout(self, amount: Decimal | int | str, method_id: str | None = None) -> Transaction:
        return self._notify(self.ledger.instant_payout(amount, method_id))

    def send_money(self, to_id: str, amount: Decimal | int | str,
                   recipient_name: str, note: str = "") -> Transaction:
        return self._notify(self.ledger.send_money(to_id, amount, recipient_name, note))

    def request_money(self, from_id: str, amount: Decimal | int | str,
                      sender_name: str) -> Transaction:
        return self._notify(self.ledger.request_money(from_id, amount, sender_name))

    def sponsor(self, artist_id: str, amount: Decimal | int | str,
                artist_name: str, tier_name: str | None = None) -> Transaction:
        return self._notify(self.ledger.sponsor(artist_id, amount, artist_name, tier_name))

    def repay_credit(self, amount: Decimal | int | str | None = None) -> Transaction:
        return self._notify(self.ledger.repay_credit(amount))
