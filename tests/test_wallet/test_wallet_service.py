"""Tests for wallet operations with notifications."""

from decimal import Decimal

import pytest

from oneway.notifications import NotificationCenter, NotificationType
from oneway.wallet.errors import AccountFrozen, BelowMinimumPayout
from oneway.wallet.service import WalletService


@pytest.fixture
def inbox(clock):
    return NotificationCenter(clock=clock)


@pytest.fixture
def service(wallet, inbox):
    return WalletService(wallet, inbox)


class TestWalletNotifications:
    def test_add_funds(self, service, inbox):
        tx = service.add_funds(100)
        [n] = inbox.notifications
        assert n.type == NotificationType.SYSTEM
        assert n.title == "Funds Added"
        assert n.message == "Added funds via Chase Debit: $100.00"
        assert n.data == {"transaction_id": tx.id, "type": "deposit"}

    def test_fee_and_net_in_message(self, service, inbox):
        service.book_demo()
        n = inbox.notifications[0]
        assert n.title == "Demo Booked!"
        assert n.message == "Demo Session: $100.00 (fee $20.00, net $80.00)"

    def test_booking_on_credit(self, service, inbox):
        service.book_live_tour(use_credit=True)
        n = inbox.notifications[0]
        assert n.title == "Tour Booked on Credit!"
        assert "frozen" in n.message

    def test_payout(self, service, inbox):
        service.instant_payout(50)
        n = inbox.notifications[0]
        assert n.title == "Payout Initiated!"
        assert "(fee $1.00, net $49.00)" in n.message

    def test_newest_first(self, service, inbox):
        service.send_money("2", 5, "Lyric Storm")
        service.request_money("3", 15, "Flow Master")
        service.sponsor("4", 25, "Melody Queen")
        assert [n.title for n in inbox.notifications] == [
            "Sponsorship Complete!",
            "Request Sent!",
            "Money Sent!",
        ]

    def test_sale_purchase_and_repayment(self, service, inbox, wallet):
        service.purchase_item("Midnight Beats", 10)
        service.record_sale("Hook", 20)
        service.book_demo(use_credit=True)
        service.repay_credit()
        assert [n.title for n in inbox.notifications] == [
            "Credit Repaid",
            "Demo Booked on Credit!",
            "Sale Complete",
            "Purchase Complete!",
        ]
        assert not wallet.frozen

    def test_rejected_operation_sends_nothing(self, service, inbox, wallet):
        with pytest.raises(BelowMinimumPayout):
            service.instant_payout(5)
        service.book_demo(use_credit=True)
        with pytest.raises(AccountFrozen):
            service.sponsor("1", 10, "DJ Nova")
        assert [n.title for n in inbox.notifications] == ["Demo Booked on Credit!"]
        assert wallet.balance == Decimal("250")
