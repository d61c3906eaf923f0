"""Shared fixtures for wallet tests."""

import pytest
from tests.conftest import START

from oneway.clock import FrozenClock
from oneway.wallet.ledger import WalletLedger
from oneway.wallet.models import PaymentMethodType


@pytest.fixture
def clock():
    return FrozenClock(START)


@pytest.fixture
def wallet(clock):
    """The demo wallet: $250 opening balance, $10 minimum payout, $100 demos and tours.

    Its default payment method is a debit card named "Chase Debit".
    """
    wallet = WalletLedger(
        "user1",
        clock=clock,
        starting_balance=250,
        min_payout=10,
        demo_price=100,
        tour_price=100,
    )
    wallet.payment_methods.add(PaymentMethodType.CARD, "Chase Debit", last4="4242")
    return wallet


@pytest.fixture
def empty_wallet(clock):
    return WalletLedger("user1", clock=clock, starting_balance=0)
