"""Tests for the platform fee policy."""

from decimal import Decimal

import pytest

from oneway.wallet.errors import InvalidAmount, WalletError
from oneway.wallet.fees import compute_fee, fee_rate, to_money
from oneway.wallet.models import TransactionType


class TestFeeRates:
    @pytest.mark.parametrize("tx_type", [
        TransactionType.DEMO,
        TransactionType.TOUR,
        TransactionType.PURCHASE,
        TransactionType.SALE,
    ])
    def test_sales_fee_is_twenty_percent(self, tx_type):
        assert fee_rate(tx_type) == Decimal("0.20")

    def test_payout_fee_is_two_percent(self):
        assert fee_rate(TransactionType.PAYOUT) == Decimal("0.02")

    @pytest.mark.parametrize("tx_type", [
        TransactionType.SEND,
        TransactionType.REQUEST,
        TransactionType.SPONSOR,
        TransactionType.DEPOSIT,
    ])
    def test_free_types(self, tx_type):
        assert compute_fee(tx_type, 100) == Decimal("0")


class TestComputeFee:
    def test_demo_booking(self):
        assert compute_fee(TransactionType.DEMO, 100) == Decimal("20.00")

    def test_instant_payout(self):
        assert compute_fee(TransactionType.PAYOUT, 250) == Decimal("5.00")

    def test_rounds_to_cents(self):
        # 2% of 10.25 is 0.205, rounded half up
        assert compute_fee(TransactionType.PAYOUT, "10.25") == Decimal("0.21")

    def test_to_money(self):
        assert to_money("3.14159") == Decimal("3.14")
        assert to_money(5) == Decimal("5.00")

    @pytest.mark.parametrize("value", ["abc", "", "NaN", "sNaN", "Infinity", "-inf", None, [1]])
    def test_to_money_rejects_non_numbers(self, value):
        with pytest.raises(InvalidAmount):
            to_money(value)

    def test_invalid_amount_is_wallet_error(self):
        with pytest.raises(WalletError):
            compute_fee(TransactionType.DEMO, "twenty")
