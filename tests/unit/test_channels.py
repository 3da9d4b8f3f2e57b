# tests/unit/test_channels.py
"""Unit tests for marketplace fee formulas."""

import math

import pytest

from craftmargin.errors import InputError
from craftmargin.pricing.channels import (
    AmazonCategory,
    Channel,
    coerce_channel,
    fee,
    fee_breakdown,
    fee_schedule,
    referral_rate,
)


# ---------------------------------------------------------------------------
# Fixed formulas
# ---------------------------------------------------------------------------

class TestFeeFormulas:
    def test_etsy_at_twenty(self):
        """0.20 + 1.30 + 0.60 + 3.00"""
        assert fee(Channel.ETSY, 20) == pytest.approx(5.10)

    def test_etsy_breakdown_components(self):
        breakdown = fee_breakdown("etsy", 20)
        assert list(breakdown) == ["listing", "transaction", "payment_processing", "offsite_ads"]
        assert breakdown["listing"] == pytest.approx(0.20)
        assert breakdown["transaction"] == pytest.approx(1.30)
        assert breakdown["payment_processing"] == pytest.approx(0.60)
        assert breakdown["offsite_ads"] == pytest.approx(3.00)

    def test_shopify(self):
        assert fee(Channel.SHOPIFY, 100) == pytest.approx(2.90 + 0.30)

    def test_amazon_jewelry_at_fifty(self):
        """10 + 3.49 + 0.875"""
        assert fee(Channel.AMAZON, 50, AmazonCategory.JEWELRY) == pytest.approx(14.365)

    def test_amazon_handmade(self):
        assert fee("amazon", 50, "handmade") == pytest.approx(7.5 + 3.49 + 0.875)

    def test_amazon_category_defaults(self):
        assert fee("amazon", 50) == fee("amazon", 50, "default")

    def test_none_is_zero(self):
        assert fee(Channel.NONE, 123.45) == 0.0

    def test_category_ignored_off_amazon(self):
        assert fee("etsy", 20, "jewelry") == fee("etsy", 20)


class TestFeeAtZeroPrice:
    @pytest.mark.parametrize("channel", list(Channel))
    def test_flat_only(self, channel):
        """fee(channel, 0) is exactly the flat part of the schedule."""
        amount = fee(channel, 0)
        assert not math.isnan(amount)
        assert amount == pytest.approx(fee_schedule(channel).flat)

    def test_amazon_zero_is_fulfillment(self):
        assert fee("amazon", 0, "jewelry") == pytest.approx(3.49)


# ---------------------------------------------------------------------------
# Schedules and coercion
# ---------------------------------------------------------------------------

class TestFeeSchedule:
    def test_etsy_rate_and_flat(self):
        schedule = fee_schedule("etsy")
        assert schedule.channel is Channel.ETSY
        assert schedule.flat == pytest.approx(0.20)
        assert schedule.rate == pytest.approx(0.245)

    def test_amazon_rate_follows_category(self):
        assert fee_schedule("amazon", "jewelry").rate == pytest.approx(0.2175)
        assert fee_schedule("amazon", "handmade").rate == pytest.approx(0.1675)

    def test_none_has_no_components(self):
        assert fee_schedule("none").components == ()

    def test_referral_rates(self):
        assert referral_rate("jewelry") == 0.20
        assert referral_rate("handmade") == 0.15
        assert referral_rate(None) == 0.15


class TestRejections:
    def test_unknown_channel(self):
        with pytest.raises(InputError, match="Unknown channel"):
            fee("ebay", 10)

    def test_unknown_category(self):
        with pytest.raises(InputError, match="Unknown Amazon category"):
            fee("amazon", 10, "toys")

    def test_negative_price(self):
        with pytest.raises(InputError):
            fee("etsy", -1)

    @pytest.mark.parametrize("price", [float("nan"), float("inf"), "20", True])
    def test_non_numeric_or_non_finite_price(self, price):
        with pytest.raises(InputError):
            fee("shopify", price)

    def test_channel_name_is_case_insensitive(self):
        assert coerce_channel(" Etsy ") is Channel.ETSY
