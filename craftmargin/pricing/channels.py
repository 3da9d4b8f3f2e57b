# craftmargin/pricing/channels.py
"""
Fee model registry.

Every channel fee is affine in the selling price (``flat + rate * price``).
The formulas below are the published marketplace fee rates; they are kept as
named components so a breakdown can be shown, and summed in a fixed order so
results are reproducible to the last bit.
"""

import math
from dataclasses import dataclass
from enum import Enum

from craftmargin.errors import InputError


class Channel(str, Enum):
    """Sales channel a product is listed on."""

    NONE = "none"
    ETSY = "etsy"
    SHOPIFY = "shopify"
    AMAZON = "amazon"


class AmazonCategory(str, Enum):
    """Amazon product category, which sets the referral rate."""

    HANDMADE = "handmade"
    JEWELRY = "jewelry"
    DEFAULT = "default"


# Etsy
ETSY_LISTING_FEE = 0.20
ETSY_TRANSACTION_RATE = 0.065
ETSY_PAYMENT_PROCESSING_RATE = 0.03
ETSY_OFFSITE_ADS_RATE = 0.15

# Shopify (basic plan, per order)
SHOPIFY_TRANSACTION_RATE = 0.029
SHOPIFY_PAYMENT_PROCESSING_FEE = 0.30

# Amazon
AMAZON_FULFILLMENT_FEE = 3.49
AMAZON_CLOSING_RATE = 0.0175


@dataclass(frozen=True)
class FeeComponent:
    """One named line of a marketplace fee."""

    name: str
    flat: float = 0.0
    rate: float = 0.0

    def amount(self, price: float) -> float:
        return self.flat + price * self.rate


@dataclass(frozen=True)
class FeeSchedule:
    """Affine fee ``flat + rate * price`` assembled from its components."""

    channel: Channel
    components: tuple[FeeComponent, ...]

    @property
    def flat(self) -> float:
        return sum(c.flat for c in self.components)

    @property
    def rate(self) -> float:
        return sum(c.rate for c in self.components)


def coerce_channel(channel: "Channel | str") -> Channel:
    """Resolve a channel name to the enum, rejecting unknown values."""
    if isinstance(channel, Channel):
        return channel
    try:
        return Channel(str(channel).strip().lower())
    except ValueError:
        valid = ", ".join(c.value for c in Channel)
        raise InputError(f"Unknown channel '{channel}'. Must be one of: {valid}")


def coerce_category(category: "AmazonCategory | str | None") -> AmazonCategory:
    """Resolve an Amazon category, defaulting to ``default`` when omitted."""
    if category is None:
        return AmazonCategory.DEFAULT
    if isinstance(category, AmazonCategory):
        return category
    try:
        return AmazonCategory(str(category).strip().lower())
    except ValueError:
        valid = ", ".join(c.value for c in AmazonCategory)
        raise InputError(f"Unknown Amazon category '{category}'. Must be one of: {valid}")


def referral_rate(category: "AmazonCategory | str | None") -> float:
    """Amazon referral rate for a category."""
    category = coerce_category(category)
    if category is AmazonCategory.JEWELRY:
        return 0.20
    if category is AmazonCategory.HANDMADE:
        return 0.15
    if category is AmazonCategory.DEFAULT:
        return 0.15
    raise InputError(f"Unhandled Amazon category: {category!r}")


def fee_schedule(
    channel: "Channel | str", category: "AmazonCategory | str | None" = None
) -> FeeSchedule:
    """
    Return the fee schedule for a channel.

    Components are listed in the order their amounts are summed by ``fee()``.

    Raises:
        InputError: If channel or category is not a known value
    """
    channel = coerce_channel(channel)

    if channel is Channel.NONE:
        components: tuple[FeeComponent, ...] = ()
    elif channel is Channel.ETSY:
        components = (
            FeeComponent("listing", flat=ETSY_LISTING_FEE),
            FeeComponent("transaction", rate=ETSY_TRANSACTION_RATE),
            FeeComponent("payment_processing", rate=ETSY_PAYMENT_PROCESSING_RATE),
            FeeComponent("offsite_ads", rate=ETSY_OFFSITE_ADS_RATE),
        )
    elif channel is Channel.SHOPIFY:
        components = (
            FeeComponent("transaction", rate=SHOPIFY_TRANSACTION_RATE),
            FeeComponent("payment_processing", flat=SHOPIFY_PAYMENT_PROCESSING_FEE),
        )
    elif channel is Channel.AMAZON:
        components = (
            FeeComponent("referral", rate=referral_rate(category)),
            FeeComponent("fulfillment", flat=AMAZON_FULFILLMENT_FEE),
            FeeComponent("closing", rate=AMAZON_CLOSING_RATE),
        )
    else:
        raise InputError(f"Unhandled channel: {channel!r}")

    return FeeSchedule(channel=channel, components=components)


def _check_price(selling_price: float) -> float:
    if isinstance(selling_price, bool) or not isinstance(selling_price, (int, float)):
        raise InputError(f"Selling price must be a number, got {selling_price!r}")
    if not math.isfinite(selling_price) or selling_price < 0:
        raise InputError(f"Selling price must be a finite number >= 0, got {selling_price}")
    return float(selling_price)


def fee_breakdown(
    channel: "Channel | str",
    selling_price: float,
    category: "AmazonCategory | str | None" = None,
) -> dict[str, float]:
    """Fee amount per named component, in summation order."""
    price = _check_price(selling_price)
    schedule = fee_schedule(channel, category)
    return {c.name: c.amount(price) for c in schedule.components}


def fee(
    channel: "Channel | str",
    selling_price: float,
    category: "AmazonCategory | str | None" = None,
) -> float:
    """
    Marketplace fee charged on a sale at ``selling_price``.

    Pure function of its arguments. No intermediate rounding is applied.

    Args:
        channel: Sales channel
        selling_price: Price per unit (>= 0)
        category: Amazon category (ignored for other channels)

    Returns:
        Fee amount (>= 0)

    Raises:
        InputError: On negative/non-finite price or unknown channel/category
    """
    total = 0.0
    for amount in fee_breakdown(channel, selling_price, category).values():
        total += amount
    return total
