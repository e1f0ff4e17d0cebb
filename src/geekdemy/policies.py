"""Discount, enrollment-fee and pro-membership pricing rules.

Coupon discounts are a closed set of policy values. ``discount_amount`` is the
single place that knows how each one is evaluated, so adding a policy means
adding a dataclass here and a branch there.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .models import LineItem, discount_rate

ENROLLMENT_FEE = 500.0
ENROLLMENT_FEE_THRESHOLD = 6666.0


@dataclass(frozen=True)
class ZeroDiscount:
    """Policy that never discounts; also the placeholder behind the B4G1 label."""


@dataclass(frozen=True)
class PercentDiscount:
    """Policy taking ``rate`` of the pre-discount amount."""

    rate: float


DiscountPolicy = ZeroDiscount | PercentDiscount

NO_DISCOUNT = ZeroDiscount()
DEAL_G20 = PercentDiscount(0.20)
DEAL_G5 = PercentDiscount(0.05)

COUPONS: dict[str, DiscountPolicy] = {
    "deal_g20": DEAL_G20,
    "deal_g5": DEAL_G5,
}


def coupon_policy(name: str) -> DiscountPolicy | None:
    """Look up a coupon by name, ignoring case."""
    return COUPONS.get(name.lower())


def discount_amount(policy: DiscountPolicy, amount: float) -> float:
    """Evaluate ``policy`` against the amount before discount.

    Negative amounts never produce a discount.
    """
    if isinstance(policy, ZeroDiscount):
        return 0.0
    if isinstance(policy, PercentDiscount):
        return amount * policy.rate if amount >= 0 else 0.0
    raise TypeError(f"Unsupported discount policy: {policy!r}")


def enrollment_fee(subtotal: float) -> float:
    """Flat enrollment fee charged on small orders."""
    return ENROLLMENT_FEE if subtotal < ENROLLMENT_FEE_THRESHOLD else 0.0


def membership_discount(items: Iterable[LineItem]) -> float:
    """Sum of per-kind pro-membership discounts over ``items``."""
    return sum((discount_rate(item.kind) * item.cost for item in items), 0.0)
