"""Invoice aggregate: line items, coupon and membership state, bill totals."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .models import LineItem, ProgrammeKind
from .policies import (
    NO_DISCOUNT,
    DiscountPolicy,
    coupon_policy,
    discount_amount,
    enrollment_fee,
    membership_discount,
)

PRO_MEMBERSHIP_FEE = 200.0
MIN_DISCOUNTABLE_QUANTITY = 4
B4G1_LABEL = "B4G1"

logger = logging.getLogger("geekdemy.invoice")


@dataclass(frozen=True)
class Bill:
    """Computed bill amounts in print order."""

    subtotal: float
    membership_discount: float
    membership_fee: float
    enrollment_fee: float
    coupon: str | None
    discount: float
    total: float


class Invoice:
    """Accumulates purchases and derives every bill amount from current state."""

    def __init__(self) -> None:
        self.items: list[LineItem] = []
        self.running_item_count = 0
        self.discount_policy: DiscountPolicy = NO_DISCOUNT
        self.applied_coupon: str | None = None
        self.membership_active = False

    def add_item(self, kind: ProgrammeKind, quantity: int) -> LineItem:
        """Append a line item; quantity is taken as given."""
        item = LineItem(kind=kind, quantity=quantity)
        self.items.append(item)
        self.running_item_count += quantity
        logger.debug("Added %s x%d (running count %d)", kind.value, quantity, self.running_item_count)
        return item

    def activate_membership(self) -> None:
        """Enable pro membership. Repeated calls change nothing."""
        if not self.membership_active:
            logger.debug("Pro membership activated")
        self.membership_active = True

    def apply_coupon(self, code: str | None, *, sole_argument: bool = True) -> str | None:
        """Apply a coupon once per invoice.

        Once the running item count reaches the bulk threshold, a code given as
        the command's only argument claims the B4G1 label without changing the
        discount policy. Otherwise a known coupon name installs its policy.
        Returns the label applied by this call, or None when nothing changed.
        """
        if self.applied_coupon is not None:
            logger.debug("Coupon %s already applied; ignoring %r", self.applied_coupon, code)
            return None
        if code is None:
            return None
        if sole_argument and self.running_item_count >= MIN_DISCOUNTABLE_QUANTITY:
            self.applied_coupon = B4G1_LABEL
            return self.applied_coupon
        policy = coupon_policy(code)
        if policy is None:
            logger.debug("Unknown coupon %r ignored", code)
            return None
        self.discount_policy = policy
        self.applied_coupon = code.upper()
        return self.applied_coupon

    def discountable_quantity(self) -> int:
        """Units bought across the catalog kinds, UNKNOWN excluded."""
        return sum(item.quantity for item in self.items if item.discountable)

    def bulk_discount_applies(self) -> bool:
        """Whether enough catalog units were bought to get one free."""
        return self.discountable_quantity() >= MIN_DISCOUNTABLE_QUANTITY

    def cheapest_discountable_unit(self) -> float:
        """Price of the cheapest single unit among discountable items."""
        return min((item.single_cost for item in self.items if item.discountable), default=0.0)

    def compute_subtotal(self) -> float:
        """Cost of every line item."""
        return sum((item.cost for item in self.items), 0.0)

    def compute_membership_discount(self) -> float:
        """Pro-membership discount over the current items, 0 without membership."""
        if not self.membership_active:
            return 0.0
        return membership_discount(self.items)

    def compute_membership_fee(self) -> float:
        """Flat pro-membership fee, charged once."""
        return PRO_MEMBERSHIP_FEE if self.membership_active else 0.0

    def compute_enrollment_fee(self) -> float:
        """Enrollment fee derived from the subtotal."""
        return enrollment_fee(self.compute_subtotal())

    def _total_before_discount(self) -> float:
        return (
            self.compute_subtotal()
            + self.compute_enrollment_fee()
            + self.compute_membership_fee()
            - self.compute_membership_discount()
        )

    def compute_discount(self) -> float:
        """Coupon discount; the bulk override wins over any selected coupon."""
        if self.bulk_discount_applies():
            return self.cheapest_discountable_unit()
        return discount_amount(self.discount_policy, self._total_before_discount())

    def compute_total(self) -> float:
        """Amount payable after fees and discounts."""
        return self._total_before_discount() - self.compute_discount()

    def bill(self) -> Bill:
        """Snapshot every bill amount from the current state."""
        return Bill(
            subtotal=self.compute_subtotal(),
            membership_discount=self.compute_membership_discount(),
            membership_fee=self.compute_membership_fee(),
            enrollment_fee=self.compute_enrollment_fee(),
            coupon=self.applied_coupon,
            discount=self.compute_discount(),
            total=self.compute_total(),
        )
