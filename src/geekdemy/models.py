"""Programme catalog and purchased line items."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProgrammeKind(Enum):
    """Programme kinds that can be purchased."""

    CERTIFICATION = "CERTIFICATION"
    DEGREE = "DEGREE"
    DIPLOMA = "DIPLOMA"
    UNKNOWN = "UNKNOWN"


_UNIT_PRICES: dict[ProgrammeKind, float] = {
    ProgrammeKind.CERTIFICATION: 3000.0,
    ProgrammeKind.DEGREE: 5000.0,
    ProgrammeKind.DIPLOMA: 2500.0,
}

_DISCOUNT_RATES: dict[ProgrammeKind, float] = {
    ProgrammeKind.CERTIFICATION: 0.02,
    ProgrammeKind.DEGREE: 0.03,
    ProgrammeKind.DIPLOMA: 0.01,
}

DISCOUNTABLE_KINDS = frozenset(_UNIT_PRICES)


def programme_kind(name: str) -> ProgrammeKind:
    """Map a command token to a kind; unrecognized names become UNKNOWN."""
    try:
        return ProgrammeKind(name)
    except ValueError:
        return ProgrammeKind.UNKNOWN


def unit_price(kind: ProgrammeKind) -> float:
    """Return the price of one unit of ``kind``."""
    return _UNIT_PRICES.get(kind, 0.0)


def discount_rate(kind: ProgrammeKind) -> float:
    """Return the pro-membership discount rate for ``kind``."""
    return _DISCOUNT_RATES.get(kind, 0.0)


@dataclass(frozen=True)
class LineItem:
    """A purchased quantity of one programme kind."""

    kind: ProgrammeKind
    quantity: int

    @property
    def single_cost(self) -> float:
        """Price of one unit."""
        return unit_price(self.kind)

    @property
    def cost(self) -> float:
        """Price of the whole line."""
        return self.single_cost * self.quantity

    @property
    def discountable(self) -> bool:
        """Whether the kind is a catalog kind eligible for bulk discount."""
        return self.kind in DISCOUNTABLE_KINDS
