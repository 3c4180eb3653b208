"""Per-kind pricing rules for rental vehicles."""

from typing import Dict, NamedTuple

from .kind import VehicleKind


class PricingRule(NamedTuple):
    """Daily surcharge added to the base rate, and the tax rate applied to the result."""

    surcharge: float
    tax_rate: float


PRICING: Dict[VehicleKind, PricingRule] = {
    VehicleKind.CAR: PricingRule(surcharge=200.0, tax_rate=0.12),
    VehicleKind.BIKE: PricingRule(surcharge=0.0, tax_rate=0.05),
    VehicleKind.TRUCK: PricingRule(surcharge=500.0, tax_rate=0.18),
}


def rental_rate_per_day(kind: VehicleKind, base_rate: float) -> float:
    """Daily rental rate: base rate plus the kind's surcharge."""
    return base_rate + PRICING[kind].surcharge


def tax_per_day(kind: VehicleKind, base_rate: float) -> float:
    """Daily tax, charged on the rental rate (not the base rate)."""
    return rental_rate_per_day(kind, base_rate) * PRICING[kind].tax_rate


def item_total(rate: float, tax: float, qty: int, days: int) -> float:
    """Total for a line item: (rate + tax) per unit per day."""
    return (rate + tax) * qty * days
