"""
Vehicle rental desk models.

This package provides the rental domain:
- VehicleKind: Closed set of vehicle types (CAR, BIKE, TRUCK)
- Vehicle: Catalog entry with kind-specific rate and tax
- Fleet: Ordered inventory with id/model lookup
- RentalAgreement: Priced line items, grand total and invoice log
- Owner: Agency identity, validated before any rental
- RentalSession: State threaded through one interactive session
"""

from .kind import VehicleKind
from .pricing import PRICING, rental_rate_per_day, tax_per_day, item_total
from .vehicle import Vehicle
from .fleet import Fleet
from .agreement import RentSelection, RentalItem, RentalCounter, RentalAgreement
from .owner import Owner, validate_owner_code
from .exceptions import (
    RentalError,
    ValidationError,
    InvalidSelectionError,
    RentalRequestError,
)
from .session import RentalSession
from .loader import load_inventory, seed_fleet, seed_owner

__all__ = [
    "VehicleKind",
    "PRICING",
    "rental_rate_per_day",
    "tax_per_day",
    "item_total",
    "Vehicle",
    "Fleet",
    "RentSelection",
    "RentalItem",
    "RentalCounter",
    "RentalAgreement",
    "Owner",
    "validate_owner_code",
    "RentalError",
    "ValidationError",
    "InvalidSelectionError",
    "RentalRequestError",
    "RentalSession",
    "load_inventory",
    "seed_fleet",
    "seed_owner",
]
