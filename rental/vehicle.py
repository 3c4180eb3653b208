"""Vehicle class - a rentable catalog entry with kind-specific pricing."""

from typing import List

from .kind import VehicleKind
from .pricing import rental_rate_per_day, tax_per_day


class Vehicle:
    """A fleet entry: identity, base rate and available quantity."""

    def __init__(
        self,
        kind: VehicleKind,
        id: int,
        model: str,
        base_rate_per_day: float = 0.0,
        quantity: int = 0,
    ):
        self.kind = kind
        self.id = id
        self.model = model
        self.base_rate_per_day = base_rate_per_day
        self.quantity = quantity

    @classmethod
    def car(cls, id: int, model: str, base_rate_per_day: float, quantity: int) -> "Vehicle":
        return cls(VehicleKind.CAR, id, model, base_rate_per_day, quantity)

    @classmethod
    def bike(cls, id: int, model: str, base_rate_per_day: float, quantity: int) -> "Vehicle":
        return cls(VehicleKind.BIKE, id, model, base_rate_per_day, quantity)

    @classmethod
    def truck(cls, id: int, model: str, base_rate_per_day: float, quantity: int) -> "Vehicle":
        return cls(VehicleKind.TRUCK, id, model, base_rate_per_day, quantity)

    def rental_rate_per_day(self) -> float:
        """Daily rate including the kind's surcharge, from the current base rate."""
        return rental_rate_per_day(self.kind, self.base_rate_per_day)

    def tax_per_day(self) -> float:
        """Daily tax on the rental rate, from the current base rate."""
        return tax_per_day(self.kind, self.base_rate_per_day)

    def update_quantity(self, quantity: int) -> None:
        """Set available quantity. Bounds are the caller's responsibility."""
        self.quantity = quantity

    def row(self) -> List[str]:
        """Display row: id, model, kind, base rate, quantity."""
        return [
            str(self.id),
            self.model,
            self.kind.label,
            f"{self.base_rate_per_day:.2f}",
            str(self.quantity),
        ]

    def __repr__(self) -> str:
        return (
            f"Vehicle({self.kind.name}, id={self.id}, model={self.model!r}, "
            f"base_rate_per_day={self.base_rate_per_day}, quantity={self.quantity})"
        )
