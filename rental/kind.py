"""VehicleKind enum for the closed set of rentable vehicle types."""

from enum import Enum


class VehicleKind(Enum):
    """Vehicle types. The value is the name used in inventory files."""

    CAR = "car"
    BIKE = "bike"
    TRUCK = "truck"

    @property
    def label(self) -> str:
        return self.value.capitalize()
