"""RentalSession - state for one run of the rental desk."""

import logging
from pathlib import Path
from typing import Optional, Union

from .agreement import RentalAgreement, RentalCounter, RentalItem, RentSelection
from .exceptions import RentalRequestError
from .fleet import Fleet
from .owner import Owner, validate_owner_code

logger = logging.getLogger(__name__)

DEFAULT_INVOICE_PATH = Path("rentals.txt")


class RentalSession:
    """
    Fleet, owner and agreement for a single interactive session.

    The owner code is validated once, here, before any rental can be
    made. The rental counter belongs to the session and is shared with
    every agreement it creates.
    """

    def __init__(
        self,
        fleet: Fleet,
        owner: Owner,
        invoice_path: Union[str, Path] = DEFAULT_INVOICE_PATH,
    ):
        validate_owner_code(owner)
        self.fleet = fleet
        self.owner = owner
        self.invoice_path = Path(invoice_path)
        self.counter = RentalCounter()
        self.agreement = self.new_agreement()

    @property
    def total_rentals(self) -> int:
        return self.counter.count

    def new_agreement(self) -> RentalAgreement:
        return RentalAgreement(counter=self.counter)

    def rent(self, vehicle_id: int, qty: int, days: int) -> Optional[RentalItem]:
        """
        Rent `qty` units of a vehicle for `days` days.

        Returns None if no vehicle has this id. On success the item is
        added to the agreement and the vehicle's quantity is reduced.

        Raises:
            RentalRequestError: if qty or days is not positive, or qty
                exceeds what is available.
        """
        vehicle = self.fleet.search_by_id(vehicle_id)
        if vehicle is None:
            return None
        if qty <= 0 or days <= 0:
            raise RentalRequestError("Quantity and days must be positive.")
        if qty > vehicle.quantity:
            raise RentalRequestError(
                f"Requested quantity not available. Available: {vehicle.quantity}"
            )

        item = self.agreement.add_selection(RentSelection(vehicle, qty, days))
        vehicle.update_quantity(vehicle.quantity - qty)
        logger.info("Rented %d x %s, %d left", qty, vehicle.model, vehicle.quantity)
        return item

    def save_invoice(self) -> Path:
        self.agreement.save_invoice(self.invoice_path, self.owner)
        return self.invoice_path
