"""Rental agreement: line items, running total and the invoice log."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union, TYPE_CHECKING

from tabulate import tabulate

from .exceptions import InvalidSelectionError
from .pricing import item_total

if TYPE_CHECKING:
    from .owner import Owner
    from .vehicle import Vehicle

logger = logging.getLogger(__name__)

AGREEMENT_HEADERS = ["Model", "Qty", "Days", "Rate/day", "Tax/day", "Total"]
INVOICE_HEADER = "===== RENTAL INVOICE ====="
INVOICE_FOOTER = "=========================="


@dataclass
class RentSelection:
    """A request to rent `qty` units of a vehicle for `days` days."""

    vehicle: Optional["Vehicle"]
    qty: int = 0
    days: int = 0


@dataclass(frozen=True)
class RentalItem:
    """A priced line item. The model name is copied, not linked to the vehicle."""

    model: str
    qty: int
    days: int
    rate_per_day: float
    tax_per_day: float

    @property
    def total(self) -> float:
        return item_total(self.rate_per_day, self.tax_per_day, self.qty, self.days)

    def invoice_line(self) -> str:
        return f"{self.model} x{self.qty} for {self.days} day(s) -> Rs.{self.total:.2f}"


class RentalCounter:
    """Count of rental operations, shared by every agreement in a session."""

    def __init__(self, count: int = 0):
        self.count = count

    def increment(self) -> int:
        self.count += 1
        return self.count


class RentalAgreement:
    """Ordered rental items plus their grand total."""

    def __init__(self, counter: Optional[RentalCounter] = None):
        self.items: List[RentalItem] = []
        self.grand_total = 0.0
        self.counter = counter if counter is not None else RentalCounter()

    def add_selection(self, selection: Optional[RentSelection]) -> RentalItem:
        """
        Price a selection and append it as a line item.

        Rate and tax are read from the vehicle at the time of the call.
        Availability is not checked and the vehicle's quantity is left
        untouched; both are the caller's job.

        Raises:
            InvalidSelectionError: if the selection has no vehicle.
        """
        if selection is None or selection.vehicle is None:
            raise InvalidSelectionError()

        vehicle = selection.vehicle
        item = RentalItem(
            model=vehicle.model,
            qty=selection.qty,
            days=selection.days,
            rate_per_day=vehicle.rental_rate_per_day(),
            tax_per_day=vehicle.tax_per_day(),
        )
        self.items.append(item)
        self.grand_total += item.total
        self.counter.increment()
        logger.debug(
            "Added %s x%d for %d day(s), total %.2f", item.model, item.qty, item.days, item.total
        )
        return item

    def __iadd__(self, selection: RentSelection) -> "RentalAgreement":
        self.add_selection(selection)
        return self

    def display_agreement(self) -> str:
        """Item table followed by the grand total."""
        rows = [
            [
                item.model,
                str(item.qty),
                str(item.days),
                f"{item.rate_per_day:.2f}",
                f"{item.tax_per_day:.2f}",
                f"{item.total:.2f}",
            ]
            for item in self.items
        ]
        table = tabulate(
            rows, headers=AGREEMENT_HEADERS, tablefmt="simple", disable_numparse=True
        )
        return f"{table}\n\nGrand Total: Rs. {self.grand_total:.2f}"

    def format_invoice(self, owner: "Owner") -> str:
        """One invoice block covering every item recorded so far."""
        lines = [INVOICE_HEADER, f"Owner: {owner.code}"]
        lines.extend(item.invoice_line() for item in self.items)
        lines.append(f"Grand Total: Rs. {self.grand_total:.2f}")
        lines.append(INVOICE_FOOTER)
        return "\n".join(lines) + "\n\n"

    def save_invoice(self, destination: Union[str, Path], owner: "Owner") -> None:
        """
        Append an invoice block to a text file.

        The file is never truncated. Each call writes the full item list,
        so saving twice records earlier items twice.

        Raises:
            OSError: if the destination cannot be opened for append.
        """
        block = self.format_invoice(owner)
        with open(destination, "a", encoding="utf-8") as fp:
            fp.write(block)
        logger.info("Saved invoice with %d item(s) to %s", len(self.items), destination)
