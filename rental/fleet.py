"""Fleet class - the ordered vehicle inventory."""

import logging
from typing import Iterator, List, Optional, Union

from tabulate import tabulate

from .vehicle import Vehicle

logger = logging.getLogger(__name__)

FLEET_HEADERS = ["ID", "Model", "Type", "Base Rate", "Qty"]


class Fleet:
    """
    Vehicles in insertion order.

    Ids are caller-assigned and not checked for uniqueness; lookups
    always return the first match.
    """

    def __init__(self, vehicles: Optional[List[Vehicle]] = None):
        self._vehicles: List[Vehicle] = list(vehicles or [])

    @property
    def vehicles(self) -> List[Vehicle]:
        return list(self._vehicles)

    def __len__(self) -> int:
        return len(self._vehicles)

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(self._vehicles)

    def add_vehicle(self, vehicle: Vehicle) -> None:
        self._vehicles.append(vehicle)
        logger.debug("Added vehicle %s (%s)", vehicle.id, vehicle.model)

    def remove_vehicle_by_id(self, vehicle_id: int) -> bool:
        """Remove the first vehicle with this id. Returns False if none matched."""
        for index, vehicle in enumerate(self._vehicles):
            if vehicle.id == vehicle_id:
                del self._vehicles[index]
                logger.info("Removed vehicle %s (%s) from fleet", vehicle_id, vehicle.model)
                return True
        return False

    def search_by_id(self, vehicle_id: int) -> Optional[Vehicle]:
        for vehicle in self._vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None

    def search_by_model(self, model: str) -> Optional[Vehicle]:
        """Exact, case-sensitive model match."""
        for vehicle in self._vehicles:
            if vehicle.model == model:
                return vehicle
        return None

    def search(self, key: Union[int, str]) -> Optional[Vehicle]:
        """Look up by id when given an int, by model name when given a str."""
        if isinstance(key, str):
            return self.search_by_model(key)
        if isinstance(key, int):
            return self.search_by_id(key)
        return None

    def display_all(self) -> str:
        """Fleet table in insertion order."""
        rows = [vehicle.row() for vehicle in self._vehicles]
        return tabulate(
            rows, headers=FLEET_HEADERS, tablefmt="simple", disable_numparse=True
        )
