"""YAML loading for inventory files, plus the built-in seed inventory."""

from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

from .fleet import Fleet
from .kind import VehicleKind
from .owner import Owner
from .vehicle import Vehicle

SEED_OWNER_CODE = "OWN001"
SEED_OWNER_NAME = "FastRentals"


def seed_fleet() -> Fleet:
    """The default five-vehicle fleet."""
    return Fleet(
        [
            Vehicle.car(101, "Toyota-Innova", 3000, 3),
            Vehicle.car(102, "Honda-City", 2500, 4),
            Vehicle.bike(201, "Royal-Enfield", 800, 5),
            Vehicle.bike(202, "Honda-Activa", 400, 10),
            Vehicle.truck(301, "Tata-407", 5000, 2),
        ]
    )


def seed_owner() -> Owner:
    return Owner(SEED_OWNER_CODE, SEED_OWNER_NAME)


def _parse_kind(value: str) -> VehicleKind:
    try:
        return VehicleKind(str(value).lower())
    except ValueError:
        raise ValueError(f"Unknown vehicle kind: {value!r}") from None


def _parse_vehicle(dct: Dict[str, Any]) -> Vehicle:
    """Build a Vehicle from an inventory entry (camelCase keys)."""
    missing = [key for key in ("id", "kind", "model") if key not in dct]
    if missing:
        raise ValueError(f"Inventory entry missing {', '.join(missing)}: {dct!r}")
    return Vehicle(
        _parse_kind(dct["kind"]),
        int(dct["id"]),
        str(dct["model"]),
        float(dct.get("baseRatePerDay") or 0),
        int(dct.get("quantity") or 0),
    )


def _parse_owner(dct: Dict[str, Any]) -> Owner:
    return Owner(str(dct.get("code") or ""), str(dct.get("name") or ""))


def load_inventory(filename: Union[str, Path]) -> Tuple[Fleet, Owner]:
    """
    Load a fleet and owner from a YAML inventory file.

    A missing `owner` section falls back to the seed owner.
    """
    with open(filename, "r", encoding="utf-8") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader) or {}

    fleet = Fleet([_parse_vehicle(v) for v in data.get("vehicles") or []])
    owner_data = data.get("owner")
    owner = _parse_owner(owner_data) if owner_data is not None else seed_owner()
    return fleet, owner
