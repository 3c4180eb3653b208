#!/usr/bin/env python3
"""Tests for VehicleKind enum."""

from rental import VehicleKind


class TestVehicleKind:
    """Tests for VehicleKind values and labels."""

    def test_values_match_inventory_names(self):
        assert VehicleKind("car") is VehicleKind.CAR
        assert VehicleKind("bike") is VehicleKind.BIKE
        assert VehicleKind("truck") is VehicleKind.TRUCK

    def test_label(self):
        assert VehicleKind.CAR.label == "Car"
        assert VehicleKind.TRUCK.label == "Truck"
