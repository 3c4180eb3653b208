#!/usr/bin/env python3
"""Tests for per-kind pricing functions."""
import pytest
from rental import PRICING, VehicleKind, rental_rate_per_day, tax_per_day, item_total


class TestRentalRatePerDay:
    """Tests for rental_rate_per_day."""

    def test_car_adds_service_charge(self):
        assert rental_rate_per_day(VehicleKind.CAR, 3000) == 3200

    def test_bike_is_base_rate(self):
        assert rental_rate_per_day(VehicleKind.BIKE, 800) == 800

    def test_truck_adds_heavy_surcharge(self):
        assert rental_rate_per_day(VehicleKind.TRUCK, 5000) == 5500

    def test_zero_base_rate(self):
        assert rental_rate_per_day(VehicleKind.CAR, 0) == 200
        assert rental_rate_per_day(VehicleKind.BIKE, 0) == 0
        assert rental_rate_per_day(VehicleKind.TRUCK, 0) == 500


class TestTaxPerDay:
    """Tax is charged on the rental rate, not the base rate."""

    @pytest.mark.parametrize("base", [0, 1, 400, 2500, 3000, 5000, 12345.67])
    def test_car_tax(self, base):
        assert tax_per_day(VehicleKind.CAR, base) == pytest.approx((base + 200) * 0.12)

    @pytest.mark.parametrize("base", [0, 1, 400, 2500, 3000, 5000, 12345.67])
    def test_bike_tax(self, base):
        assert tax_per_day(VehicleKind.BIKE, base) == pytest.approx(base * 0.05)

    @pytest.mark.parametrize("base", [0, 1, 400, 2500, 3000, 5000, 12345.67])
    def test_truck_tax(self, base):
        assert tax_per_day(VehicleKind.TRUCK, base) == pytest.approx((base + 500) * 0.18)

    @pytest.mark.parametrize("kind", list(VehicleKind))
    def test_never_negative(self, kind):
        assert rental_rate_per_day(kind, 0) >= 0
        assert tax_per_day(kind, 0) >= 0


class TestItemTotal:
    """Tests for item_total."""

    def test_car_example(self):
        assert item_total(3200, 384.0, 2, 3) == 21504.0

    def test_bike_example(self):
        assert item_total(800, 40.0, 1, 5) == 4200.0

    def test_scales_with_qty_and_days(self):
        single = item_total(100, 10, 1, 1)
        assert item_total(100, 10, 4, 7) == pytest.approx(single * 28)


class TestPricingTable:
    """The pricing table covers every kind."""

    def test_every_kind_has_a_rule(self):
        assert set(PRICING) == set(VehicleKind)
