#!/usr/bin/env python3
"""Tests for RentalAgreement, RentalItem and the invoice log."""

import pytest
from rental import (
    InvalidSelectionError,
    Owner,
    RentalAgreement,
    RentalCounter,
    RentalItem,
    RentSelection,
    Vehicle,
)


@pytest.fixture
def car():
    return Vehicle.car(101, "Toyota-Innova", 3000, 3)


@pytest.fixture
def bike():
    return Vehicle.bike(201, "Royal-Enfield", 800, 5)


@pytest.fixture
def owner():
    return Owner("OWN001", "FastRentals")


class TestRentalItem:
    """Tests for RentalItem."""

    def test_total(self):
        item = RentalItem("Toyota-Innova", 2, 3, 3200, 384.0)
        assert item.total == 21504.0

    def test_immutable(self):
        item = RentalItem("Toyota-Innova", 2, 3, 3200, 384.0)
        with pytest.raises(AttributeError):
            item.qty = 5

    def test_invoice_line(self):
        item = RentalItem("Royal-Enfield", 1, 5, 800, 40.0)
        assert item.invoice_line() == "Royal-Enfield x1 for 5 day(s) -> Rs.4200.00"


class TestAddSelection:
    """Tests for add_selection."""

    def test_car_example(self, car):
        agreement = RentalAgreement()
        item = agreement.add_selection(RentSelection(car, 2, 3))
        assert item.model == "Toyota-Innova"
        assert item.rate_per_day == 3200
        assert item.tax_per_day == 384.0
        assert item.total == 21504.0
        assert agreement.grand_total == 21504.0

    def test_bike_example(self, bike):
        agreement = RentalAgreement()
        item = agreement.add_selection(RentSelection(bike, 1, 5))
        assert item.tax_per_day == 40.0
        assert item.total == 4200.0

    def test_grand_total_is_sum_of_items(self, car, bike):
        agreement = RentalAgreement()
        agreement.add_selection(RentSelection(car, 2, 3))
        agreement.add_selection(RentSelection(bike, 1, 5))
        agreement.add_selection(RentSelection(car, 1, 1))
        assert len(agreement.items) == 3
        assert agreement.grand_total == pytest.approx(sum(i.total for i in agreement.items))

    def test_counter_increments_once_per_item(self, car, bike):
        counter = RentalCounter()
        agreement = RentalAgreement(counter=counter)
        for _ in range(4):
            agreement.add_selection(RentSelection(bike, 1, 1))
        assert counter.count == 4

    def test_counter_shared_across_agreements(self, car):
        counter = RentalCounter()
        first = RentalAgreement(counter=counter)
        second = RentalAgreement(counter=counter)
        first.add_selection(RentSelection(car, 1, 1))
        second.add_selection(RentSelection(car, 1, 1))
        second.add_selection(RentSelection(car, 1, 1))
        assert counter.count == 3

    def test_null_vehicle_raises(self):
        agreement = RentalAgreement()
        with pytest.raises(InvalidSelectionError):
            agreement.add_selection(RentSelection(None, 1, 1))
        with pytest.raises(InvalidSelectionError):
            agreement.add_selection(None)

    def test_failed_add_changes_nothing(self):
        agreement = RentalAgreement()
        with pytest.raises(InvalidSelectionError):
            agreement.add_selection(RentSelection(None, 1, 1))
        assert agreement.items == []
        assert agreement.grand_total == 0
        assert agreement.counter.count == 0

    def test_does_not_touch_quantity(self, car):
        agreement = RentalAgreement()
        agreement.add_selection(RentSelection(car, 2, 1))
        assert car.quantity == 3

    def test_does_not_check_availability(self, car):
        """Over-quantity requests are the caller's problem."""
        agreement = RentalAgreement()
        item = agreement.add_selection(RentSelection(car, 50, 1))
        assert item.qty == 50

    def test_model_captured_by_value(self, car):
        agreement = RentalAgreement()
        item = agreement.add_selection(RentSelection(car, 1, 1))
        car.model = "Renamed"
        car.base_rate_per_day = 1
        assert item.model == "Toyota-Innova"
        assert item.rate_per_day == 3200

    def test_prices_at_time_of_call(self, car):
        agreement = RentalAgreement()
        car.base_rate_per_day = 1000
        item = agreement.add_selection(RentSelection(car, 1, 1))
        assert item.rate_per_day == 1200

    def test_in_place_add(self, car, bike):
        agreement = RentalAgreement()
        original = agreement
        agreement += RentSelection(car, 1, 1)
        agreement += RentSelection(bike, 1, 1)
        assert agreement is original
        assert len(agreement.items) == 2

    def test_plain_add_not_supported(self, car):
        """Only in-place addition is supported."""
        agreement = RentalAgreement()
        with pytest.raises(TypeError):
            agreement + RentSelection(car, 1, 1)
        assert agreement.items == []


class TestDisplayAgreement:
    """Tests for display_agreement."""

    def test_two_decimal_places(self, car):
        agreement = RentalAgreement()
        agreement.add_selection(RentSelection(car, 2, 3))
        text = agreement.display_agreement()
        assert "Toyota-Innova" in text
        assert "3200.00" in text
        assert "384.00" in text
        assert "21504.00" in text
        assert text.endswith("Grand Total: Rs. 21504.00")

    def test_empty(self):
        assert RentalAgreement().display_agreement().endswith("Grand Total: Rs. 0.00")


class TestSaveInvoice:
    """Tests for save_invoice and format_invoice."""

    def test_block_format(self, car, owner, tmp_path):
        agreement = RentalAgreement()
        agreement.add_selection(RentSelection(car, 2, 3))
        path = tmp_path / "rentals.txt"
        agreement.save_invoice(path, owner)
        assert path.read_text() == (
            "===== RENTAL INVOICE =====\n"
            "Owner: OWN001\n"
            "Toyota-Innova x2 for 3 day(s) -> Rs.21504.00\n"
            "Grand Total: Rs. 21504.00\n"
            "==========================\n"
            "\n"
        )

    def test_save_twice_writes_two_full_blocks(self, bike, owner, tmp_path):
        agreement = RentalAgreement()
        agreement.add_selection(RentSelection(bike, 1, 5))
        path = tmp_path / "rentals.txt"
        agreement.save_invoice(path, owner)
        agreement.save_invoice(path, owner)
        content = path.read_text()
        assert content.count("===== RENTAL INVOICE =====") == 2
        assert content.count("Royal-Enfield x1 for 5 day(s) -> Rs.4200.00") == 2
        assert content.count("Grand Total: Rs. 4200.00") == 2

    def test_snapshot_includes_earlier_items(self, car, bike, owner, tmp_path):
        agreement = RentalAgreement()
        path = tmp_path / "rentals.txt"
        agreement.add_selection(RentSelection(car, 1, 1))
        agreement.save_invoice(path, owner)
        agreement.add_selection(RentSelection(bike, 1, 1))
        agreement.save_invoice(path, owner)
        blocks = path.read_text().split("===== RENTAL INVOICE =====")[1:]
        assert "Royal-Enfield" not in blocks[0]
        assert "Toyota-Innova" in blocks[1] and "Royal-Enfield" in blocks[1]

    def test_appends_to_existing_file(self, car, owner, tmp_path):
        path = tmp_path / "rentals.txt"
        path.write_text("previous history\n")
        agreement = RentalAgreement()
        agreement.add_selection(RentSelection(car, 1, 1))
        agreement.save_invoice(path, owner)
        assert path.read_text().startswith("previous history\n===== RENTAL INVOICE")

    def test_unopenable_destination_raises(self, owner, tmp_path):
        agreement = RentalAgreement()
        with pytest.raises(OSError):
            agreement.save_invoice(tmp_path / "missing" / "rentals.txt", owner)

    def test_save_does_not_mutate(self, car, owner, tmp_path):
        agreement = RentalAgreement()
        agreement.add_selection(RentSelection(car, 1, 1))
        agreement.save_invoice(tmp_path / "rentals.txt", owner)
        assert len(agreement.items) == 1
        assert agreement.counter.count == 1
