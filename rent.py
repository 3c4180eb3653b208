#!/usr/bin/env python3
"""
Command line for the vehicle rental desk.

Commands:
  menu    - Interactive rental menu (fleet, search, rent, save invoice)
  fleet   - Show the fleet inventory
  search  - Look up a vehicle by id or model name
  quote   - Price a rental without booking it
"""

import argparse
import logging
import sys
from pathlib import Path
from tabulate import tabulate
import yaml
from typing import Callable, List, Optional

from rental import (
    Owner,
    RentalError,
    RentalSession,
    Vehicle,
    ValidationError,
    item_total,
    load_inventory,
    seed_fleet,
    seed_owner,
)
from rental.fleet import FLEET_HEADERS
from rental.session import DEFAULT_INVOICE_PATH
from validate_inventory import load_schema, validate_inventory_file

MENU = """
=== VEHICLE RENTAL SYSTEM ===
1. Show Fleet
2. Search by ID
3. Search by Model
4. Add Rental (choose vehicle, qty, days)
5. Remove Vehicle Model from Fleet
6. Show Current Agreement
7. Save Agreement to File
8. Show Total Rentals
0. Exit"""

# =============================================================================
# Formatting helpers
# =============================================================================


def format_rupees(amount: float) -> str:
    """Format a currency amount for display."""
    return f"Rs. {amount:,.2f}"


def describe_vehicle(vehicle: Optional[Vehicle]) -> str:
    """Single-row table for a vehicle, or a not-found message."""
    if vehicle is None:
        return "Vehicle not found."
    return tabulate(
        [vehicle.row()], headers=FLEET_HEADERS, tablefmt="simple", disable_numparse=True
    )


def make_quote_rows(vehicle: Vehicle, qty: int, days: int) -> List[List[str]]:
    """Price breakdown rows for renting `qty` x `vehicle` for `days` days."""
    rate = vehicle.rental_rate_per_day()
    tax = vehicle.tax_per_day()
    return [
        ["Vehicle", f"{vehicle.model} ({vehicle.kind.label})"],
        ["Rate/day", format_rupees(rate)],
        ["Tax/day", format_rupees(tax)],
        ["Quantity", str(qty)],
        ["Days", str(days)],
        ["Total", format_rupees(item_total(rate, tax, qty, days))],
    ]


# =============================================================================
# Session setup
# =============================================================================


def build_session(args) -> RentalSession:
    """Create the session from the inventory file (or the seed fleet)."""
    if args.inventory:
        fleet, owner = load_inventory(args.inventory)
    else:
        fleet, owner = seed_fleet(), seed_owner()
    if args.owner_code is not None:
        owner = Owner(args.owner_code, owner.name)
    return RentalSession(fleet, owner, invoice_path=args.invoice)


# =============================================================================
# Interactive menu
# =============================================================================


def read_int(read: Callable[[str], str], prompt: str) -> Optional[int]:
    """Prompt for an integer. Returns None if the reply is not a number."""
    try:
        return int(read(prompt).strip())
    except ValueError:
        return None


def handle_choice(session: RentalSession, choice: int, read: Callable[[str], str]) -> None:
    """Run one menu action. RentalError and OSError propagate to the loop."""
    if choice == 1:
        print("\n---- FLEET ----")
        print(session.fleet.display_all())
    elif choice == 2:
        vehicle_id = read_int(read, "Enter vehicle ID: ")
        if vehicle_id is None:
            print("Invalid input")
            return
        print(describe_vehicle(session.fleet.search(vehicle_id)))
    elif choice == 3:
        model = read("Enter model name (exact): ").strip()
        print(describe_vehicle(session.fleet.search(model)))
    elif choice == 4:
        vehicle_id = read_int(read, "Enter vehicle ID to rent: ")
        if vehicle_id is None or session.fleet.search(vehicle_id) is None:
            print("Invalid vehicle ID.")
            return
        qty = read_int(read, "Enter quantity (number of vehicles): ")
        days = read_int(read, "Enter number of days: ")
        if qty is None or days is None:
            print("Invalid input")
            return
        item = session.rent(vehicle_id, qty, days)
        print(f"Added to rental agreement: {item.qty} x {item.model} for {item.days} day(s).")
    elif choice == 5:
        vehicle_id = read_int(read, "Enter vehicle ID to remove from fleet: ")
        if vehicle_id is not None and session.fleet.remove_vehicle_by_id(vehicle_id):
            print("Removed from fleet.")
        else:
            print("Vehicle ID not found.")
    elif choice == 6:
        print("\n--- RENTAL AGREEMENT ---")
        print(session.agreement.display_agreement())
    elif choice == 7:
        path = session.save_invoice()
        print(f"Agreement saved to {path}")
    elif choice == 8:
        print(f"Total rental operations performed: {session.total_rentals}")
    else:
        print("Invalid choice")


def run_menu(session: RentalSession, read: Callable[[str], str] = input) -> int:
    """Interactive loop. Exits on 0 or end of input."""
    print(f"Owner: {session.owner.display_name}")
    while True:
        print(MENU)
        try:
            choice = read_int(read, "Enter choice: ")
            if choice is None:
                print("Invalid input")
                continue
            if choice == 0:
                print("Exiting. Goodbye!")
                return 0
            handle_choice(session, choice, read)
        except EOFError:
            print()
            return 0
        except RentalError as e:
            print(e.message)
        except OSError as e:
            print(f"Error: {e}")


# =============================================================================
# Commands
# =============================================================================


def cmd_menu(args):
    """Interactive rental menu."""
    session = build_session(args)
    return run_menu(session)


def cmd_fleet(args):
    """Show the fleet inventory."""
    session = build_session(args)
    print(f"Owner: {session.owner.display_name}")
    print(f"Vehicles: {len(session.fleet)}")
    print()
    print(session.fleet.display_all())
    return 0


def cmd_search(args):
    """Look up a vehicle by id or model name."""
    session = build_session(args)
    key = args.id if args.id is not None else args.model
    vehicle = session.fleet.search(key)
    print(describe_vehicle(vehicle))
    return 0 if vehicle else 1


def cmd_quote(args):
    """Price a rental without booking it."""
    session = build_session(args)
    vehicle = session.fleet.search_by_id(args.vehicle_id)
    if vehicle is None:
        print(f"Error: Unknown vehicle ID {args.vehicle_id}")
        return 1
    if args.qty <= 0 or args.days <= 0:
        print("Error: Quantity and days must be positive.")
        return 1
    print(tabulate(make_quote_rows(vehicle, args.qty, args.days), tablefmt="simple"))
    if args.qty > vehicle.quantity:
        print(f"\nNote: only {vehicle.quantity} available.")
    return 0


# =============================================================================
# Main
# =============================================================================


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Vehicle rental desk",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s menu
  %(prog)s --inventory inventory/fleet.yaml fleet
  %(prog)s search --id 101
  %(prog)s search --model Honda-City
  %(prog)s quote 101 2 3
  %(prog)s --invoice invoices.txt --owner-code AGY042 menu
""",
    )
    parser.add_argument(
        "--inventory",
        type=Path,
        help="Inventory YAML file (default: built-in seed fleet)",
    )
    parser.add_argument(
        "--invoice",
        type=Path,
        default=DEFAULT_INVOICE_PATH,
        help=f"Invoice file to append to (default: {DEFAULT_INVOICE_PATH})",
    )
    parser.add_argument(
        "--owner-code",
        type=str,
        help="Override the owner code from the inventory",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("menu", help="Interactive rental menu")
    subparsers.add_parser("fleet", help="Show the fleet inventory")

    search_parser = subparsers.add_parser("search", help="Look up a vehicle")
    search_group = search_parser.add_mutually_exclusive_group(required=True)
    search_group.add_argument("--id", type=int, help="Vehicle ID")
    search_group.add_argument("--model", type=str, help="Exact model name")

    quote_parser = subparsers.add_parser("quote", help="Price a rental without booking it")
    quote_parser.add_argument("vehicle_id", type=int, help="Vehicle ID")
    quote_parser.add_argument("qty", type=int, help="Number of vehicles")
    quote_parser.add_argument("days", type=int, help="Number of days")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.inventory:
        if not args.inventory.exists():
            print(f"Error: File not found: {args.inventory}")
            return 1
        errors = validate_inventory_file(args.inventory, load_schema())
        if errors:
            print(f"Error: Invalid inventory file: {args.inventory}")
            for error in errors:
                print(f"  {error}")
            return 1

    commands = {
        "menu": cmd_menu,
        "fleet": cmd_fleet,
        "search": cmd_search,
        "quote": cmd_quote,
    }
    try:
        return commands[args.command](args)
    except ValidationError as e:
        print(f"Validation error: {e.message}")
        return 1
    except (ValueError, OSError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
