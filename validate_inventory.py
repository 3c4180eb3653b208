#!/usr/bin/env python3
"""Check rental inventory YAML files against schema.yaml."""
import argparse
import sys
from pathlib import Path
from typing import List

import yaml
from jsonschema import Draft7Validator

INVENTORY_DIR = Path(__file__).parent / "inventory"


def load_schema() -> dict:
    """Load the inventory JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def validate_inventory_file(filepath: Path, schema: dict) -> List[str]:
    """
    Validate one inventory file.

    Returns every schema violation (not just the first), ordered by
    location in the document. An empty list means the file is valid.
    """
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return [f"YAML parse error: {e}"]
    except OSError as e:
        return [f"Error: {e}"]

    errors = []
    validator = Draft7Validator(schema)
    for error in sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.path))):
        errors.append(f"Schema validation error: {error.message}")
        if error.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in error.path)}")
    return errors


def main(argv=None):
    parser = argparse.ArgumentParser(description="Validate rental inventory files")
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Inventory files to check (default: every YAML file in inventory/)",
    )
    args = parser.parse_args(argv)

    files = args.files
    if not files:
        if not INVENTORY_DIR.exists():
            print(f"Error: inventory directory not found: {INVENTORY_DIR}")
            return 1
        files = sorted(INVENTORY_DIR.glob("*.yaml")) + sorted(INVENTORY_DIR.glob("*.yml"))

    if not files:
        print(f"Warning: No YAML files found in {INVENTORY_DIR}")
        return 0

    schema = load_schema()
    failed = 0
    for filepath in files:
        errors = validate_inventory_file(filepath, schema)
        if errors:
            failed += 1
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
        else:
            print(f"OK: {filepath.name}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
