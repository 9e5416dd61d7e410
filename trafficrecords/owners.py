"""Vehicle owner records: CSV loading, an in-memory registry and an interactive menu."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_CSV = "A4-Q1.csv"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

_MENU = (
    "Press 1 to display vehicle details\n"
    "Press 2 to add a vehicle\n"
    "Press 3 to delete vehicle details\n"
    "Press 4 to edit a vehicle details"
)

_ADD_PROMPTS = (
    "Enter Vehicle number with state code: ",
    "Enter first name: ",
    "Enter Last Name: ",
    "Enter Gender: ",
    "Enter age: ",
    "Enter Address: ",
)

_EDIT_PROMPTS = (
    "Enter the vehicle number: ",
    "Enter first name: ",
    "Enter last name: ",
    "Enter gender: ",
    "Enter Age: ",
    "Enter address: ",
)


class UnknownVehicleError(KeyError):
    """Raised when no owner record carries the requested vehicle number."""


@dataclass
class VehicleOwner:
    """One registered owner of a vehicle."""

    vehicle_number: str
    first_name: str
    last_name: str
    age: int
    gender: str
    address: str


def _leading_int(text: str) -> int:
    """Parse the integer at the start of text, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid age: {text!r}")
    return int(match.group(1))


def parse_owner_line(line: str, join_with: str = "") -> VehicleOwner:
    """Parse one data row: state code, number, first, last, age, gender, address.

    The state code and the number are joined with ``join_with`` to form the
    vehicle number. Anything after the address field is ignored.
    """
    fields = line.split(",")
    if len(fields) < 5:
        raise ValueError(f"too few fields in owner row: {line!r}")
    state, number, first_name, last_name, age_text = fields[:5]
    gender = fields[5] if len(fields) > 5 else ""
    address = fields[6] if len(fields) > 6 else ""
    return VehicleOwner(
        vehicle_number=state + join_with + number,
        first_name=first_name,
        last_name=last_name,
        age=_leading_int(age_text),
        gender=gender,
        address=address,
    )


def load_owners(path: str | Path, join_with: str = "") -> list[VehicleOwner]:
    """Read owner rows from a CSV file, skipping its header line."""
    with open(path, encoding="utf-8") as handle:
        rows = iter(handle)
        next(rows, None)
        return [parse_owner_line(row.rstrip("\n"), join_with) for row in rows]


def format_owner(owner: VehicleOwner) -> str:
    """Render an owner as a single space-separated display line."""
    return " ".join(
        (
            owner.vehicle_number,
            owner.first_name,
            owner.last_name,
            owner.gender,
            str(owner.age),
            owner.address,
        )
    )


@dataclass
class OwnerRegistry:
    """An ordered collection of owner records keyed by vehicle number."""

    owners: list[VehicleOwner] = field(default_factory=list)

    def __iter__(self) -> Iterator[VehicleOwner]:
        return iter(self.owners)

    def __len__(self) -> int:
        return len(self.owners)

    def add(self, owner: VehicleOwner) -> None:
        """Append a new owner record."""
        self.owners.append(owner)

    def edit(self, owner: VehicleOwner) -> None:
        """Replace the first record with the same vehicle number."""
        for position, existing in enumerate(self.owners):
            if existing.vehicle_number == owner.vehicle_number:
                self.owners[position] = owner
                return
        raise UnknownVehicleError(owner.vehicle_number)

    def delete(self, vehicle_number: str) -> int:
        """Remove every record with this vehicle number and return how many went."""
        kept = [o for o in self.owners if o.vehicle_number != vehicle_number]
        removed = len(self.owners) - len(kept)
        if not removed:
            raise UnknownVehicleError(vehicle_number)
        self.owners[:] = kept
        return removed

    def lines(self) -> Iterator[str]:
        """Yield the display line of every record in order."""
        return (format_owner(owner) for owner in self.owners)


def _read_word(prompt: str) -> str:
    """Read the next whitespace-delimited word, skipping blank lines."""
    text = input(prompt)
    while not text.split():
        text = input()
    return text.split()[0]


def _prompt_owner(prompts: tuple[str, ...]) -> VehicleOwner:
    number_prompt, first_prompt, last_prompt, gender_prompt, age_prompt, address_prompt = prompts
    vehicle_number = _read_word(number_prompt)
    first_name = _read_word(first_prompt)
    last_name = _read_word(last_prompt)
    gender = _read_word(gender_prompt)
    age = _leading_int(_read_word(age_prompt))
    address = input(address_prompt)
    return VehicleOwner(vehicle_number, first_name, last_name, age, gender, address)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive owner-records menu."""
    parser = argparse.ArgumentParser(description="Manage vehicle owner records.")
    parser.add_argument("csv", nargs="?", default=DEFAULT_CSV, help="owner CSV file")
    args = parser.parse_args(argv)

    try:
        owners = load_owners(args.csv)
    except OSError:
        print("File not open", file=sys.stderr)
        owners = []
    except ValueError as exc:
        print(f"Malformed owner file: {exc}", file=sys.stderr)
        return 1
    registry = OwnerRegistry(owners)

    try:
        while True:
            print(_MENU)
            choice = _read_word("")[:1]
            if choice == "1":
                for line in registry.lines():
                    print(line)
            elif choice == "2":
                try:
                    registry.add(_prompt_owner(_ADD_PROMPTS))
                except ValueError as exc:
                    print(exc)
            elif choice == "3":
                number = _read_word("Enter Vehicle Number to be deleted with state code: ")
                try:
                    registry.delete(number)
                except UnknownVehicleError:
                    print("No such vehicle exists. Delete aborted.")
            elif choice == "4":
                try:
                    registry.edit(_prompt_owner(_EDIT_PROMPTS))
                except UnknownVehicleError:
                    print("No such vehicle exists. Edit aborted.")
                except ValueError as exc:
                    print(exc)
            else:
                break
    except EOFError:
        pass
    print("Exiting question 1")
    return 0


if __name__ == "__main__":
    sys.exit(main())