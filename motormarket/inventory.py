"""Vehicle listings stored as whitespace-separated text files, one per category."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from itertools import islice
from pathlib import Path
from typing import Iterable, Sequence


class Category(Enum):
    """A vehicle category and the file its listings live in."""

    USED_CARS = "usedcars.txt"
    NEW_CARS = "newcars.txt"
    BIKES = "bikes.txt"

    @property
    def filename(self) -> str:
        return self.value

    @property
    def title(self) -> str:
        return _TITLES[self]

    @classmethod
    def parse_choice(cls, choice) -> "Category":
        """Map a menu choice (1 used cars, 2 new cars, 3 bikes) to a category."""
        try:
            number = int(choice)
        except (TypeError, ValueError):
            raise ValueError(f"invalid category choice: {choice!r}") from None
        try:
            return _CHOICES[number]
        except KeyError:
            raise ValueError(f"invalid category choice: {choice!r}") from None


_TITLES = {
    Category.USED_CARS: "Used Cars",
    Category.NEW_CARS: "New Cars",
    Category.BIKES: "Bikes",
}

_CHOICES = {
    1: Category.USED_CARS,
    2: Category.NEW_CARS,
    3: Category.BIKES,
}


def _format_real(value: float) -> str:
    """Render a float the way a default-formatted stream does (6 significant digits)."""
    return f"{value:g}"


@dataclass(frozen=True)
class Vehicle:
    """One listed vehicle."""

    name: str
    company: str
    model: str
    city: str
    seller: str
    engine: str
    fuel: str
    color: str
    year: int
    price: int
    rating: int
    contact: int
    mileage: float

    def to_line(self) -> str:
        """Return the tab-separated record written to a listings file."""
        tokens = [
            self.name,
            self.company,
            self.model,
            self.city,
            self.seller,
            self.engine,
            self.fuel,
            self.color,
            str(self.year),
            str(self.price),
            str(self.rating),
            str(self.contact),
            _format_real(self.mileage),
        ]
        return "\t".join(tokens) + "\t"

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "Vehicle":
        """Build a vehicle from its thirteen textual fields."""
        values = list(fields)
        if len(values) != len(_CONVERTERS):
            raise ValueError(
                f"expected {len(_CONVERTERS)} fields, got {len(values)}"
            )
        return cls(*(convert(value) for convert, value in zip(_CONVERTERS, values)))

    def describe(self) -> str:
        """Return the two-line human readable description of the vehicle."""
        return (
            f"Name: {self.name}\tCompany: {self.company}\tModel: {self.model}"
            f"\tCity: {self.city}\tSeller Name: {self.seller}\tEngine: {self.engine}\n"
            f"Fuel: {self.fuel}\tColor: {self.color}\tYear: {self.year}"
            f"\tPrice: {self.price}\tRating: {self.rating}\tContact: {self.contact}"
            f"\tMileage: {_format_real(self.mileage)}"
        )


_CONVERTERS = (str,) * 8 + (int,) * 4 + (float,)


def parse_vehicles(text: str) -> list[Vehicle]:
    """Read consecutive records from listing text, stopping at the first bad one."""
    tokens = iter(text.split())
    vehicles = []
    while True:
        chunk = list(islice(tokens, len(_CONVERTERS)))
        if len(chunk) < len(_CONVERTERS):
            break
        try:
            vehicles.append(Vehicle.from_fields(chunk))
        except ValueError:
            break
    return vehicles


def format_listing(vehicles: Iterable[Vehicle], title: str) -> str:
    """Render a titled listing of vehicles."""
    body = "".join(vehicle.describe() + "\n\n" for vehicle in vehicles)
    return f"List of {title} : \n\n{body}"


def _first_word(line: str) -> str:
    words = line.split(maxsplit=1)
    return words[0] if words else ""


class Inventory:
    """The set of listing files kept in one directory."""

    def __init__(self, directory) -> None:
        self.directory = Path(directory)

    def path(self, category: Category) -> Path:
        return self.directory / category.filename

    def add(self, category: Category, vehicle: Vehicle) -> None:
        """Append a vehicle to the category's file, creating it if needed."""
        with self.path(category).open("a", encoding="utf-8") as handle:
            handle.write(vehicle.to_line() + "\n")

    def remove(self, category: Category, name: str) -> bool:
        """Remove every record whose first word is ``name``; report whether any was."""
        path = self.path(category)
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except FileNotFoundError:
            return False
        kept = [line for line in lines if _first_word(line) != name]
        self._rewrite(path, kept)
        return len(kept) != len(lines)

    def vehicles(self, category: Category) -> list[Vehicle]:
        """Return the category's vehicles; raises FileNotFoundError if it has no file."""
        return parse_vehicles(self.path(category).read_text(encoding="utf-8"))

    def find(self, category: Category, name: str) -> Vehicle | None:
        """Return the first vehicle called ``name``, or None."""
        try:
            listed = self.vehicles(category)
        except FileNotFoundError:
            return None
        return next((vehicle for vehicle in listed if vehicle.name == name), None)

    @staticmethod
    def _rewrite(path: Path, lines: list[str]) -> None:
        descriptor, temp_name = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
        try:
            with os.fdopen(descriptor, "w", encoding="utf-8") as handle:
                handle.writelines(line + "\n" for line in lines)
            os.replace(temp_name, path)
        except BaseException:
            if os.path.exists(temp_name):
                os.unlink(temp_name)
            raise