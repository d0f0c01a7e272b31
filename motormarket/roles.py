"""Interactive menus for buyers, sellers and administrators."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .console import Console
from .inventory import Category, Inventory, Vehicle, format_listing
from .users import Role

_VIEW_CHOICES = {
    1: Category.NEW_CARS,
    2: Category.USED_CARS,
    3: Category.BIKES,
}

_VIEW_PROMPT = (
    "you chose to view vehicles. Below are the types of vehicles: \n\n"
    "1. New Cars\n"
    "2. Used Cars\n"
    "3. Bikes\n"
    "enter the type of vehicle to view (1,2,3): "
)

_ADD_PROMPT = (
    "what category you want to add?\n"
    "1: For used car.\n"
    "2: For New car.\n"
    "3: For bikes\n"
    "enter the category you want to add (1,2,3)\n"
)

_REMOVE_PROMPT = (
    "Choose the category to remove vehicle\n"
    "1: Used cars\n"
    "2: New cars\n"
    "3: Bikes\n"
)

_CONTACT_PROMPT = (
    "chose the category of which you need seller detail."
    "   1:used cars     2:new cars     3:bikes\n"
)

_TEXT_FIELDS = (
    ("name", "Name: "),
    ("company", "Company: "),
    ("model", "Model: "),
    ("city", "City: "),
    ("seller", "Seller Name: "),
    ("engine", "Engine: "),
    ("fuel", "Fuel: "),
    ("color", "Color: "),
)

_INT_FIELDS = (
    ("year", "Year: "),
    ("price", "Price: "),
    ("rating", "Rating: "),
    ("contact", "Contact: "),
)


def prompt_vehicle(console: Console) -> Vehicle:
    """Ask for every field of a vehicle and return it."""
    console.write("enter the info of the car you want to add\n")
    values: dict[str, object] = {}
    for field, prompt in _TEXT_FIELDS:
        values[field] = console.ask(prompt)
    for field, prompt in _INT_FIELDS:
        values[field] = console.ask_int(prompt)
    console.write("Mileage: ")
    values["mileage"] = console.read_float()
    return Vehicle(**values)


class Account(ABC):
    """A logged-in user with a menu of actions on the inventory."""

    role: Role

    def __init__(self, username: str, password: str, inventory: Inventory, console: Console) -> None:
        self.username = username
        self.password = password
        self.inventory = inventory
        self.console = console

    @abstractmethod
    def menu(self) -> None:
        """Show the menu and carry out the chosen actions."""

    def _read_number(self) -> int | None:
        token = self.console.read_token()
        try:
            return int(token)
        except ValueError:
            return None

    def show_category(self, category: Category) -> None:
        """Print the listing of one category."""
        try:
            vehicles = self.inventory.vehicles(category)
        except FileNotFoundError:
            self.console.write(f"Error opening file: {category.filename}\n")
            return
        self.console.write(format_listing(vehicles, category.title))

    def choose_category(self) -> Category | None:
        """Ask which category to remove from; None when the choice is invalid."""
        self.console.write(_REMOVE_PROMPT)
        try:
            return Category.parse_choice(self.console.read_token())
        except ValueError:
            return None

    def _view_vehicles(self) -> None:
        self.console.write(_VIEW_PROMPT)
        category = _VIEW_CHOICES.get(self._read_number())
        if category is None:
            self.console.write("invalid choice\n")
        else:
            self.show_category(category)

    def _add_vehicle(self) -> None:
        self.console.write(_ADD_PROMPT)
        try:
            category = Category.parse_choice(self.console.read_token())
        except ValueError:
            self.console.write("invalid choice\n")
            return
        self.inventory.add(category, prompt_vehicle(self.console))
        self.console.write("vehicle added\n")

    def _remove_vehicle(self, category: Category, name: str) -> bool:
        removed = self.inventory.remove(category, name)
        if removed:
            self.console.write("Vehicle removed successfully.\n")
        else:
            self.console.write("Vehicle not found.\n")
        return removed

    def _removal_dialog(self) -> bool:
        """Run the remove dialog; report whether the category choice was valid."""
        category = self.choose_category()
        self.console.write("enter the car name to remove\n")
        name = self.console.read_token()
        if category is None:
            return False
        self._remove_vehicle(category, name)
        return True


class Buyer(Account):
    role = Role.BUYER

    _MENU = (
        "Welcome to buyer menu:\n"
        "1. View Vehicles\n"
        "2. View Auction\n"
        "3. Request inspection report\n"
        "4. Conatct Seller\n"
        "5. View Notifications\n"
        "6. Add a comment\n"
        "7. Logout\n"
        "your choice: "
    )

    def menu(self) -> None:
        self.console.write(self._MENU)
        selection = self._read_number()
        if selection == 1:
            self.view_vehicles()
        elif selection == 2:
            self.view_auction()
        elif selection == 4:
            self.contact_seller()
        elif selection == 7:
            self.console.write("logging you out now\n")
        else:
            self.console.write("please enter a valid choice\n")

    def view_vehicles(self) -> None:
        self._view_vehicles()

    def view_auction(self) -> None:
        """Print every category, new cars first."""
        self.console.write("Below are all the categories of vehicles available\n\n")
        sections = (
            ("****The new cars ****", Category.NEW_CARS),
            ("****The used cars ****", Category.USED_CARS),
            ("****The bikes ****", Category.BIKES),
        )
        for position, (heading, category) in enumerate(sections):
            if position:
                self.console.write("\n")
            self.console.write(heading + "\n")
            self.show_category(category)

    def contact_seller(self) -> None:
        """Print the seller of a named vehicle."""
        self.console.write(_CONTACT_PROMPT)
        try:
            category = Category.parse_choice(self.console.read_token())
        except ValueError:
            return
        self.console.write("enter the car name of which you the Seller details\n")
        name = self.console.read_token()
        vehicle = self.inventory.find(category, name)
        if vehicle is None:
            self.console.write("Vehicle not found.\n")
            return
        self.console.write(
            "Seller info :\n"
            f"Seller name :{vehicle.seller}\n"
            f"Seller contact :{vehicle.contact}\n"
        )


class Seller(Account):
    role = Role.SELLER

    _MENU = (
        "Welcome to seller menu:\n"
        "1. View Vehicles\n"
        "2. Add Vehicle\n"
        "3. Remove vehicle\n"
        "4. Register in auction\n"
        "5. View Notifications\n"
        "6. Login\n"
        "your choice: "
    )

    def menu(self) -> None:
        while True:
            self.console.write(self._MENU)
            selection = self._read_number()
            if selection == 1:
                self.view_vehicles()
                continue
            if selection in (2, 4):
                self.add_vehicle()
            elif selection == 3:
                if not self._removal_dialog():
                    self.console.write("invalid choice\n")
            elif selection == 7:
                self.console.write("logging you out now\n")
            else:
                self.console.write("please enter a valid choice\n")
            return

    def view_vehicles(self) -> None:
        self._view_vehicles()

    def add_vehicle(self) -> None:
        self._add_vehicle()

    def remove_vehicle(self, category: Category, name: str) -> bool:
        return self._remove_vehicle(category, name)


class Admin(Account):
    role = Role.ADMIN

    _MENU = (
        "Welcome to admin menu:\n"
        "1. Add Vehicles\n"
        "2. Remove Vehicles\n"
        "3. Manage inspection requests\n"
        "4. Add Notification\n"
        "5. Remove Notification\n"
        "6. Rate a vehicle\n"
        "7. Logout\n"
        "your choice: "
    )

    def menu(self) -> None:
        while True:
            self.console.write(self._MENU)
            selection = self._read_number()
            if selection == 1:
                self.add_vehicle()
                continue
            if selection == 2 and self._removal_dialog():
                continue
            return

    def add_vehicle(self) -> None:
        self._add_vehicle()

    def remove_vehicle(self, category: Category, name: str) -> bool:
        return self._remove_vehicle(category, name)


_ACCOUNT_TYPES: dict[Role, type[Account]] = {
    Role.BUYER: Buyer,
    Role.SELLER: Seller,
    Role.ADMIN: Admin,
}


def account_for(role, username: str, password: str, inventory: Inventory, console: Console) -> Account:
    """Create the account kind that matches ``role`` (a Role or its name)."""
    if not isinstance(role, Role):
        role = Role.parse(role)
    return _ACCOUNT_TYPES[role](username, password, inventory, console)