import io

import pytest

from motormarket.console import Console
from motormarket.inventory import Category, Inventory, Vehicle
from motormarket.roles import Admin, Buyer, Seller, account_for, prompt_vehicle
from motormarket.users import Role

SAMPLE = Vehicle(
    "Civic", "Honda", "Sport", "Lahore", "Ali", "1800cc", "Petrol", "Black",
    2020, 5000, 4, 1234, 12.5,
)

SAMPLE_TOKENS = "Civic Honda Sport Lahore Ali 1800cc Petrol Black 2020 5000 4 1234 12.5"


def _console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def _account(cls, tmp_path, text):
    console, out = _console(text)
    return cls("someone", "password", Inventory(tmp_path), console), out


def test_prompt_vehicle_builds_vehicle():
    console, out = _console(SAMPLE_TOKENS + "\n")
    assert prompt_vehicle(console) == SAMPLE
    assert "Seller Name: " in out.getvalue()


def test_prompt_vehicle_rejects_bad_year():
    console, _ = _console("Civic Honda Sport Lahore Ali 1800cc Petrol Black soon\n")
    with pytest.raises(ValueError):
        prompt_vehicle(console)


def test_seller_add_vehicle_appends_to_used_cars(tmp_path):
    seller, out = _account(Seller, tmp_path, "1\n" + SAMPLE_TOKENS + "\n")
    seller.add_vehicle()
    assert Inventory(tmp_path).vehicles(Category.USED_CARS) == [SAMPLE]
    assert "vehicle added" in out.getvalue()


def test_admin_add_vehicle_invalid_category(tmp_path):
    admin, out = _account(Admin, tmp_path, "9\n")
    admin.add_vehicle()
    assert "invalid choice" in out.getvalue()
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("cls", [Seller, Admin])
def test_remove_vehicle_reports_result(tmp_path, cls):
    Inventory(tmp_path).add(Category.BIKES, SAMPLE)
    account, out = _account(cls, tmp_path, "")
    assert account.remove_vehicle(Category.BIKES, "Civic") is True
    assert "Vehicle removed successfully." in out.getvalue()
    assert account.remove_vehicle(Category.BIKES, "Civic") is False
    assert out.getvalue().endswith("Vehicle not found.\n")


def test_buyer_view_vehicles_uses_new_cars_first(tmp_path):
    Inventory(tmp_path).add(Category.NEW_CARS, SAMPLE)
    buyer, out = _account(Buyer, tmp_path, "1\n")
    buyer.view_vehicles()
    assert "List of New Cars : " in out.getvalue()
    assert SAMPLE.describe() in out.getvalue()


def test_show_category_missing_file(tmp_path):
    buyer, out = _account(Buyer, tmp_path, "")
    buyer.show_category(Category.NEW_CARS)
    assert out.getvalue() == "Error opening file: newcars.txt\n"


def test_view_auction_order(tmp_path):
    buyer, out = _account(Buyer, tmp_path, "")
    buyer.view_auction()
    text = out.getvalue()
    assert text.index("****The new cars ****") < text.index("****The used cars ****") < text.index("****The bikes ****")


def test_contact_seller_prints_details(tmp_path):
    Inventory(tmp_path).add(Category.NEW_CARS, SAMPLE)
    buyer, out = _account(Buyer, tmp_path, "2 Civic\n")
    buyer.contact_seller()
    assert out.getvalue().endswith("Seller info :\nSeller name :Ali\nSeller contact :1234\n")


def test_contact_seller_unknown_vehicle(tmp_path):
    Inventory(tmp_path).add(Category.NEW_CARS, SAMPLE)
    buyer, out = _account(Buyer, tmp_path, "2 Corolla\n")
    buyer.contact_seller()
    assert "Seller info" not in out.getvalue()
    assert "Vehicle not found." in out.getvalue()


@pytest.mark.parametrize(
    "selection, expected",
    [("7", "logging you out now"), ("3", "please enter a valid choice")],
)
def test_buyer_menu_messages(tmp_path, selection, expected):
    buyer, out = _account(Buyer, tmp_path, selection + "\n")
    buyer.menu()
    assert out.getvalue().endswith(expected + "\n")


def test_admin_menu_redisplays_after_add(tmp_path):
    admin, out = _account(Admin, tmp_path, "1 3 " + SAMPLE_TOKENS + " 7\n")
    admin.menu()
    assert out.getvalue().count("Welcome to admin menu:") == 2
    assert Inventory(tmp_path).vehicles(Category.BIKES) == [SAMPLE]


def test_admin_menu_remove_then_logout(tmp_path):
    Inventory(tmp_path).add(Category.USED_CARS, SAMPLE)
    admin, out = _account(Admin, tmp_path, "2 1 Civic 7\n")
    admin.menu()
    assert Inventory(tmp_path).vehicles(Category.USED_CARS) == []
    assert out.getvalue().count("Welcome to admin menu:") == 2


def test_seller_menu_view_redisplays(tmp_path):
    seller, out = _account(Seller, tmp_path, "1 4 7\n")
    seller.menu()
    text = out.getvalue()
    assert text.count("Welcome to seller menu:") == 2
    assert "invalid choice" in text
    assert text.endswith("logging you out now\n")


def test_seller_menu_remove(tmp_path):
    Inventory(tmp_path).add(Category.NEW_CARS, SAMPLE)
    seller, out = _account(Seller, tmp_path, "3 2 Civic\n")
    seller.menu()
    assert Inventory(tmp_path).find(Category.NEW_CARS, "Civic") is None
    assert out.getvalue().count("Welcome to seller menu:") == 1


@pytest.mark.parametrize(
    "role, cls",
    [(Role.BUYER, Buyer), ("seller", Seller), ("ADMIN", Admin)],
)
def test_account_for(tmp_path, role, cls):
    console, _ = _console("")
    account = account_for(role, "someone", "password", Inventory(tmp_path), console)
    assert type(account) is cls
    assert account.username == "someone"


def test_account_for_invalid_role(tmp_path):
    console, _ = _console("")
    with pytest.raises(ValueError):
        account_for("Guest", "someone", "password", Inventory(tmp_path), console)