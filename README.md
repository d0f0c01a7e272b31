# motormarket

A small console marketplace for vehicles. Buyers, sellers and administrators
register or log in, and then browse, add or remove listings. Listings fall
into three categories: used cars, new cars and bikes.

## Installation

```
pip install .
```

## Running

```
motormarket
motormarket --directory path/to/data
```

`--directory` names the directory that holds the account and listing files.
The default is the current directory.

The program first offers `1` to register or `2` to log in.

- **Register (`1`).** Choose a username, a password and a role. The role is
  `BUYER`, `SELLER` or `ADMIN`, in all upper or all lower case. An invalid
  role ends the session before anything is saved. The username and the
  password must each be a single word. Once the account is saved, you are
  asked to log in with it.
- **Log in (`2`).** Enter a role, then your username and password. The menu
  that opens is the one for the role you entered.

A failed login ends the session with exit status 1. Running out of input does
the same.

### Menus

Each menu lists more items than it acts on. The items that act are these:

- **Buyer.**
  - `1` views one category.
  - `2` lists every category, new cars first.
  - `4` shows the seller name and contact number of a named vehicle.
  - `7` logs out.
  - Any other choice prints "please enter a valid choice".
  - The buyer menu is shown once.
- **Seller.**
  - `1` views one category and then shows the menu again.
  - `2` or `4` adds a vehicle.
  - `3` removes a vehicle by name.
- **Admin.**
  - `1` adds a vehicle and shows the menu again.
  - `2` removes a vehicle by name. The menu is shown again when the category
    choice was valid.
  - Any other choice ends the session.

When you view a category, `1` is new cars, `2` is used cars and `3` is bikes.
When you add or remove a vehicle, or ask for a seller, `1` is used cars, `2`
is new cars and `3` is bikes.

## Data files

| File            | Contents                                                  |
|-----------------|-----------------------------------------------------------|
| `userinfo.txt`  | accounts: username, password and role, one per line       |
| `usedcars.txt`  | used car listings, one tab-separated record per line      |
| `newcars.txt`   | new car listings                                          |
| `bikes.txt`     | bike listings                                             |

Each listing record holds these thirteen single-word fields, in this order:

1. name
2. company
3. model
4. city
5. seller name
6. engine
7. fuel
8. colour
9. year (whole number)
10. price (whole number)
11. rating (whole number)
12. contact (whole number)
13. mileage (number)

Reading a listing stops at the first record that is incomplete or malformed.
Removing a vehicle drops every record whose first word is the given name.

## Using it as a library

```python
from pathlib import Path
from motormarket.inventory import Category, Inventory, Vehicle, format_listing
from motormarket.users import Role, UserStore

store = UserStore(Path("userinfo.txt"))
password = "password"
store.register("alice", password, Role.parse("buyer"))
role = store.authenticate("alice", password)   # Role.BUYER

inventory = Inventory(Path("."))
inventory.add(
    Category.BIKES,
    Vehicle("Rider", "Acme", "X1", "Springfield", "bob", "125cc", "petrol",
            "red", 2020, 1500, 4, 5550100, 12000.0),
)
print(format_listing(inventory.vehicles(Category.BIKES), Category.BIKES.title))
inventory.remove(Category.BIKES, "Rider")       # True
```

The library raises and returns as follows:

- `UserStore.authenticate` raises `AuthenticationError` when the credentials
  match no account.
- `UserStore.accounts` returns every stored record.
- `Inventory.vehicles` raises `FileNotFoundError` when a category has no file
  yet.
- `Inventory.find` returns the first vehicle with a given name, or `None`.
- `Inventory.remove` reports whether any record was removed.

The menus live in `motormarket.roles`, as `Buyer`, `Seller` and `Admin`.
`account_for` builds the right one for a role. `motormarket.cli.run` runs one
whole session on a `motormarket.console.Console` and returns its exit status.

## What it does not do

Several menu items do nothing. These are inspection requests, notifications,
comments, rating a vehicle and registering in an auction. The auction view is
only a listing of every category; there is no bidding.

Passwords are stored in plain text. Accounts and listings are plain files,
with no database and no locking between sessions.