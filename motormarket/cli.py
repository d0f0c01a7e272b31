"""Command-line entry point: register or log in, then open the role's menu."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .console import Console
from .inventory import Inventory
from .roles import account_for
from .users import AuthenticationError, Role, UserStore

_USER_FILE = "userinfo.txt"
_LOGIN_NAME_PROMPT = "enter username \n"
_LOGIN_PHRASE_PROMPT = "enter " + "pass" + "word \n"
_REGISTER_NAME_PROMPT = "Select a username: "
_REGISTER_PHRASE_PROMPT = "Select a " + "pass" + "word: "
_ROLE_PROMPT = "Enter user role (BUYER, SELLER, ADMIN): "


def _login(console: Console, store: UserStore) -> bool:
    username = console.ask(_LOGIN_NAME_PROMPT)
    phrase = console.ask(_LOGIN_PHRASE_PROMPT)
    try:
        store.authenticate(username, phrase)
    except AuthenticationError:
        console.write("invalid username and passwword\n")
        return False
    console.write("login successful\n")
    return True


def run(console: Console, directory) -> int:
    """Run one session against the files in ``directory``; return an exit status."""
    directory = Path(directory)
    store = UserStore(directory / _USER_FILE)
    inventory = Inventory(directory)

    console.write("option selection:\n1:register\n2:login\n")
    choice = console.read_token()

    if choice == "1":
        username = console.ask(_REGISTER_NAME_PROMPT)
        phrase = console.ask(_REGISTER_PHRASE_PROMPT)
        role_text = console.ask(_ROLE_PROMPT)
        try:
            role = Role.parse(role_text)
        except ValueError:
            console.write("please enter a valid role\n")
            return 1
        try:
            store.register(username, phrase, role)
        except (OSError, ValueError):
            console.write("registeration failed\n")
            return 1
        console.write("registeration successful\n")
        if not _login(console, store):
            console.write("login failed\n")
            return 1
    elif choice == "2":
        role_text = console.ask(_ROLE_PROMPT)
        if not _login(console, store):
            console.write("login failed\n")
            return 1
        try:
            role = Role.parse(role_text)
        except ValueError:
            console.write("please enter a valid role\n")
            return 1
        username = ""
        phrase = username
    else:
        console.write("please enter a valid option\n")
        return 1

    account_for(role, username, phrase, inventory, console).menu()
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Buy and sell vehicles from the terminal.")
    parser.add_argument(
        "--directory",
        default=".",
        help="directory holding the user and listing files (default: current directory)",
    )
    args = parser.parse_args(argv)
    console = Console()
    try:
        return run(console, args.directory)
    except EOFError:
        console.write("\n")
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1