"""Interactive text interface for the parking management system."""

from __future__ import annotations

import argparse
import shlex
import sys
from dataclasses import replace
from typing import TextIO

from parkinglot.accounts import AuthError, Page, Session
from parkinglot.admin import InputError, NoSelectionError

VEHICLE_KINDS = ("car", "bike", "bus", "minivan")

HELP = (
    "Commands: login EMAIL PASSWORD | signup EMAIL PASSWORD | signup | login | "
    "admin | user | name TEXT | location TEXT | rate KIND VALUE | "
    "capacity KIND VALUE | handicapped COUNT | custom TYPE RATE CAPACITY | "
    "list | edit ROW | delete ROW | save | close | quit"
)


def _number(text: str, convert):
    try:
        return convert(text)
    except ValueError:
        raise InputError(f"Invalid number: {text}") from None


def _kind(text: str) -> str:
    if text.lower() not in VEHICLE_KINDS:
        raise InputError(f"Unknown vehicle kind: {text}")
    return text.lower()


def _admin(session: Session, command: str, args: list[str]) -> str | None:
    form = session.admin_form
    if command in ("name", "location") and args:
        setattr(form, command, " ".join(args))
    elif command in ("rate", "capacity") and len(args) == 2:
        kind = _kind(args[0])
        value = _number(args[1], float if command == "rate" else int)
        setattr(form, kind, replace(getattr(form, kind), **{command: value}))
    elif command == "handicapped" and len(args) == 1:
        form.handicapped_spots = _number(args[0], int)
    elif command == "custom" and len(args) == 3:
        form.custom_vehicle_name = args[0]
        form.custom_rate = _number(args[1], float)
        form.custom_capacity = _number(args[2], int)
        return f"Added: {form.add_custom_rate()}"
    elif command == "list" and not args:
        return "\n".join(f"{row}. {entry}" for row, entry in enumerate(form.custom_vehicles, 1))
    elif command == "edit" and len(args) == 1:
        return f"Editing: {form.edit_custom_rate(_number(args[0], int) - 1)}"
    elif command == "delete" and len(args) == 1:
        return f"Deleted: {form.delete_custom_rate(_number(args[0], int) - 1)}"
    elif command == "save" and not args:
        return f"Success: {form.save().summary()}"
    elif command == "close" and not args:
        session.close_admin()
    else:
        return f"Unknown command: {command}"
    return None


def _pages(session: Session, command: str, args: list[str]) -> str | None:
    page = session.page
    if page is Page.LOGIN and command == "login" and len(args) == 2:
        session.login(*args)
        return "Logged in."
    if page is Page.LOGIN and command == "signup" and not args:
        session.switch_signup()
    elif page is Page.SIGN_UP and command == "signup" and len(args) == 2:
        return f"Success: {session.signup(*args)}"
    elif page is Page.SIGN_UP and command == "login" and not args:
        session.switch_login()
    elif page is Page.ROLE_SELECT and command == "admin" and not args:
        session.open_admin()
    elif page is Page.ROLE_SELECT and command == "user" and not args:
        return f"User Selected: {session.select_user()}"
    else:
        return f"Unknown command: {command}"
    return None


def _run(session: Session, stream: TextIO, out: TextIO) -> int:
    print(HELP, file=out)
    for line in stream:
        try:
            words = shlex.split(line)
        except ValueError as exc:
            print(f"Input Error: {exc}", file=out)
            continue
        if not words:
            continue
        command, *args = words
        command = command.lower()
        if command in ("quit", "exit"):
            break
        handler = _admin if session.admin_open else _pages
        try:
            message = HELP if command == "help" else handler(session, command, args)
        except AuthError as exc:
            title = "Login Failed" if command == "login" else "Sign Up Failed"
            message = f"{title}: {exc}"
        except InputError as exc:
            message = f"Input Error: {exc}"
        except NoSelectionError as exc:
            message = f"No Selection: {exc}"
        if message:
            print(message, file=out)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the interactive parking management session on standard input."""
    argparse.ArgumentParser(
        prog="parkinglot",
        description="Parking management system: accounts and parking lot setup.",
    ).parse_args(argv)
    return _run(Session(), sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())