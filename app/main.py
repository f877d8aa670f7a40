"""
Text-Menu Frontend for Tourism Manager

This is the console interface customers use to manage their account.

DESIGN PRINCIPLES:
1. Two menus: one before login, one after
2. Every failure prints one clear line and returns to the menu
3. Storage failures are reported differently from input mistakes
4. Nothing here decides business rules; the service does

Run with:  python -m app.main [--users-file PATH]
"""

import argparse
import sys
from typing import Optional

from tourism.catalog import format_amount, get_package
from tourism.config import get_settings
from tourism.errors import AlreadyBookedError, TourismError
from tourism.logging_config import configure_logging
from tourism.orchestrator import TourismService, create_app_components
from tourism.services.storage import PersistenceError


ANONYMOUS_MENU = (
    "\n1. Add User\n"
    "2. Login User\n"
    "3. Menu\n"
    "4. Exit\n"
)

AUTHENTICATED_MENU = (
    "\n1. Booking\n"
    "2. Check Total\n"
    "3. Cancel Booking\n"
    "4. Change Password\n"
    "5. Logout User\n"
    "6. Menu\n"
    "7. Exit\n"
)


def read_int(prompt: str) -> Optional[int]:
    """Prompt for a whole number. Returns None if the input isn't one."""
    raw = input(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        return None


# =============================================================================
# ACTIONS
# =============================================================================

def show_packages(service: TourismService) -> None:
    print("\nMENU\n")
    for package in service.list_packages():
        print(f"{package.code:>2}. {package.destination:<18} - {format_amount(package.price)}")


def add_user(service: TourismService) -> None:
    username = input("\nEnter username: ").strip()
    if not username:
        print("\nUsername cannot be empty!")
        return
    password = input("Enter password: ")
    service.register(username, password)
    print("\nAccount created successfully!")


def login(service: TourismService) -> None:
    username = input("\nEnter username: ").strip()
    password = input("Enter password: ")
    service.login(username, password)
    print(f"\nLogin successful! Welcome {username}.")


def book(service: TourismService) -> None:
    account = service.current_user
    if account is not None and account.booking is not None:
        # Checked before prompting so the user isn't asked for a code first
        raise AlreadyBookedError(account.username, account.booking.destination)

    show_packages(service)
    code = read_int("\nEnter the tour code number: ")
    if code is None:
        print("\nInvalid tour code number entered!")
        return
    package = get_package(code)

    confirm = input("\nConfirm booking?\n1. Yes\n2. No\n\nEnter your choice: ").strip()
    if confirm != "1":
        print("\nBooking not confirmed.")
        return

    tickets = read_int("\nEnter the number of tickets for booking: ")
    if tickets is None:
        print("\nInvalid number of tickets entered!")
        return

    service.book(package.code, tickets)
    print(f"\nBooking for {package.destination} completed successfully!")


def check_total(service: TourismService) -> None:
    summary = service.check_booking()
    print(
        f"\nYou have booked {summary.ticket_count} ticket(s) to {summary.destination}. "
        f"Total cost: {format_amount(summary.total)}"
    )


def cancel(service: TourismService) -> None:
    refund = service.cancel()
    print(
        f"\nYour booking for {refund.destination} ({refund.ticket_count} ticket(s)) "
        f"has been cancelled. A refund of {format_amount(refund.amount)} will be processed."
    )


def change_password(service: TourismService) -> None:
    current = input("\nEnter your current password to continue: ")
    new = input("Enter your new password: ")
    service.change_password(current, new)
    print("\nPassword updated successfully!")


def logout(service: TourismService) -> None:
    service.logout()
    print("\nYou have been successfully logged out.")


# =============================================================================
# MENU LOOP
# =============================================================================

ANONYMOUS_ACTIONS = {
    1: add_user,
    2: login,
    3: show_packages,
}

AUTHENTICATED_ACTIONS = {
    1: book,
    2: check_total,
    3: cancel,
    4: change_password,
    5: logout,
    6: show_packages,
}


def run_menu(service: TourismService) -> int:
    """
    Drive the menus until the user exits or input runs out.

    Returns the process exit code.
    """
    while True:
        try:
            if service.session.is_authenticated:
                print(f"\nWelcome {service.session.username}!")
                print(AUTHENTICATED_MENU)
                choice = read_int("Enter your choice: ")
                actions, exit_choice = AUTHENTICATED_ACTIONS, 7
            else:
                print("\nWelcome to Tourism Manager!")
                print(ANONYMOUS_MENU)
                choice = read_int("Enter your selection: ")
                actions, exit_choice = ANONYMOUS_ACTIONS, 4

            if choice == exit_choice:
                print("\nGoodbye!")
                return 0

            action = actions.get(choice)
            if action is None:
                print("\nInvalid input! Please select a number from the menu.")
                continue

            action(service)

        except EOFError:
            print()
            return 0
        except PersistenceError as e:
            print(f"\nStorage error: {e}")
        except TourismError as e:
            print(f"\n{e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tourism",
        description="Tourism management system: accounts and tour bookings",
    )
    parser.add_argument(
        "--users-file",
        default=None,
        help="Path to the accounts file (default: TOURISM_STORAGE_USERS_FILE or users.txt)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.app)

    try:
        service = create_app_components(settings, users_file=args.users_file)
    except TourismError as e:
        print(f"ERROR: could not load accounts: {e}", file=sys.stderr)
        return 1

    return run_menu(service)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
