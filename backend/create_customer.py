#!/usr/bin/env python
"""
Create a customer record.

Usage:
    uv run python create_customer.py jane@example.com --first-name Jane --last-name Doe
    uv run python create_customer.py john@example.com --inactive --unverified

The password is read from --password or prompted for.
"""

import argparse
import getpass
import sys

from rich.console import Console

from shared.database import get_supabase_client
from modules.auth.passwords import hash_password
from modules.customers.repository import CustomerRepository

console = Console()


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a storefront customer")
    parser.add_argument("email", help="Login email")
    parser.add_argument("--password", help="Password (prompted if omitted)")
    parser.add_argument("--first-name", default="", help="First name")
    parser.add_argument("--last-name", default="", help="Last name")
    parser.add_argument("--inactive", action="store_true", help="Create with status off")
    parser.add_argument("--unverified", action="store_true", help="Create with email unverified")
    args = parser.parse_args()

    password = args.password or getpass.getpass("Password: ")
    if not password:
        console.print("[red]Error:[/red] Password must not be empty.")
        return 1

    repo = CustomerRepository(get_supabase_client())
    if repo.get_by_email(args.email) is not None:
        console.print(f"[red]Error:[/red] A customer with email {args.email} already exists.")
        return 1

    customer = repo.create(
        {
            "email": args.email,
            "password": hash_password(password),
            "first_name": args.first_name,
            "last_name": args.last_name,
            "status": not args.inactive,
            "is_verified": not args.unverified,
        }
    )
    console.print(f"[green]✓[/green] Created customer {customer.id} <{customer.email}>")
    return 0


if __name__ == "__main__":
    sys.exit(main())
