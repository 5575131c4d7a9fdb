"""Orders database management CLI.

Creates and drops the relational schema of the orders domain for the
provider selected by PROTEAN_ENV. The in-memory provider needs no schema
and is skipped.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_databases():
    """Create database schemas for the orders domain."""
    from orders.domain import orders
    from orders.utils.db import setup_db

    print("Initializing orders domain...")
    orders.init()
    print("Creating orders database schema...")
    prepared = setup_db(orders)
    print(f"  Schema ready for providers: {', '.join(prepared) or 'none (no SQL provider configured)'}")
    print("Done.")
    return prepared


def drop_databases():
    """Drop database schemas for the orders domain."""
    from orders.domain import orders
    from orders.utils.db import drop_db

    print("Initializing orders domain...")
    orders.init()
    print("Dropping orders database schema...")
    dropped = drop_db(orders)
    print(f"  Schema dropped for providers: {', '.join(dropped) or 'none (no SQL provider configured)'}")
    print("Done.")
    return dropped


def main(argv=None):
    parser = argparse.ArgumentParser(description="Orders database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
