"""Chef Bazaar database management CLI.

Creates or drops the relational schema for the configured environment. With
the default memory provider both commands are no-ops.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db   # Create all tables
    PROTEAN_ENV=production python src/manage.py drop-db --yes  # Drop all tables
"""

import argparse
import sys


def setup_database():
    from bazaar.domain import bazaar
    from bazaar.utils.db import setup_db

    print("Initializing bazaar domain...")
    bazaar.init()
    print("Creating database schema...")
    setup_db(bazaar)
    print("Done.")


def drop_database(confirmed=False):
    from bazaar.domain import bazaar
    from bazaar.utils.db import drop_db

    if not confirmed:
        print("Refusing to drop tables without --yes.")
        sys.exit(1)

    print("Initializing bazaar domain...")
    bazaar.init()
    print("Dropping database schema...")
    drop_db(bazaar)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Chef Bazaar database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument("--yes", action="store_true", help="Confirm dropping every table")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database(confirmed=args.yes)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
