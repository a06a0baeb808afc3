"""Storefront database management CLI.

Creates and drops relational schemas when the storefront domain is configured
with a sqlite or postgresql provider. The default in-memory provider needs
neither, and both commands report that nothing was touched.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_databases():
    from storefront.domain import storefront
    from storefront.utils.db import setup_db

    print("Initializing storefront domain...")
    storefront.init()
    touched = setup_db(storefront)
    print(f"  schema ready for: {', '.join(touched) or 'no relational providers'}")
    print("Done.")


def drop_databases():
    from storefront.domain import storefront
    from storefront.utils.db import drop_db

    print("Initializing storefront domain...")
    storefront.init()
    touched = drop_db(storefront)
    print(f"  schema dropped for: {', '.join(touched) or 'no relational providers'}")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
