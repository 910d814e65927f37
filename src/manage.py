"""Storefront database management CLI.

Usage:
    python src/manage.py setup-db        # Create all tables
    python src/manage.py drop-db         # Drop all tables
    python src/manage.py seed-products   # Load the starter products
"""

import argparse
import sys


def _storefront():
    from storefront.domain import storefront

    storefront.init()
    return storefront


def setup_database():
    from storefront.utils.db import setup_db

    domain = _storefront()
    print("Creating storefront database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from storefront.utils.db import drop_db

    domain = _storefront()
    print("Dropping storefront database schema...")
    drop_db(domain)
    print("Done.")


def seed_database():
    from storefront.catalogue.seed import seed_products

    domain = _storefront()
    with domain.domain_context():
        ids = seed_products()
    print(f"Seeded {len(ids)} products:")
    for product_id in ids:
        print(f"  {product_id}")


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed-products", help="Load the starter product list")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed-products":
        seed_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
