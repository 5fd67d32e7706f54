"""Storefront database management CLI.

Creates or drops the relational schema of the storefront domain. Only SQL
providers are touched; the in-memory provider needs no schema.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db   # Create all tables
    PROTEAN_ENV=production python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys

from storefront.domain import logger


def setup_database():
    """Create database tables for every storefront aggregate and entity."""
    from storefront.domain import storefront
    from storefront.utils.db import setup_db

    storefront.init()
    setup_db(storefront)
    logger.info("Database schema ready", domain=storefront.name)


def drop_database():
    """Drop the storefront database tables."""
    from storefront.domain import storefront
    from storefront.utils.db import drop_db

    storefront.init()
    drop_db(storefront)
    logger.info("Database schema dropped", domain=storefront.name)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
