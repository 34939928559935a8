#!/usr/bin/env python3
"""
Catalog CLI - command-line interface for managing categories.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    categories   Create, list, update, and delete categories
    migrate      Database migrations

Examples:
    python -m cli migrate apply
    python -m cli categories create Electronics
    python -m cli categories list --json
    python -m cli categories update 1 Books
    python -m cli categories delete 1 --yes
"""

import sys
import argparse
from cli import categories, migrate
from config import load_config
from services.base import Services
from db.manager import DatabaseManager
from logger import setup_logging


def build_parser():
    """Build the top-level parser with every command registered."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Catalog - category management",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    categories.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    return parser


def main():
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config()
        setup_logging(config)

        if args.command == "migrate":
            # Migrations work on the raw database, not through services
            args.func(args, DatabaseManager(config))
        else:
            args.func(args, Services(config))
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
