#!/usr/bin/env python3

import sys
import json
from pydantic import ValidationError
from exceptions import DuplicateNameError, NotFoundError
from logger import get_logger
from schemas.category import CategoryPayload, CategoryResponse

logger = get_logger()


def _parse_payload(name):
    """Validate a category name, exiting with status 1 if it is invalid."""
    try:
        return CategoryPayload(name=name)
    except ValidationError as e:
        error = e.errors()[0]
        logger.error(f"Invalid category name: {error['msg']}")
        sys.exit(1)


def cmd_list(args, services):
    """List all categories."""
    categories = services.categories.list()

    if args.json:
        payload = [CategoryResponse.from_category(c).model_dump() for c in categories]
        print(json.dumps(payload, indent=2))
        return

    if not categories:
        logger.info("No categories found.")
        return

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in categories:
        logger.info(f"ID: {category.id}")
        logger.info(f"Name: {category.name}")
        logger.info("-" * 80)

    logger.info(f"\nTotal categories: {len(categories)}")


def cmd_create(args, services):
    """Create a new category, prompting for the name if it was not given."""
    name = args.name
    if name is None:
        name = input("Category name (e.g., Electronics): ")

    payload = _parse_payload(name)

    try:
        category = services.categories.create(payload.to_category())
    except DuplicateNameError as e:
        logger.error(f"Error creating category: {e}")
        sys.exit(1)

    logger.info(f"✓ Category added successfully (ID: {category.id})")
    logger.info(f"  Name: {category.name}")


def cmd_update(args, services):
    """Rename a category by ID."""
    payload = _parse_payload(args.name)

    try:
        category = services.categories.update(payload.to_category(), args.category_id)
    except NotFoundError as e:
        logger.error(f"Error updating category: {e}")
        sys.exit(1)

    logger.info(f"✓ Category with ID {category.id} updated: {category.name}")


def cmd_delete(args, services):
    """Delete a category by ID."""
    category_id = args.category_id

    if not args.yes:
        confirm = (
            input(f"\nDelete category with ID {category_id}? (yes/no): ")
            .strip()
            .lower()
        )
        if confirm != "yes":
            logger.info("Deletion cancelled.")
            return

    try:
        message = services.categories.delete(category_id)
    except NotFoundError as e:
        logger.error(f"Error deleting category: {e}")
        sys.exit(1)

    logger.info(f"✓ {message}")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="Create, list, update, and delete categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    # categories list
    list_parser = categories_subparsers.add_parser("list", help="List all categories")
    list_parser.add_argument(
        "--json",
        action="store_true",
        help="Print categories as a JSON array",
    )
    list_parser.set_defaults(func=cmd_list)

    # categories create
    create_parser = categories_subparsers.add_parser(
        "create", help="Create a new category"
    )
    create_parser.add_argument(
        "name",
        nargs="?",
        help="Category name (prompted for if omitted)",
    )
    create_parser.set_defaults(func=cmd_create)

    # categories update
    update_parser = categories_subparsers.add_parser(
        "update", help="Rename a category by ID"
    )
    update_parser.add_argument(
        "category_id",
        type=int,
        help="ID of the category to update",
    )
    update_parser.add_argument("name", help="New category name")
    update_parser.set_defaults(func=cmd_update)

    # categories delete
    delete_parser = categories_subparsers.add_parser(
        "delete", help="Delete a category by ID"
    )
    delete_parser.add_argument(
        "category_id",
        type=int,
        help="ID of the category to delete",
    )
    delete_parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Skip the confirmation prompt",
    )
    delete_parser.set_defaults(func=cmd_delete)
