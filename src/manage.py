"""Pão da Roça storefront management CLI.

Works against the configured blob store, so point BLOB_STORE_ADAPTER=file and
BLOB_STORE_DIR at the session data to inspect or repair it.

Usage:
    python src/manage.py list               # Products in catalog order
    python src/manage.py categories         # Browse view, one section per category
    python src/manage.py adjust ID DELTA    # Change a cart quantity
    python src/manage.py summary            # Order summary for the current cart
    python src/manage.py reset-catalog      # Replace the catalog with the seed set
"""

import argparse
import sys

from protean.exceptions import ValidationError

from shared.errors import PersistenceError
from shared.money import format_money


def _open_storefront():
    from catalogue.domain import catalogue
    from storefront import get_storefront

    catalogue.init()
    catalogue.domain_context().push()
    return get_storefront()


def list_products(storefront):
    for product in storefront.catalog.list():
        if product.variants:
            print(f"{product.id}  {product.name}  [{product.category}]")
            for variant in product.variants:
                print(f"    {variant.id}  ({variant.label})  {format_money(variant.price)}")
        else:
            print(f"{product.id}  {product.name}  [{product.category}]  {format_money(product.price)}")


def list_categories(storefront):
    for group in storefront.categories():
        print(f"{group.category}:")
        for product in group.products:
            print(f"  • {product.name}")


def show_summary(storefront):
    summary = storefront.order_summary()
    if summary.item_count == 0:
        print("Cart is empty.")
        return
    print(summary.summary_text)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Pão da Roça storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List products in catalog order")
    subparsers.add_parser("categories", help="Show products grouped by category")
    subparsers.add_parser("summary", help="Print the order summary for the current cart")
    subparsers.add_parser("reset-catalog", help="Replace the catalog with the seed products")

    adjust_parser = subparsers.add_parser("adjust", help="Change the cart quantity of a line item")
    adjust_parser.add_argument("line_id")
    adjust_parser.add_argument("delta", type=int)

    args = parser.parse_args(argv)
    storefront = _open_storefront()

    try:
        if args.command == "list":
            list_products(storefront)
        elif args.command == "categories":
            list_categories(storefront)
        elif args.command == "summary":
            show_summary(storefront)
        elif args.command == "reset-catalog":
            storefront.reset_catalog()
            print("Catalog reset to seed products.")
        elif args.command == "adjust":
            quantity = storefront.adjust(args.line_id, args.delta)
            print(f"{args.line_id}: {quantity}")
        else:
            parser.print_help()
            sys.exit(1)
    except ValidationError as exc:
        print(f"Invalid input: {exc.messages}", file=sys.stderr)
        sys.exit(2)
    except PersistenceError as exc:
        print(f"Change applied but not saved: {exc}", file=sys.stderr)
        sys.exit(3)


if __name__ == "__main__":
    main()
