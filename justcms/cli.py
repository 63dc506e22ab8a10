"""
JustCMS CLI - Command-line interface for the JustCMS public API.

This layer provides read-only commands on top of the SDK layer. It handles:
- Argument parsing
- TTY detection for human vs machine output
- Table formatting for human output
- JSON output for piping/automation
"""

import argparse
import json
import logging
import sys
from typing import Any

from dotenv import find_dotenv, load_dotenv

from justcms.core.client import JustCmsError
from justcms.core.types import PageFilters
from justcms.sdk import JustCmsClient

# =============================================================================
# Output Helpers
# =============================================================================


def is_tty() -> bool:
    """Check if stdout is a TTY (human) or pipe (machine)."""
    return sys.stdout.isatty()


def json_output(data: Any, pretty: bool = False) -> None:
    """Print JSON output."""
    indent = 2 if pretty or is_tty() else None
    print(json.dumps(data, indent=indent, default=str))


def error_output(error: JustCmsError) -> None:
    """Print error and exit."""
    json_output(error.to_dict())
    sys.exit(1)


def table_output(
    headers: list[str],
    rows: list[list[str]],
    widths: list[int],
) -> None:
    """Print a formatted table for human output."""
    header_line = "  ".join(h.ljust(w) for h, w in zip(headers, widths))
    print(header_line)
    print("-" * len(header_line))

    for row in rows:
        print("  ".join(str(v)[:w].ljust(w) for v, w in zip(row, widths)))


# =============================================================================
# CLI Commands
# =============================================================================


def cmd_categories(client: JustCmsClient, args: argparse.Namespace) -> None:
    """List categories."""
    categories = client.get_categories()

    if is_tty():
        if not categories:
            print("No categories found.")
            return
        table_output(["Slug", "Name"], [[c.slug, c.name] for c in categories], [30, 40])
    else:
        json_output({"categories": [c.to_dict() for c in categories]})


def cmd_pages_list(client: JustCmsClient, args: argparse.Namespace) -> None:
    """List pages."""
    filters = PageFilters.by_category(args.category) if args.category is not None else None
    response = client.get_pages(filters, start=args.start, offset=args.offset)

    if is_tty():
        if not response.items:
            print("No pages found.")
            return
        table_output(
            ["Slug", "Title", "Categories", "Updated"],
            [
                [p.slug, p.title, ",".join(c.slug for c in p.categories), p.updated_at or ""]
                for p in response.items
            ],
            [30, 40, 20, 25],
        )
        print(f"\nShowing {len(response.items)} of {response.total}")
    else:
        json_output(response.to_dict())


def cmd_pages_get(client: JustCmsClient, args: argparse.Namespace) -> None:
    """Get a page by slug."""
    page = client.get_page_by_slug(args.slug, version=args.version)
    json_output(page.to_dict())


def cmd_menus_get(client: JustCmsClient, args: argparse.Namespace) -> None:
    """Get a menu by ID."""
    menu = client.get_menu_by_id(args.menu_id)
    json_output(menu.to_dict())


def cmd_layouts_get(client: JustCmsClient, args: argparse.Namespace) -> None:
    """Get one layout, or several in a single request."""
    if len(args.layout_ids) == 1:
        json_output(client.get_layout_by_id(args.layout_ids[0]).to_dict())
    else:
        layouts = client.get_layouts_by_ids(args.layout_ids)
        json_output({"layouts": [layout.to_dict() for layout in layouts]})


# =============================================================================
# Main CLI
# =============================================================================


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="justcms",
        description="JustCMS CLI - Read content from the JustCMS public API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Credentials:
  --token / JUSTCMS_TOKEN and --project / JUSTCMS_PROJECT. A .env file in the
  current directory is loaded first.

Examples:
  justcms categories
  justcms pages list --category blog --start 0 --offset 10
  justcms pages get about --version draft
  justcms layouts get footer header | jq '.layouts[].name'
""",
    )
    parser.add_argument("--token", help="API token (overrides JUSTCMS_TOKEN)")
    parser.add_argument("--project", help="Project ID (overrides JUSTCMS_PROJECT)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log requests to stderr")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ========== Categories ==========
    categories = subparsers.add_parser("categories", help="List categories")
    categories.set_defaults(func=cmd_categories)

    # ========== Pages ==========
    pages = subparsers.add_parser("pages", help="List and read pages")
    pages.set_defaults(func=lambda _c, _a: pages.print_help())
    pages_sub = pages.add_subparsers(dest="pages_command")

    pg_list = pages_sub.add_parser("list", help="List pages")
    pg_list.add_argument("--category", help="Only pages in this category slug")
    pg_list.add_argument("--start", type=int, help="Index of the first page")
    pg_list.add_argument("--offset", type=int, help="Number of pages to return")
    pg_list.set_defaults(func=cmd_pages_list)

    pg_get = pages_sub.add_parser("get", help="Get a page by slug")
    pg_get.add_argument("slug", help="Page slug")
    pg_get.add_argument("--version", help="Page version, e.g. draft")
    pg_get.set_defaults(func=cmd_pages_get)

    # ========== Menus ==========
    menus = subparsers.add_parser("menus", help="Read menus")
    menus.set_defaults(func=lambda _c, _a: menus.print_help())
    menus_sub = menus.add_subparsers(dest="menus_command")

    m_get = menus_sub.add_parser("get", help="Get a menu by ID")
    m_get.add_argument("menu_id", help="Menu ID")
    m_get.set_defaults(func=cmd_menus_get)

    # ========== Layouts ==========
    layouts = subparsers.add_parser("layouts", help="Read layouts")
    layouts.set_defaults(func=lambda _c, _a: layouts.print_help())
    layouts_sub = layouts.add_subparsers(dest="layouts_command")

    l_get = layouts_sub.add_parser("get", help="Get one or more layouts by ID")
    l_get.add_argument("layout_ids", nargs="+", metavar="layout_id", help="Layout ID")
    l_get.set_defaults(func=cmd_layouts_get)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # A command group without a subcommand only prints its help
    if getattr(args, f"{args.command}_command", "") is None:
        args.func(None, args)
        sys.exit(0)

    load_dotenv(find_dotenv(usecwd=True))

    try:
        client = JustCmsClient(token=args.token, project_id=args.project)
        args.func(client, args)
    except JustCmsError as e:
        error_output(e)


if __name__ == "__main__":
    main()
