"""
Command line menu lookup.

Usage:
    mealviewer ElmwoodElementary 2025-01-15               # One day
    mealviewer ElmwoodElementary 2025-01-13 2025-01-17    # Date range
    mealviewer ElmwoodElementary 2025-01-15 --json        # Output as JSON
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from mealviewer.client import MealViewerClient
from mealviewer.config import get_settings
from mealviewer.exceptions import MealViewerError
from mealviewer.models.menu import MenuQuery, MenuQueryResult


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mealviewer",
        description="Look up school lunch menus on MealViewer",
    )
    parser.add_argument("school", help="MealViewer school identifier, e.g. ElmwoodElementary")
    parser.add_argument("start_date", help="First day, YYYY-MM-DD")
    parser.add_argument("end_date", nargs="?", help="Last day, YYYY-MM-DD (defaults to start)")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--debug", action="store_true", help="Log request diagnostics")
    parser.add_argument("--base-url", help="Override the API base URL")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    return parser


def render(result: MenuQueryResult) -> str:
    """Render a menu result as plain text."""
    school = result.school
    location = ", ".join(part for part in (school.city, school.state) if part)

    lines = [
        "=" * 60,
        f"  {school.name}",
        f"  {school.address}, {location}",
        "=" * 60,
    ]

    if not result.menus:
        lines.append("  No menus published for this date range.")

    for menu in result.menus:
        lines.append("")
        lines.append(f"  {menu.date.strftime('%A %Y-%m-%d')}")
        for block in menu.meals:
            lines.append(f"    {block.meal_period.value}")
            for line in block.cafeteria_lines:
                lines.append(f"      [{line.name}]")
                for item in line.items:
                    lines.append(f"        {item.name:<32} {item.food_type:<10} {item.serving_size}")

    return "\n".join(lines)


async def run(args: argparse.Namespace) -> MenuQueryResult:
    query = MenuQuery(school_id=args.school, start_date=args.start_date, end_date=args.end_date)
    async with MealViewerClient(
        base_url=args.base_url,
        timeout=args.timeout,
        debug=args.debug or None,
    ) as client:
        return await client.get_menu(query)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    level = logging.DEBUG if args.debug else getattr(logging, settings.log_level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        result = asyncio.run(run(args))
    except MealViewerError as e:
        print(f"Error [{e.code.value}]: {e.message}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(render(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
