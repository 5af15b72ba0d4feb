"""
MealViewer response mapping.

Turns the provider's nested payload into the menu models. Pure and
side-effect free; a payload that fails validation raises
pydantic.ValidationError, which the client classifies.
"""

import datetime
from typing import Optional, Union

from mealviewer.models.menu import (
    CafeteriaLine,
    DailyMenu,
    MealPeriod,
    MenuBlock,
    MenuItem,
    MenuQueryResult,
    School,
)
from mealviewer.models.raw import (
    RawCafeteriaLine,
    RawFoodItem,
    RawMenuBlock,
    RawMenuResponse,
    RawMenuSchedule,
    RawPhysicalLocation,
)

# Checked in order, first match wins
MEAL_PERIOD_KEYWORDS = (
    ("breakfast", MealPeriod.BREAKFAST),
    ("lunch", MealPeriod.LUNCH),
    ("dinner", MealPeriod.DINNER),
    ("snack", MealPeriod.SNACK),
)
DEFAULT_MEAL_PERIOD = MealPeriod.LUNCH


def detect_meal_period(block_name: str) -> MealPeriod:
    """Meal period for a menu block name, Lunch when nothing matches."""
    name = block_name.lower()
    for keyword, period in MEAL_PERIOD_KEYWORDS:
        if keyword in name:
            return period
    return DEFAULT_MEAL_PERIOD


def parse_menu_date(date_full: str) -> datetime.date:
    """Date part of an API date string such as "2025-01-15T00:00:00"."""
    return datetime.date.fromisoformat(date_full.strip()[:10])


def map_response(raw: Union[dict, RawMenuResponse]) -> MenuQueryResult:
    """Map a raw MealViewer payload to a MenuQueryResult."""
    if not isinstance(raw, RawMenuResponse):
        raw = RawMenuResponse.model_validate(raw)

    school = _map_school(raw.physical_location)
    menus = tuple(_map_schedule(schedule, school) for schedule in raw.menu_schedules)

    return MenuQueryResult(menus=menus, school=school)


def _map_school(location: RawPhysicalLocation) -> School:
    return School(
        name=location.name,
        address=location.address,
        city=location.city,
        state=location.state,
        latitude=location.latitude,
        longitude=location.longitude,
    )


def _map_schedule(schedule: RawMenuSchedule, school: School) -> DailyMenu:
    return DailyMenu(
        date=parse_menu_date(schedule.date_information.date_full),
        school=school,
        meals=tuple(_map_block(block) for block in schedule.menu_blocks),
    )


def _map_block(block: RawMenuBlock) -> MenuBlock:
    return MenuBlock(
        meal_period=detect_meal_period(block.block_name),
        cafeteria_lines=tuple(_map_line(line) for line in block.cafeteria_line_list.data),
    )


def _map_line(line: RawCafeteriaLine) -> CafeteriaLine:
    return CafeteriaLine(
        name=line.name,
        items=tuple(_map_item(item) for item in line.food_item_list.data),
    )


def _map_item(item: RawFoodItem) -> MenuItem:
    # Nutritionals and allergens are left unmapped
    return MenuItem(
        name=item.item_name,
        alt_name=_non_empty(item.item_alt_name),
        description=_non_empty(item.description),
        food_type=item.item_type,
        serving_size=item.serving_size,
    )


def _non_empty(value: Optional[str]) -> Optional[str]:
    return value or None
