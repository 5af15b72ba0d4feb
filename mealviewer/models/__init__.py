"""Pydantic models for the MealViewer client."""

from .menu import (
    CalendarDate,
    MealPeriod,
    FoodType,
    MenuQuery,
    School,
    NutritionFacts,
    MenuItem,
    CafeteriaLine,
    MenuBlock,
    DailyMenu,
    MenuQueryResult,
)
from .raw import RawMenuResponse

__all__ = [
    # Query
    "CalendarDate",
    "MenuQuery",
    # Menu
    "MealPeriod",
    "FoodType",
    "School",
    "NutritionFacts",
    "MenuItem",
    "CafeteriaLine",
    "MenuBlock",
    "DailyMenu",
    "MenuQueryResult",
    # Raw payload
    "RawMenuResponse",
]
