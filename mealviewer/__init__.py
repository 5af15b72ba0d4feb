"""MealViewer school lunch menu client.

Fetches menus from the MealViewer API and returns them as immutable
pydantic models.
"""

from .client import MealViewerClient
from .exceptions import ErrorCode, MealViewerError, classify
from .models import (
    CafeteriaLine,
    DailyMenu,
    FoodType,
    MealPeriod,
    MenuBlock,
    MenuItem,
    MenuQuery,
    MenuQueryResult,
    NutritionFacts,
    School,
)
from .parser import map_response
from .urls import build_url

__version__ = "0.1.0"

__all__ = [
    "MealViewerClient",
    "MealViewerError",
    "ErrorCode",
    "classify",
    "build_url",
    "map_response",
    "MenuQuery",
    "MenuQueryResult",
    "DailyMenu",
    "MenuBlock",
    "MealPeriod",
    "CafeteriaLine",
    "MenuItem",
    "FoodType",
    "NutritionFacts",
    "School",
]
