"""Menu models returned by the MealViewer client."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


# A calendar day, either a date value or an ISO "YYYY-MM-DD" string
CalendarDate = Union[datetime.date, str]


class MealPeriod(str, Enum):
    """Meal period of a menu block."""
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


class FoodType(str, Enum):
    """Food types MealViewer is known to report. Others are passed through."""
    ENTREE = "Entree"
    SIDE = "Side"
    VEGETABLE = "Vegetable"
    FRUIT = "Fruit"
    MILK = "Milk"
    CONDIMENT = "Condiment"


@dataclass(frozen=True)
class MenuQuery:
    """Request for the menus of one school over a date range."""
    school_id: str
    start_date: CalendarDate
    end_date: Optional[CalendarDate] = None

    @property
    def resolved_end_date(self) -> CalendarDate:
        return self.end_date or self.start_date


class MenuModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class School(MenuModel):
    """School the menus belong to."""

    name: str
    address: str
    city: str
    state: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class NutritionFacts(MenuModel):
    """Nutrition facts for a menu item.

    Not populated yet: the upstream nutritionals payload is too irregular to
    map reliably.
    """

    calories: float
    protein: Optional[float] = None
    carbohydrates: Optional[float] = None
    fat: Optional[float] = None
    sodium: Optional[float] = None
    sugar: Optional[float] = None
    fiber: Optional[float] = None


class MenuItem(MenuModel):
    """A single food item served on a cafeteria line."""

    name: str
    alt_name: Optional[str] = None
    description: Optional[str] = None
    food_type: str  # e.g. "Entree", "Fruit"; see FoodType
    serving_size: str
    nutrition: Optional[NutritionFacts] = None
    allergens: Optional[tuple[str, ...]] = None

    @property
    def known_food_type(self) -> Optional[FoodType]:
        """The FoodType matching food_type, or None for unrecognised values."""
        try:
            return FoodType(self.food_type)
        except ValueError:
            return None


class CafeteriaLine(MenuModel):
    name: str
    items: tuple[MenuItem, ...] = ()


class MenuBlock(MenuModel):
    meal_period: MealPeriod
    cafeteria_lines: tuple[CafeteriaLine, ...] = ()


class DailyMenu(MenuModel):
    """Everything served at a school on one day."""

    date: datetime.date
    school: School
    meals: tuple[MenuBlock, ...] = ()


class MenuQueryResult(MenuModel):
    """Result of a menu query: one DailyMenu per day returned by the API."""

    menus: tuple[DailyMenu, ...] = ()
    school: School

    def menu_for(self, day: datetime.date) -> Optional[DailyMenu]:
        """Return the first menu for the given day, if any."""
        return next((m for m in self.menus if m.date == day), None)
