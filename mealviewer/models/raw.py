"""Raw MealViewer API payload models.

Field aliases mirror the provider's JSON keys. Only the fields the mapper
reads are declared; anything else in the payload is ignored.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class RawModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RawPhysicalLocation(RawModel):
    name: str
    address: str
    city: str
    state: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class RawFoodItem(RawModel):
    item_name: str = Field(alias="item_Name")
    item_alt_name: Optional[str] = Field(default=None, alias="item_AltName")
    description: Optional[str] = None
    item_type: str = Field(alias="item_Type")
    serving_size: str = Field(alias="serving_Size")
    # Irregular nested structures, carried but not decoded
    nutritionals: Any = None
    allergens: Any = None


class RawFoodItemList(RawModel):
    data: list[RawFoodItem]


class RawCafeteriaLine(RawModel):
    name: str
    food_item_list: RawFoodItemList = Field(alias="foodItemList")


class RawCafeteriaLineList(RawModel):
    data: list[RawCafeteriaLine]


class RawMenuBlock(RawModel):
    block_name: str = Field(alias="blockName")
    cafeteria_line_list: RawCafeteriaLineList = Field(alias="cafeteriaLineList")


class RawDateInformation(RawModel):
    date_full: str = Field(alias="dateFull")


class RawMenuSchedule(RawModel):
    date_information: RawDateInformation = Field(alias="dateInformation")
    menu_blocks: list[RawMenuBlock] = Field(alias="menuBlocks")


class RawMenuResponse(RawModel):
    """Top-level payload of GET /school/{school}/{start}/{end}/."""

    physical_location: RawPhysicalLocation = Field(alias="physicalLocation")
    menu_schedules: list[RawMenuSchedule] = Field(alias="menuSchedules")
