"""
Inventory models — the Steam Community inventory JSON API.

Only the fields the agent relies on are typed; anything else the service
returns is kept as-is so merged results pass through untouched.
"""

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class Asset(BaseModel):
    model_config = ConfigDict(extra="allow")

    appid: Optional[int] = None
    contextid: Optional[str] = None
    assetid: Optional[str] = None
    classid: Optional[str] = None
    instanceid: Optional[str] = None
    amount: Optional[str] = None


class Description(BaseModel):
    model_config = ConfigDict(extra="allow")

    appid: Optional[int] = None
    classid: Optional[str] = None
    instanceid: Optional[str] = None
    name: Optional[str] = None
    market_hash_name: Optional[str] = None
    type: Optional[str] = None
    tradable: Optional[int] = None
    marketable: Optional[int] = None


class InventoryPage(BaseModel):
    """One page of `/inventory/{steam_id}/{app_id}/{context_id}`.

    Also used for the merged result: assets/descriptions hold every fetched
    page in fetch order, pagination fields describe the last page fetched.
    """

    model_config = ConfigDict(extra="allow")

    assets: list[Asset] = Field(default_factory=list)
    descriptions: list[Description] = Field(default_factory=list)
    # The service sends 1/0; kept as sent so payloads round-trip unchanged.
    more_items: Union[bool, int] = False
    last_assetid: Optional[str] = None
    total_inventory_count: Optional[int] = None
