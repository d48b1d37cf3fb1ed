from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
import uuid


class BeerStyle(str, Enum):
    LAGER = "LAGER"
    PILSNER = "PILSNER"
    STOUT = "STOUT"
    GOSE = "GOSE"
    PORTER = "PORTER"
    ALE = "ALE"
    WHEAT = "WHEAT"
    IPA = "IPA"
    PALE_ALE = "PALE_ALE"
    SAISON = "SAISON"


@dataclass
class Beer:
    """A single beer record as held by the store."""
    beer_name: str
    beer_style: BeerStyle
    upc: str
    quantity_on_hand: int
    price: Decimal
    id: Optional[uuid.UUID] = None  # assigned by BeerStore.add
    version: int = 1
    created_date: Optional[datetime] = None
    update_date: Optional[datetime] = None
