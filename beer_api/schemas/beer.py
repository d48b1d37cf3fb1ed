import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from beer_api.models.beer import BeerStyle


class BeerRequest(BaseModel):
    """
    Body of create and full-update calls. Any id, version or timestamps sent by
    the client are ignored; the store assigns those.
    """
    model_config = ConfigDict(populate_by_name=True)

    beer_name: str = Field(..., alias="beerName", description="Name of the beer.")
    beer_style: BeerStyle = Field(..., alias="beerStyle")
    upc: str = Field(..., description="Universal Product Code, not used for deduplication.")
    quantity_on_hand: int = Field(..., alias="quantityOnHand")
    price: Decimal = Field(..., description="Unit price.")

    @field_validator("beer_name", "upc")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class BeerPatch(BaseModel):
    """Body of a partial update. Only non-null (and non-blank, for text) fields are applied."""
    model_config = ConfigDict(populate_by_name=True)

    beer_name: Optional[str] = Field(None, alias="beerName")
    beer_style: Optional[BeerStyle] = Field(None, alias="beerStyle")
    upc: Optional[str] = None
    quantity_on_hand: Optional[int] = Field(None, alias="quantityOnHand")
    price: Optional[Decimal] = None


class BeerResponse(BaseModel):
    """Schema for a beer returned by the REST endpoints."""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: uuid.UUID
    version: int
    beer_name: str = Field(..., alias="beerName")
    beer_style: BeerStyle = Field(..., alias="beerStyle")
    upc: str
    quantity_on_hand: int = Field(..., alias="quantityOnHand")
    price: Decimal
    created_date: Optional[datetime] = Field(None, alias="createdDate")
    update_date: Optional[datetime] = Field(None, alias="updateDate")
