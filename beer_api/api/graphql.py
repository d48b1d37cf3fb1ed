import logging
import uuid
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

import strawberry
from fastapi import Depends
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from beer_api.api.deps import get_beer_service
from beer_api.core.exceptions import NotFoundError
from beer_api.models.beer import Beer, BeerStyle
from beer_api.services.beer_service import BeerService

log = logging.getLogger("uvicorn")

BeerStyleType = strawberry.enum(BeerStyle, name="BeerStyle")


@strawberry.type(name="Beer")
class BeerType:
    id: uuid.UUID
    version: int
    beer_name: str
    beer_style: BeerStyleType
    upc: str
    quantity_on_hand: int
    price: Decimal
    created_date: Optional[datetime]
    update_date: Optional[datetime]

    @classmethod
    def from_model(cls, beer: Beer) -> "BeerType":
        return cls(
            id=beer.id,
            version=beer.version,
            beer_name=beer.beer_name,
            beer_style=beer.beer_style,
            upc=beer.upc,
            quantity_on_hand=beer.quantity_on_hand,
            price=beer.price,
            created_date=beer.created_date,
            update_date=beer.update_date,
        )


@strawberry.type
class Query:
    @strawberry.field(description="Lists every beer in the store.")
    async def get_beers(self, info: Info) -> List[BeerType]:
        log.debug("Getting beers list using GraphQL")
        service: BeerService = info.context["beer_service"]
        return [BeerType.from_model(b) for b in await service.list_beers()]

    @strawberry.field(description="Fetches a single beer; errors if it does not exist.")
    async def get_beer_by_id(self, info: Info, id: uuid.UUID) -> BeerType:
        log.debug(f"Getting beer {id} using GraphQL")
        service: BeerService = info.context["beer_service"]
        beer = await service.get_beer_by_id(id)
        if beer is None:
            raise NotFoundError(id)
        return BeerType.from_model(beer)


schema = strawberry.Schema(query=Query)


async def get_context(beer_service: BeerService = Depends(get_beer_service)):
    return {"beer_service": beer_service}


def create_graphql_router() -> GraphQLRouter:
    return GraphQLRouter(schema, context_getter=get_context)
