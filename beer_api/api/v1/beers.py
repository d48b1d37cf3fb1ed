import logging
from fastapi import APIRouter, Depends, Query, Response, status
from typing import List
from uuid import UUID

from beer_api.api.deps import get_beer_service
from beer_api.core.config import API_PREFIX
from beer_api.core.exceptions import NotFoundError
from beer_api.schemas.beer import BeerPatch, BeerRequest, BeerResponse
from beer_api.services.beer_service import BeerService

router = APIRouter()
log = logging.getLogger("uvicorn")


# Fixed paths are declared before "/{beer_id}" so they are not captured by it.

@router.get("/beer-list", response_model=List[BeerResponse])
async def list_beers(service: BeerService = Depends(get_beer_service)):
    """Lists every beer in the store."""
    return await service.list_beers()


@router.get("/beer-by-id", response_model=BeerResponse)
async def get_beer_by_query(
    beer_id: UUID = Query(..., alias="beerId"),
    service: BeerService = Depends(get_beer_service),
):
    """Fetches a beer by the beerId query parameter."""
    beer = await service.get_beer_by_id(beer_id)
    if beer is None:
        raise NotFoundError(beer_id)
    return beer


@router.post("/beer-create", status_code=status.HTTP_201_CREATED)
async def create_beer(beer_in: BeerRequest, service: BeerService = Depends(get_beer_service)):
    """Creates a beer. Responds with a Location header and no body."""
    beer_id = await service.save_new_beer(beer_in)
    log.info(f"Beer {beer_id} created via REST.")
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{API_PREFIX}/{beer_id}"},
    )


@router.put("/beer-update", status_code=status.HTTP_204_NO_CONTENT)
async def update_beer(
    beer_in: BeerRequest,
    beer_id: UUID = Query(..., alias="beerId"),
    service: BeerService = Depends(get_beer_service),
):
    """Replaces all business fields of an existing beer."""
    if not await service.update_beer_by_id(beer_id, beer_in):
        raise NotFoundError(beer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/beer-delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_beer(
    beer_id: UUID = Query(..., alias="beerId"),
    service: BeerService = Depends(get_beer_service),
):
    if not await service.delete_beer_by_id(beer_id):
        raise NotFoundError(beer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/beer-patch", status_code=status.HTTP_204_NO_CONTENT)
async def patch_beer(
    patch: BeerPatch,
    beer_id: UUID = Query(..., alias="beerId"),
    service: BeerService = Depends(get_beer_service),
):
    """Applies the supplied fields only."""
    if not await service.patch_beer_by_id(beer_id, patch):
        raise NotFoundError(beer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{beer_id}", response_model=BeerResponse)
async def get_beer(beer_id: UUID, service: BeerService = Depends(get_beer_service)):
    """Fetches a beer by path segment."""
    beer = await service.get_beer_by_id(beer_id)
    if beer is None:
        raise NotFoundError(beer_id)
    return beer
