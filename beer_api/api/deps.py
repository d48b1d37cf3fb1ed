from fastapi import Request

from beer_api.services.beer_service import BeerService


def get_beer_service(request: Request) -> BeerService:
    """Returns the BeerService built for this app in create_app."""
    return request.app.state.beer_service
