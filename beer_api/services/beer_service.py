import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from beer_api.core.store import BeerStore
from beer_api.models.beer import Beer
from beer_api.schemas.beer import BeerPatch, BeerRequest

log = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class BeerService:
    """
    CRUD operations over a BeerStore. Absence is reported as None / False,
    never raised; the API layer decides how to surface it.
    """

    def __init__(self, store: BeerStore):
        self.store = store

    async def list_beers(self) -> List[Beer]:
        log.debug("Getting the list of beers")
        return self.store.list_all()

    async def get_beer_by_id(self, beer_id: UUID) -> Optional[Beer]:
        log.debug(f"Get beer by id: {beer_id}")
        return self.store.get(beer_id)

    async def save_new_beer(self, beer_in: BeerRequest) -> UUID:
        """Stores a new beer built from the business fields of ``beer_in``."""
        now = _now()
        beer_id = self.store.add(
            Beer(
                beer_name=beer_in.beer_name,
                beer_style=beer_in.beer_style,
                upc=beer_in.upc,
                quantity_on_hand=beer_in.quantity_on_hand,
                price=beer_in.price,
                version=1,
                created_date=now,
                update_date=now,
            )
        )
        log.info(f"Beer {beer_id} created.")
        return beer_id

    async def update_beer_by_id(self, beer_id: UUID, beer_in: BeerRequest) -> bool:
        """
        Replaces every business field of an existing beer. The version is reset
        to 1 rather than incremented. Returns False, creating nothing, if the
        id is unknown.
        """
        def _replace(existing: Beer) -> Beer:
            return replace(
                existing,
                version=1,
                beer_name=beer_in.beer_name,
                beer_style=beer_in.beer_style,
                upc=beer_in.upc,
                quantity_on_hand=beer_in.quantity_on_hand,
                price=beer_in.price,
                update_date=_now(),
            )

        updated = self.store.modify(beer_id, _replace)
        if updated is None:
            log.debug(f"Update skipped, beer {beer_id} not found")
            return False
        log.info(f"Beer {beer_id} updated.")
        return True

    async def delete_beer_by_id(self, beer_id: UUID) -> bool:
        removed = self.store.remove(beer_id)
        if removed:
            log.info(f"Beer {beer_id} deleted.")
        return removed

    async def patch_beer_by_id(self, beer_id: UUID, patch: BeerPatch) -> bool:
        """
        Overwrites only the supplied fields. Text fields must also be non-blank
        to count as supplied. Timestamps and version are left alone.
        """
        def _apply(existing: Beer) -> Beer:
            if patch.beer_name is not None and patch.beer_name.strip():
                existing.beer_name = patch.beer_name
            if patch.beer_style is not None:
                existing.beer_style = patch.beer_style
            if patch.price is not None:
                existing.price = patch.price
            if patch.quantity_on_hand is not None:
                existing.quantity_on_hand = patch.quantity_on_hand
            if patch.upc is not None and patch.upc.strip():
                existing.upc = patch.upc
            return existing

        return self.store.modify(beer_id, _apply) is not None
