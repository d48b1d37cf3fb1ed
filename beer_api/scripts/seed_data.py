# scripts/seed_data.py
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import List
from uuid import UUID

from beer_api.core.store import BeerStore
from beer_api.models.beer import Beer, BeerStyle

log = logging.getLogger(__name__)

SAMPLE_BEERS = [
    {"beer_name": "Galaxy Cat", "beer_style": BeerStyle.PALE_ALE, "upc": "12356", "price": "12.99", "quantity_on_hand": 122},
    {"beer_name": "Crank", "beer_style": BeerStyle.PALE_ALE, "upc": "12356222", "price": "11.99", "quantity_on_hand": 392},
    {"beer_name": "Sunshine City", "beer_style": BeerStyle.IPA, "upc": "12356", "price": "13.99", "quantity_on_hand": 144},
]


def seed(store: BeerStore) -> List[UUID]:
    """Adds the demo beers to the store and returns their ids."""
    ids = []
    for data in SAMPLE_BEERS:
        beer = Beer(
            beer_name=data["beer_name"],
            beer_style=data["beer_style"],
            upc=data["upc"],
            quantity_on_hand=data["quantity_on_hand"],
            price=Decimal(data["price"]),
            version=1,
            created_date=datetime.now(timezone.utc),
            update_date=None,
        )
        beer_id = store.add(beer)
        log.debug(f"Seeded {beer.beer_name}, ID: {beer_id}")
        ids.append(beer_id)

    log.info(f"{len(ids)} sample beers added to the store.")
    return ids


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    demo_store = BeerStore()
    seed(demo_store)
    for b in demo_store.list_all():
        print(b.id, b.beer_name, b.beer_style.value, b.price)
