from uuid import UUID


class NotFoundError(Exception):
    """Raised by the API layer when a requested beer is not in the store."""

    def __init__(self, beer_id: UUID):
        self.beer_id = beer_id
        super().__init__(f"Beer {beer_id} not found")
