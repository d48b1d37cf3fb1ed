import pytest
from datetime import datetime, timezone
from decimal import Decimal
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

from beer_api.api.deps import get_beer_service
from beer_api.main import app, create_app
from beer_api.models.beer import Beer, BeerStyle
from beer_api.schemas.beer import BeerPatch, BeerRequest
from beer_api.services.beer_service import BeerService

BEER_PATH = "/api/v1/beer"

BEER_BODY = {
    "beerName": "Galaxy Cat",
    "beerStyle": "PALE_ALE",
    "upc": "12356",
    "quantityOnHand": 122,
    "price": "12.99",
}


def sample_beer(beer_id=None):
    return Beer(
        id=beer_id or uuid4(),
        version=1,
        beer_name="Galaxy Cat",
        beer_style=BeerStyle.PALE_ALE,
        upc="12356",
        quantity_on_hand=122,
        price=Decimal("12.99"),
        created_date=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        update_date=None,
    )


@pytest.fixture
def mock_service():
    service = AsyncMock(spec=BeerService)
    app.dependency_overrides[get_beer_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


@pytest.fixture
def client(mock_service):
    return TestClient(app)


class TestBeerRoutes:
    def test_list_beers(self, client, mock_service):
        """Test list returns a JSON array of all beers"""
        mock_service.list_beers.return_value = [sample_beer(), sample_beer(), sample_beer()]

        response = client.get(f"{BEER_PATH}/beer-list")
        assert response.status_code == 200
        assert len(response.json()) == 3

    def test_get_beer_by_path(self, client, mock_service):
        """Test retrieval by path segment uses camelCase fields"""
        beer = sample_beer()
        mock_service.get_beer_by_id.return_value = beer

        response = client.get(f"{BEER_PATH}/{beer.id}")
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == str(beer.id)
        assert body["beerName"] == "Galaxy Cat"
        assert body["beerStyle"] == "PALE_ALE"
        assert body["quantityOnHand"] == 122
        assert Decimal(str(body["price"])) == Decimal("12.99")
        assert body["updateDate"] is None
        mock_service.get_beer_by_id.assert_awaited_once_with(beer.id)

    def test_get_beer_by_query(self, client, mock_service):
        beer = sample_beer()
        mock_service.get_beer_by_id.return_value = beer

        response = client.get(f"{BEER_PATH}/beer-by-id", params={"beerId": str(beer.id)})
        assert response.status_code == 200
        assert response.json()["id"] == str(beer.id)

    def test_get_beer_not_found(self, client, mock_service):
        """Test missing beer maps to 404 with no body on both routes"""
        mock_service.get_beer_by_id.return_value = None

        response = client.get(f"{BEER_PATH}/beer-by-id", params={"beerId": str(uuid4())})
        assert response.status_code == 404
        assert response.content == b""

        response = client.get(f"{BEER_PATH}/{uuid4()}")
        assert response.status_code == 404
        assert response.content == b""

    def test_get_beer_invalid_id(self, client, mock_service):
        response = client.get(f"{BEER_PATH}/not-a-uuid")
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "validation_error"
        mock_service.get_beer_by_id.assert_not_called()

    def test_create_beer(self, client, mock_service):
        """Test create returns 201 with a Location header and no body"""
        new_id = uuid4()
        mock_service.save_new_beer.return_value = new_id

        # id and version sent by the client are ignored
        response = client.post(f"{BEER_PATH}/beer-create", json={**BEER_BODY, "id": str(uuid4()), "version": 7})
        assert response.status_code == 201
        assert response.headers["Location"] == f"{BEER_PATH}/{new_id}"
        assert response.content == b""

        beer_in = mock_service.save_new_beer.call_args.args[0]
        assert isinstance(beer_in, BeerRequest)
        assert beer_in.beer_name == "Galaxy Cat"
        assert beer_in.price == Decimal("12.99")

    def test_create_beer_blank_name(self, client, mock_service):
        response = client.post(f"{BEER_PATH}/beer-create", json={**BEER_BODY, "beerName": "  "})
        assert response.status_code == 422
        mock_service.save_new_beer.assert_not_called()

    def test_update_beer(self, client, mock_service):
        beer_id = uuid4()
        mock_service.update_beer_by_id.return_value = True

        response = client.put(f"{BEER_PATH}/beer-update", params={"beerId": str(beer_id)}, json=BEER_BODY)
        assert response.status_code == 204
        args = mock_service.update_beer_by_id.call_args.args
        assert args[0] == beer_id
        assert args[1].upc == "12356"

    def test_update_beer_not_found(self, client, mock_service):
        mock_service.update_beer_by_id.return_value = False

        response = client.put(f"{BEER_PATH}/beer-update", params={"beerId": str(uuid4())}, json=BEER_BODY)
        assert response.status_code == 404

    def test_delete_beer(self, client, mock_service):
        beer_id = uuid4()
        mock_service.delete_beer_by_id.return_value = True

        response = client.delete(f"{BEER_PATH}/beer-delete", params={"beerId": str(beer_id)})
        assert response.status_code == 204
        mock_service.delete_beer_by_id.assert_awaited_once_with(beer_id)

    def test_delete_beer_not_found(self, client, mock_service):
        mock_service.delete_beer_by_id.return_value = False

        response = client.delete(f"{BEER_PATH}/beer-delete", params={"beerId": str(uuid4())})
        assert response.status_code == 404

    def test_patch_beer(self, client, mock_service):
        """Test patch forwards only the supplied field"""
        beer_id = uuid4()
        mock_service.patch_beer_by_id.return_value = True

        response = client.patch(f"{BEER_PATH}/beer-patch", params={"beerId": str(beer_id)}, json={"beerName": "New Name"})
        assert response.status_code == 204

        args = mock_service.patch_beer_by_id.call_args.args
        assert args[0] == beer_id
        assert isinstance(args[1], BeerPatch)
        assert args[1].beer_name == "New Name"
        assert args[1].upc is None
        assert args[1].price is None

    def test_patch_beer_not_found(self, client, mock_service):
        mock_service.patch_beer_by_id.return_value = False

        response = client.patch(f"{BEER_PATH}/beer-patch", params={"beerId": str(uuid4())}, json={"beerName": "Ghost"})
        assert response.status_code == 404


class TestBeerFlow:
    """Runs the real service and store behind a fresh app."""

    @pytest.fixture
    def live_client(self):
        return TestClient(create_app(seed_data=False))

    def test_full_lifecycle(self, live_client):
        response = live_client.post(f"{BEER_PATH}/beer-create", json=BEER_BODY)
        assert response.status_code == 201
        location = response.headers["Location"]
        beer_id = UUID(location.rsplit("/", 1)[-1])

        beer = live_client.get(location).json()
        assert beer["id"] == str(beer_id)
        assert beer["version"] == 1
        assert beer["upc"] == "12356"
        assert beer["quantityOnHand"] == 122

        response = live_client.put(
            f"{BEER_PATH}/beer-update", params={"beerId": str(beer_id)}, json={**BEER_BODY, "beerName": "Renamed"}
        )
        assert response.status_code == 204
        beer = live_client.get(location).json()
        assert beer["beerName"] == "Renamed"
        assert beer["version"] == 1

        response = live_client.patch(f"{BEER_PATH}/beer-patch", params={"beerId": str(beer_id)}, json={"quantityOnHand": 3})
        assert response.status_code == 204
        beer = live_client.get(location).json()
        assert beer["quantityOnHand"] == 3
        assert beer["beerName"] == "Renamed"

        assert len(live_client.get(f"{BEER_PATH}/beer-list").json()) == 1

        response = live_client.delete(f"{BEER_PATH}/beer-delete", params={"beerId": str(beer_id)})
        assert response.status_code == 204
        assert live_client.get(location).status_code == 404
        assert live_client.get(f"{BEER_PATH}/beer-list").json() == []

    def test_seeded_app_lists_three_beers(self):
        client = TestClient(create_app(seed_data=True))

        names = [b["beerName"] for b in client.get(f"{BEER_PATH}/beer-list").json()]
        assert names == ["Galaxy Cat", "Crank", "Sunshine City"]

    def test_unknown_id_mutations_return_404(self, live_client):
        """Update, patch and delete of a missing beer are clean 404s and create nothing"""
        missing = str(uuid4())

        response = live_client.patch(f"{BEER_PATH}/beer-patch", params={"beerId": missing}, json={"beerName": "Ghost"})
        assert response.status_code == 404
        assert response.content == b""

        response = live_client.put(f"{BEER_PATH}/beer-update", params={"beerId": missing}, json=BEER_BODY)
        assert response.status_code == 404

        response = live_client.delete(f"{BEER_PATH}/beer-delete", params={"beerId": missing})
        assert response.status_code == 404

        assert live_client.get(f"{BEER_PATH}/beer-list").json() == []

    def test_unknown_path_uses_error_envelope(self, live_client):
        response = live_client.get(f"{BEER_PATH}/nope/extra")
        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "http_error"
        assert body["error"]["message"] == "Not Found"
        assert body["request_id"]

    def test_wrong_method_uses_error_envelope(self, live_client):
        response = live_client.post(f"{BEER_PATH}/beer-list")
        assert response.status_code == 405
        assert "GET" in response.headers["allow"]
        body = response.json()
        assert body["success"] is False
        assert body["error"]["message"] == "Method Not Allowed"
