"""Tests for the customer HTTP endpoints."""

from fastapi.testclient import TestClient

from customer_api.app.core.errors import ConcurrencyError, NotFoundError
from customer_api.app.core.store import InMemoryCustomerStore
from customer_api.app.dependencies import get_customer_service
from customer_api.app.main import create_app
from customer_api.app.services.customer_service import CustomerService

BASE = "/api/v1/customers"


class TestScenario:
    def test_full_lifecycle(self, client, ada):
        resp = client.post(BASE, json=ada)
        assert resp.status_code == 201
        assert resp.json() == {"id": 1, "firstName": "Ada", "lastName": "Lovelace"}
        assert resp.headers["location"].endswith(f"{BASE}/1")

        resp = client.get(f"{BASE}/1")
        assert resp.status_code == 200
        assert resp.json() == {"id": 1, "firstName": "Ada", "lastName": "Lovelace"}

        resp = client.put(f"{BASE}/1", json={"id": 1, "firstName": "Ada", "lastName": "King"})
        assert resp.status_code == 204
        assert resp.content == b""

        resp = client.get(f"{BASE}/1")
        assert resp.json() == {"id": 1, "firstName": "Ada", "lastName": "King"}

        resp = client.delete(f"{BASE}/1")
        assert resp.status_code == 200
        assert resp.json() == {"id": 1, "firstName": "Ada", "lastName": "King"}

        resp = client.get(f"{BASE}/1")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Customer 1 not found"


class TestList:
    def test_empty(self, client):
        resp = client.get(BASE)
        assert resp.status_code == 200
        assert resp.json() == []

    def test_list_in_creation_order(self, client):
        for first, last in [("Bruce", "Wayne"), ("Clark", "Kent"), ("Diana", "Prince")]:
            client.post(BASE, json={"firstName": first, "lastName": last})
        client.delete(f"{BASE}/2")

        data = client.get(BASE).json()

        assert [c["id"] for c in data] == [1, 3]
        assert data[0] == {"id": 1, "firstName": "Bruce", "lastName": "Wayne"}

    def test_name_filter(self, client):
        client.post(BASE, json={"firstName": "Bruce", "lastName": "Wayne"})
        client.post(BASE, json={"firstName": "Clark", "lastName": "Kent"})

        data = client.get(BASE, params={"name": "wAy"}).json()

        assert [c["firstName"] for c in data] == ["Bruce"]


class TestCreate:
    def test_missing_name_is_bad_request(self, client):
        resp = client.post(BASE, json={"firstName": "Ada"})

        assert resp.status_code == 400
        assert resp.json()["detail"] == "Malformed request"
        assert client.get(BASE).json() == []

    def test_invalid_json_is_bad_request(self, client):
        resp = client.post(BASE, content=b"{not json", headers={"Content-Type": "application/json"})

        assert resp.status_code == 400

    def test_supplied_id_rejected_by_default(self, client, ada):
        resp = client.post(BASE, json={"id": 9, **ada})

        assert resp.status_code == 400
        assert client.get(BASE).json() == []

    def test_supplied_id_when_allowed(self, settings, ada):
        settings.allow_client_ids = True
        with TestClient(create_app(settings)) as client:
            resp = client.post(BASE, json={"id": 9, **ada})
            assert resp.status_code == 201
            assert resp.json()["id"] == 9

            resp = client.post(BASE, json={"id": 9, **ada})
            assert resp.status_code == 409

            assert client.post(BASE, json=ada).json()["id"] == 10


class TestGet:
    def test_non_integer_id_is_bad_request(self, client):
        assert client.get(f"{BASE}/abc").status_code == 400

    def test_missing(self, client):
        assert client.get(f"{BASE}/42").status_code == 404


class TestUpdate:
    def test_id_mismatch_is_bad_request_and_changes_nothing(self, client, ada):
        client.post(BASE, json=ada)

        resp = client.put(f"{BASE}/1", json={"id": 2, "firstName": "Ada", "lastName": "King"})

        assert resp.status_code == 400
        assert client.get(f"{BASE}/1").json()["lastName"] == "Lovelace"

    def test_missing_body_field_is_bad_request(self, client, ada):
        client.post(BASE, json=ada)

        resp = client.put(f"{BASE}/1", json={"id": 1, "firstName": "Ada"})

        assert resp.status_code == 400

    def test_missing_customer(self, client):
        resp = client.put(f"{BASE}/7", json={"id": 7, "firstName": "Ada", "lastName": "King"})

        assert resp.status_code == 404

    def test_concurrent_modification_is_conflict(self, app, client, settings, ada):
        class InterleavingStore(InMemoryCustomerStore):
            armed = False

            def get(self, customer_id):
                record = super().get(customer_id)
                if self.armed:
                    self.armed = False
                    self.replace(customer_id, "Augusta", "Byron")
                return record

        store = InterleavingStore()
        app.state.customer_service = CustomerService(store, settings)
        client.post(BASE, json=ada)
        store.armed = True

        resp = client.put(f"{BASE}/1", json={"id": 1, "firstName": "Ada", "lastName": "King"})

        assert resp.status_code == 409
        assert client.get(f"{BASE}/1").json()["lastName"] == "Byron"


class TestDelete:
    def test_missing(self, client):
        assert client.delete(f"{BASE}/1").status_code == 404

    def test_delete_twice(self, client, ada):
        client.post(BASE, json=ada)

        assert client.delete(f"{BASE}/1").status_code == 200
        assert client.delete(f"{BASE}/1").status_code == 404


class TestInternalError:
    def test_store_failure_is_500(self, app, client, settings):
        class BrokenStore(InMemoryCustomerStore):
            def list(self):
                raise RuntimeError("boom")

        app.state.customer_service = CustomerService(BrokenStore(), settings)

        resp = client.get(BASE)

        assert resp.status_code == 500
        assert "boom" not in resp.text


class TestServiceErrorHandler:
    def test_service_error_uses_its_status_and_detail(self, app, client):
        class ConflictingService:
            def delete_customer(self, customer_id):
                raise ConcurrencyError(f"Customer {customer_id} is busy")

        app.dependency_overrides[get_customer_service] = lambda: ConflictingService()

        resp = client.delete(f"{BASE}/3")

        assert resp.status_code == 409
        assert resp.json() == {"detail": "Customer 3 is busy"}

    def test_default_detail(self, app, client):
        class MissingService:
            def get_customer(self, customer_id):
                raise NotFoundError()

        app.dependency_overrides[get_customer_service] = lambda: MissingService()

        resp = client.get(f"{BASE}/3")

        assert resp.status_code == 404
        assert resp.json() == {"detail": "Customer not found"}


class TestApplication:
    def test_health(self, client, ada):
        client.post(BASE, json=ada)

        resp = client.get("/api/v1/health")

        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "customers": 1}

    def test_seeded_store(self, settings):
        settings.seed_customers = True
        with TestClient(create_app(settings)) as client:
            data = client.get(BASE).json()

        assert [(c["firstName"], c["lastName"]) for c in data] == [("Foo", "Bar"), ("John", "Doe")]

    def test_apps_do_not_share_stores(self, settings, ada):
        with TestClient(create_app(settings)) as first, TestClient(create_app(settings)) as second:
            first.post(BASE, json=ada)

            assert second.get(BASE).json() == []

    def test_custom_prefix(self, settings, ada):
        settings.api_prefix = "/api"
        with TestClient(create_app(settings)) as client:
            assert client.post("/api/customers", json=ada).status_code == 201

    def test_gzip_compression(self, settings):
        settings.enable_compression = True
        settings.compression_minimum_size = 100
        settings.seed_customers = True
        with TestClient(create_app(settings)) as client:
            for i in range(20):
                client.post(BASE, json={"firstName": f"First{i}", "lastName": f"Last{i}"})

            resp = client.get(BASE, headers={"Accept-Encoding": "gzip"})

        assert resp.status_code == 200
        assert resp.headers["content-encoding"] == "gzip"
        assert len(resp.json()) == 22
