# =============================================================================
# tests/test_api.py - HTTP Endpoint Tests
# =============================================================================

import pytest

REQUIRED = {"error": "Pizza size and cost are required"}


class TestPizzaEndpoint:

    def test_basic(self, client):
        resp = client.post("/api/pizza", json={"pizzaSize": 12, "pizzaCost": 15.99})
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "success!"
        assert list(body["data"]) == ["pricePerSquareInch"]
        assert body["data"]["pricePerSquareInch"] == pytest.approx(0.1414, abs=1e-4)

    def test_with_crust(self, client):
        resp = client.post("/api/pizza", json={"pizzaSize": 12, "pizzaCost": 15.99, "crustSize": 2})
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert set(data) == {
            "pricePerSquareInch",
            "pricePerSquareInchWithoutCrust",
            "percentOfPizzaIsCrust",
            "payForCrust",
        }
        assert data["percentOfPizzaIsCrust"] == pytest.approx(11 / 36)
        assert data["payForCrust"] == pytest.approx(4.886, abs=1e-3)

    @pytest.mark.parametrize("crust", [0, None, ""])
    def test_falsy_crust_means_no_crust(self, client, crust):
        resp = client.post("/api/pizza", json={"pizzaSize": 12, "pizzaCost": 15.99, "crustSize": crust})
        assert resp.status_code == 200
        assert list(resp.json()["data"]) == ["pricePerSquareInch"]

    @pytest.mark.parametrize(
        "payload",
        [
            {"pizzaSize": 12, "pizzaCost": 0},
            {"pizzaSize": 12},
            {"pizzaSize": 0, "pizzaCost": 10},
            {"pizzaSize": None, "pizzaCost": 10, "crustSize": 2},
            {"pizzaSize": "", "pizzaCost": 10},
            {"pizzaSize": 12, "pizzaCost": False},
            {},
        ],
    )
    def test_missing_fields(self, client, payload):
        resp = client.post("/api/pizza", json=payload)
        assert resp.status_code == 400
        assert resp.json() == REQUIRED

    def test_crust_too_thick(self, client):
        resp = client.post("/api/pizza", json={"pizzaSize": 12, "pizzaCost": 10, "crustSize": 6})
        assert resp.status_code == 400
        assert "half the diameter" in resp.json()["error"]

    def test_negative_size(self, client):
        resp = client.post("/api/pizza", json={"pizzaSize": -12, "pizzaCost": 10})
        assert resp.status_code == 400
        assert "diameter" in resp.json()["error"]

    def test_crust_not_a_number(self, client):
        resp = client.post("/api/pizza", json={"pizzaSize": 12, "pizzaCost": 10, "crustSize": "thick"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "crust_thickness must be a number"}

    def test_huge_diameter_is_rejected_not_500(self, client):
        resp = client.post("/api/pizza", json={"pizzaSize": 1e200, "pizzaCost": 10, "crustSize": 1})
        assert resp.status_code == 400
        assert "diameter" in resp.json()["error"]

    def test_not_a_number(self, client):
        resp = client.post("/api/pizza", json={"pizzaSize": "large", "pizzaCost": 10})
        assert resp.status_code == 400
        assert resp.json() == {"error": "diameter must be a number"}

    def test_numeric_strings_accepted(self, client):
        resp = client.post("/api/pizza", json={"pizzaSize": "12", "pizzaCost": "15.99"})
        assert resp.status_code == 200

    def test_malformed_json(self, client):
        resp = client.post(
            "/api/pizza",
            content="{pizzaSize: 12",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 500
        assert resp.json() == {"error": "Internal Server Error"}

    def test_non_object_body(self, client):
        resp = client.post("/api/pizza", json=[12, 15.99])
        assert resp.status_code == 500
        assert resp.json() == {"error": "Internal Server Error"}


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
