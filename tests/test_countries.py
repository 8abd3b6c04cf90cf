"""
Tests for the country endpoints.
"""

from fastapi.testclient import TestClient


def names(response) -> list:
    return [country["name"] for country in response.json()["data"]]


class TestCountryLookup:
    """Tests for GET /api/countries?id=..."""

    def test_existing_id_embeds_cities(self, client: TestClient):
        response = client.get("/api/countries", params={"id": 3})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Japan"
        assert data["code"] == "JP"
        assert data["languages"] == ["Japanese"]
        assert [city["name"] for city in data["cities"]] == ["Tokyo", "Osaka", "Kyoto", "Yokohama", "Nagoya"]
        assert data["cities"][0] == {"id": 301, "name": "Tokyo", "population": 13960000, "isCapital": True}

    def test_unknown_id_is_not_found(self, client: TestClient):
        response = client.get("/api/countries", params={"id": 42})
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Country not found"}


class TestCountryFilters:
    """Tests for the country filter chain."""

    def test_all_countries(self, client: TestClient):
        body = client.get("/api/countries").json()
        assert body["count"] == 15
        assert len(body["data"]) == 15

    def test_continent_substring(self, client: TestClient):
        response = client.get("/api/countries", params={"continent": "europe"})
        assert names(response) == ["United Kingdom", "France", "Germany", "Spain", "Italy", "Russia"]

    def test_language_matches_any_spoken_language(self, client: TestClient):
        response = client.get("/api/countries", params={"language": "English"})
        assert names(response) == ["United States", "United Kingdom", "India", "Australia", "Canada"]

    def test_search_by_name(self, client: TestClient):
        response = client.get("/api/countries", params={"search": "united"})
        assert names(response) == ["United States", "United Kingdom"]

    def test_continent_and_language_combine(self, client: TestClient):
        response = client.get("/api/countries", params={"continent": "north america", "language": "span"})
        assert names(response) == ["United States", "Mexico"]

    def test_population_range(self, client: TestClient):
        response = client.get("/api/countries", params={"minPopulation": 1000000000})
        assert names(response) == ["India", "China"]

    def test_non_numeric_bound_is_rejected(self, client: TestClient):
        response = client.get("/api/countries", params={"maxPopulation": "1e9"})
        assert response.status_code == 400


class TestCountryWrites:
    """Tests for simulated country writes."""

    def test_create_requires_name_code_capital(self, client: TestClient):
        response = client.post("/api/countries", json={})
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Missing required fields: name, code, capital"}

    def test_create_with_defaults(self, client: TestClient):
        response = client.post("/api/countries", json={"name": "Norway", "code": "NO", "capital": "Oslo"})
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Country created successfully"
        assert body["data"] == {
            "id": 16,
            "name": "Norway",
            "code": "NO",
            "capital": "Oslo",
            "continent": "Unknown",
            "population": 0,
            "languages": [],
            "cities": [],
        }

    def test_create_empty_continent_is_unknown(self, client: TestClient):
        response = client.post(
            "/api/countries", json={"name": "Norway", "code": "NO", "capital": "Oslo", "continent": ""}
        )
        assert response.json()["data"]["continent"] == "Unknown"

    def test_create_with_nested_cities(self, client: TestClient):
        response = client.post(
            "/api/countries",
            json={
                "name": "Norway",
                "code": "NO",
                "capital": "Oslo",
                "languages": ["Norwegian"],
                "cities": [{"id": 1601, "name": "Oslo", "population": 709000, "isCapital": True}],
            },
        )
        assert response.status_code == 201
        assert response.json()["data"]["cities"][0]["isCapital"] is True

    def test_update_preserves_id(self, client: TestClient):
        response = client.put("/api/countries", params={"id": 1}, json={"id": 999, "population": 1})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == 1
        assert data["population"] == 1
        assert data["name"] == "United States"
        assert len(data["cities"]) == 5

    def test_update_replaces_languages(self, client: TestClient):
        response = client.put("/api/countries", params={"id": 4}, json={"languages": ["French", "Occitan"]})
        assert response.json()["data"]["languages"] == ["French", "Occitan"]

    def test_update_rejects_unknown_fields(self, client: TestClient):
        response = client.put("/api/countries", params={"id": 1}, json={"anthem": "x"})
        assert response.status_code == 400

    def test_update_requires_id(self, client: TestClient):
        response = client.put("/api/countries", json={"population": 1})
        assert response.status_code == 400
        assert response.json()["error"] == "Country ID is required"

    def test_delete(self, client: TestClient):
        response = client.delete("/api/countries", params={"id": 8})
        assert response.json() == {"success": True, "message": "Country 'China' deleted successfully"}
        assert client.get("/api/countries").json()["count"] == 15

    def test_delete_unknown(self, client: TestClient):
        assert client.delete("/api/countries", params={"id": 99}).status_code == 404
