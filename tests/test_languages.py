"""
Tests for the language endpoints.
"""

from fastapi.testclient import TestClient


def names(response) -> list:
    return [language["name"] for language in response.json()["data"]]


class TestLanguageQueries:
    """Tests for GET /api/languages."""

    def test_lookup(self, client: TestClient):
        response = client.get("/api/languages", params={"id": 6})
        assert response.json()["data"] == {
            "id": 6,
            "name": "Japanese",
            "nativeName": "日本語",
            "iso6391": "ja",
            "speakers": 125000000,
            "countries": ["Japan"],
            "countryIds": [3],
        }

    def test_lookup_unknown(self, client: TestClient):
        response = client.get("/api/languages", params={"id": 100})
        assert response.status_code == 404
        assert response.json()["error"] == "Language not found"

    def test_all_languages(self, client: TestClient):
        assert client.get("/api/languages").json()["count"] == 24

    def test_spoken_in_country(self, client: TestClient):
        response = client.get("/api/languages", params={"countryId": 7})
        assert names(response) == ["English", "Hindi", "Bengali", "Telugu", "Marathi"]

    def test_search_matches_native_name(self, client: TestClient):
        response = client.get("/api/languages", params={"search": "deutsch"})
        assert names(response) == ["German"]

    def test_search_matches_non_latin_native_name(self, client: TestClient):
        response = client.get("/api/languages", params={"search": "日本"})
        assert names(response) == ["Japanese"]

    def test_speaker_range(self, client: TestClient):
        response = client.get("/api/languages", params={"minSpeakers": 500000000})
        assert names(response) == ["English", "Spanish", "Mandarin Chinese", "Hindi"]

    def test_country_and_max_speakers(self, client: TestClient):
        response = client.get("/api/languages", params={"countryId": 11, "maxSpeakers": 2400000})
        assert names(response) == ["Galician", "Basque"]


class TestLanguageWrites:
    """Tests for simulated language writes."""

    def test_create_defaults_native_name(self, client: TestClient):
        response = client.post("/api/languages", json={"name": "Esperanto", "iso6391": "eo"})
        assert response.status_code == 201
        assert response.json()["data"] == {
            "id": 25,
            "name": "Esperanto",
            "nativeName": "Esperanto",
            "iso6391": "eo",
            "speakers": 0,
            "countries": [],
            "countryIds": [],
        }

    def test_create_missing_fields(self, client: TestClient):
        response = client.post("/api/languages", json={"name": "Esperanto"})
        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: name, iso6391"

    def test_update(self, client: TestClient):
        response = client.put("/api/languages", params={"id": 18}, json={"speakers": 900000})
        body = response.json()
        assert body["message"] == "Language updated successfully"
        assert body["data"]["speakers"] == 900000
        assert body["data"]["nativeName"] == "Cymraeg"

    def test_delete(self, client: TestClient):
        response = client.delete("/api/languages", params={"id": 22})
        assert response.json()["message"] == "Language 'Min' deleted successfully"
