"""
Tests for the requests-based API client.

The HTTP session is mocked; only request construction and envelope
unwrapping are exercised here.
"""

from unittest.mock import MagicMock

import pytest
import requests

from practice_api.client import PracticeApiClient, build_query


def make_response(status_code: int, payload) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.content = b"{}"
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error", response=response)
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def mock_session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(mock_session: MagicMock) -> PracticeApiClient:
    return PracticeApiClient(base_url="http://testserver/", session=mock_session, timeout=5)


class TestBuildQuery:
    """Tests for keyword filter conversion."""

    def test_camel_cases_and_formats_values(self):
        assert build_query({"country_id": 3, "is_capital": True, "min_population": 5000000, "search": None}) == {
            "countryId": "3",
            "isCapital": "true",
            "minPopulation": "5000000",
        }


class TestClientRequests:
    """Tests for request construction and envelope handling."""

    def test_list_cities(self, api: PracticeApiClient, mock_session: MagicMock):
        mock_session.request.return_value = make_response(
            200, {"success": True, "count": 1, "data": [{"id": 301, "name": "Tokyo"}]}
        )

        data, error = api.list_cities(country_id=3, is_capital=True)

        assert error is None
        assert data == [{"id": 301, "name": "Tokyo"}]
        mock_session.request.assert_called_once_with(
            method="GET",
            url="http://testserver/api/cities",
            params={"countryId": "3", "isCapital": "true"},
            json=None,
            timeout=5,
        )

    def test_update_country_sends_id_and_body(self, api: PracticeApiClient, mock_session: MagicMock):
        mock_session.request.return_value = make_response(200, {"success": True, "data": {"id": 1, "population": 1}})

        data, error = api.update_country(1, {"population": 1})

        assert data == {"id": 1, "population": 1}
        kwargs = mock_session.request.call_args.kwargs
        assert kwargs["method"] == "PUT"
        assert kwargs["params"] == {"id": 1}
        assert kwargs["json"] == {"population": 1}

    def test_delete_returns_message(self, api: PracticeApiClient, mock_session: MagicMock):
        mock_session.request.return_value = make_response(
            200, {"success": True, "message": "Language 'Min' deleted successfully"}
        )
        message, error = api.delete_language(22)
        assert message == "Language 'Min' deleted successfully"
        assert error is None

    def test_error_envelope_is_unwrapped(self, api: PracticeApiClient, mock_session: MagicMock):
        mock_session.request.return_value = make_response(404, {"success": False, "error": "City not found"})

        data, error = api.get_city(9999)

        assert data is None
        assert error == {"status_code": 404, "message": "City not found"}

    def test_connection_failure(self, api: PracticeApiClient, mock_session: MagicMock):
        mock_session.request.side_effect = requests.ConnectionError("refused")

        data, error = api.list_countries()

        assert data is None
        assert error["status_code"] is None
        assert "refused" in error["message"]

    def test_unknown_resource(self, api: PracticeApiClient):
        with pytest.raises(ValueError):
            api.list("planets")
