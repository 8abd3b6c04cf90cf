"""Practice Data API client.

A small wrapper around the REST API served by :mod:`practice_api.app`,
meant for exercises and scripts that want Python objects instead of raw
HTTP.  It uses the ``requests`` library internally.

The client exposes the same operations for every resource
(``cities``, ``countries``, ``languages``):

* ``list_<resource>(**filters)`` – filtered listing; returns the ``data`` list.
* ``get_<resource>(id)`` – a single record.
* ``create_<resource>(payload)`` – simulated create.
* ``update_<resource>(id, changes)`` – simulated partial update.
* ``delete_<resource>(id)`` – simulated delete; returns the message.

Every high-level method returns a tuple ``(result, error)``.  On
success ``error`` is ``None``; on failure ``result`` is ``None`` and
``error`` is a dict with ``status_code`` and ``message``, the message
being taken from the envelope's ``error`` field.

Filters are passed as Python keyword arguments and converted to the
query-string names the API expects::

    client = PracticeApiClient(base_url="http://localhost:8000")
    cities, error = client.list_cities(country_id=3, is_capital=False)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def build_query(filters: Dict[str, Any]) -> Dict[str, str]:
    """Convert keyword filters into query parameters.

    ``None`` values are dropped, booleans become ``true``/``false`` and
    snake_case names become camelCase (``min_population`` →
    ``minPopulation``).
    """
    params: Dict[str, str] = {}
    for key, value in filters.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        params[_camel(key)] = str(value)
    return params


class PracticeApiClient:
    """Client for the practice datasets API."""

    RESOURCES = ("cities", "countries", "languages")

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            api_prefix: Mount point of the resource routers.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_prefix = "/" + api_prefix.strip("/") if api_prefix.strip("/") else ""
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, resource: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request and unwrap the response envelope.

        Returns ``(envelope, None)`` on success and
        ``(None, {"status_code": ..., "message": ...})`` on failure.
        """
        if resource not in self.RESOURCES:
            raise ValueError(f"Unknown resource '{resource}'")
        url = f"{self.base_url}{self.api_prefix}/{resource}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json(), None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _field(self, result: Result, key: str) -> Result:
        envelope, error = result
        if error is not None:
            return None, error
        return envelope.get(key), None

    # ------------------------------------------------------------------
    # Generic operations
    # ------------------------------------------------------------------
    def list(self, resource: str, **filters: Any) -> Result:
        return self._field(self._request("GET", resource, params=build_query(filters)), "data")

    def get(self, resource: str, record_id: int) -> Result:
        return self._field(self._request("GET", resource, params={"id": record_id}), "data")

    def create(self, resource: str, payload: Dict[str, Any]) -> Result:
        return self._field(self._request("POST", resource, json_body=payload), "data")

    def update(self, resource: str, record_id: int, changes: Dict[str, Any]) -> Result:
        return self._field(
            self._request("PUT", resource, params={"id": record_id}, json_body=changes), "data"
        )

    def delete(self, resource: str, record_id: int) -> Result:
        return self._field(self._request("DELETE", resource, params={"id": record_id}), "message")

    # ------------------------------------------------------------------
    # Per-resource shortcuts
    # ------------------------------------------------------------------
    def list_cities(self, **filters: Any) -> Result:
        return self.list("cities", **filters)

    def get_city(self, city_id: int) -> Result:
        return self.get("cities", city_id)

    def create_city(self, payload: Dict[str, Any]) -> Result:
        return self.create("cities", payload)

    def update_city(self, city_id: int, changes: Dict[str, Any]) -> Result:
        return self.update("cities", city_id, changes)

    def delete_city(self, city_id: int) -> Result:
        return self.delete("cities", city_id)

    def list_countries(self, **filters: Any) -> Result:
        return self.list("countries", **filters)

    def get_country(self, country_id: int) -> Result:
        return self.get("countries", country_id)

    def create_country(self, payload: Dict[str, Any]) -> Result:
        return self.create("countries", payload)

    def update_country(self, country_id: int, changes: Dict[str, Any]) -> Result:
        return self.update("countries", country_id, changes)

    def delete_country(self, country_id: int) -> Result:
        return self.delete("countries", country_id)

    def list_languages(self, **filters: Any) -> Result:
        return self.list("languages", **filters)

    def get_language(self, language_id: int) -> Result:
        return self.get("languages", language_id)

    def create_language(self, payload: Dict[str, Any]) -> Result:
        return self.create("languages", payload)

    def update_language(self, language_id: int, changes: Dict[str, Any]) -> Result:
        return self.update("languages", language_id, changes)

    def delete_language(self, language_id: int) -> Result:
        return self.delete("languages", language_id)
