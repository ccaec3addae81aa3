"""HTTP transport for the catalog-service REST API."""

from typing import Any, Optional

import requests

from vra_resource.config.schemas.client_schema import ClientConfig
from vra_resource.domain.base.ports import (
    HttpClientPort,
    HttpError,
    HttpNotFoundError,
    HttpResponse,
    HttpTransportError,
    LoggingPort,
)
from vra_resource.infrastructure.adapters.logging_adapter import LoggingAdapter


class VraHttpClient(HttpClientPort):
    """HTTP client for the platform REST API backed by a requests.Session."""

    def __init__(
        self,
        config: ClientConfig,
        logger: Optional[LoggingPort] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self.page_size = config.page_size
        self._logger = logger or LoggingAdapter(__name__)
        self.session = session or requests.Session()
        self.session.headers.update(self._default_headers())
        self.session.verify = config.verify_ssl

    def _default_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self.config.bearer_token:
            headers["Authorization"] = f"Bearer {self.config.bearer_token}"
        return headers

    def full_url(self, path: str) -> str:
        """Construct the full URL for an API path."""
        return f"{self.base_url}{path}"

    def get_parsed(self, path: str) -> dict[str, Any]:
        return self.http_get(path).json()

    def http_get(self, path: str) -> HttpResponse:
        return self._request("GET", path)

    def http_post(self, path: str, payload: str) -> HttpResponse:
        return self._request("POST", path, data=payload)

    def http_get_paginated(self, path: str, page_size: Optional[int] = None) -> list[dict[str, Any]]:
        """
        Walk a paged collection and return the content of every page.

        Pages are 1-based; the number of pages comes from metadata.totalPages
        of each response.
        """
        page_size = page_size or self.page_size
        separator = "&" if "?" in path else "?"
        items: list[dict[str, Any]] = []
        page = 1

        while True:
            response = self.get_parsed(f"{path}{separator}limit={page_size}&page={page}")
            items.extend(response.get("content") or [])

            total_pages = (response.get("metadata") or {}).get("totalPages") or 1
            if page >= total_pages:
                break
            page += 1

        self._logger.debug("Fetched %d item(s) from %s over %d page(s)", len(items), path, page)
        return items

    def _request(self, method: str, path: str, data: Optional[str] = None) -> HttpResponse:
        url = self.full_url(path)
        self._logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, data=data, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise HttpTransportError(f"{method} {url} failed: {e}") from e

        return self._handle_response(method, url, response)

    def _handle_response(self, method: str, url: str, response: requests.Response) -> HttpResponse:
        """Convert the response and raise typed errors for HTTP error statuses."""
        if response.status_code == 404:
            raise HttpNotFoundError(f"{method} {url} returned 404", body=response.text)
        if response.status_code >= 400:
            raise HttpError(
                response.status_code,
                f"{method} {url} returned {response.status_code}: {self._error_message(response)}",
                body=response.text,
            )
        return HttpResponse(
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            error_data = response.json()
        except ValueError:
            return response.text
        if isinstance(error_data, dict):
            errors = error_data.get("errors")
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                return errors[0].get("systemMessage") or errors[0].get("message") or str(error_data)
            return error_data.get("message") or str(error_data)
        return str(error_data)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "VraHttpClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
