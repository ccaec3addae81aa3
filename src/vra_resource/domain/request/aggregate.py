"""Request aggregate - an asynchronous unit of work created by the platform."""

from typing import TYPE_CHECKING, Any, Optional

from vra_resource.constants import REQUEST_API, REQUEST_RESOURCES_API
from vra_resource.domain.base.ports import HttpClientPort, HttpNotFoundError, LoggingPort
from vra_resource.domain.request.exceptions import RequestNotFoundError

if TYPE_CHECKING:
    from vra_resource.domain.resource.aggregate import Resource


class Request:
    """
    Handle on a catalog request identified by its platform request ID.

    The request document is fetched lazily on first read and cached until
    :meth:`refresh` is called again.
    """

    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"

    def __init__(
        self,
        client: HttpClientPort,
        request_id: str,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        self.client = client
        self.id = request_id
        self._logger = logger
        self._request_data: Optional[dict[str, Any]] = None

    def refresh(self) -> dict[str, Any]:
        """Fetch the current request document from the platform."""
        try:
            self._request_data = self.client.get_parsed(REQUEST_API.format(request_id=self.id))
        except HttpNotFoundError as e:
            raise RequestNotFoundError(self.id) from e

        if self._logger:
            self._logger.debug("Request %s is in phase %s", self.id, self._request_data.get("phase"))
        return self._request_data

    def refresh_if_empty(self) -> None:
        if self._request_data is None:
            self.refresh()

    @property
    def request_data(self) -> dict[str, Any]:
        self.refresh_if_empty()
        return self._request_data

    @property
    def status(self) -> Optional[str]:
        return self.request_data.get("phase")

    @property
    def completion_state(self) -> Optional[str]:
        completion = self.request_data.get("requestCompletion")
        if not completion:
            return None
        return completion.get("requestCompletionState")

    @property
    def completion_details(self) -> Optional[str]:
        completion = self.request_data.get("requestCompletion")
        if not completion:
            return None
        return completion.get("completionDetails")

    @property
    def successful(self) -> bool:
        return self.status == self.SUCCESSFUL

    @property
    def failed(self) -> bool:
        return self.status == self.FAILED

    @property
    def completed(self) -> bool:
        return self.successful or self.failed

    def resources(self) -> list["Resource"]:
        """Return the resources this request created."""
        from vra_resource.domain.resource.aggregate import Resource

        descriptors = self.client.http_get_paginated(REQUEST_RESOURCES_API.format(request_id=self.id))
        return [Resource(self.client, descriptor=descriptor, logger=self._logger) for descriptor in descriptors]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Request):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Request(id={self.id!r})"
