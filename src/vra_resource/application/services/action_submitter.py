"""Submission of resource action requests."""

from typing import TYPE_CHECKING, Optional

from vra_resource.constants import REQUESTS_API
from vra_resource.domain.base.ports import HttpClientPort, LoggingPort
from vra_resource.domain.request.action_request import ActionRequestPayload
from vra_resource.domain.request.aggregate import Request
from vra_resource.domain.request.exceptions import ActionSubmissionError
from vra_resource.infrastructure.adapters.logging_adapter import LoggingAdapter

if TYPE_CHECKING:
    from vra_resource.domain.resource.aggregate import Resource


class ActionSubmitter:
    """Builds action-request payloads and posts them to the catalog service."""

    def __init__(self, client: HttpClientPort, logger: Optional[LoggingPort] = None) -> None:
        self.client = client
        self._logger = logger or LoggingAdapter(__name__)

    def build_payload(self, resource: "Resource", action_id: str) -> ActionRequestPayload:
        """Build the request payload, copying organization fields from *resource*."""
        return ActionRequestPayload.for_action(
            resource_id=resource.id,
            action_id=action_id,
            tenant_ref=resource.tenant_id,
            tenant_label=resource.tenant_name,
            subtenant_ref=resource.subtenant_id,
            subtenant_label=resource.subtenant_name,
        )

    def submit_action_request(self, resource: "Resource", action_id: str) -> Request:
        """
        Submit *action_id* against *resource*.

        Returns a Request bound to the ID found in the last path segment of the
        response's Location header. HTTP errors from the transport propagate
        unchanged.
        """
        payload = self.build_payload(resource, action_id)
        self._logger.info("Submitting action %s for resource %s", action_id, resource.id)

        response = self.client.http_post(REQUESTS_API, payload.to_json())

        location = response.location
        request_id = location.split("/")[-1] if location else None
        if not request_id:
            raise ActionSubmissionError(
                f"Action request for resource {resource.id} returned no request location",
                details={"resource_id": resource.id, "action_id": action_id, "location": location},
            )

        self._logger.info("Action %s for resource %s created request %s", action_id, resource.id, request_id)
        return Request(self.client, request_id, logger=self._logger)
