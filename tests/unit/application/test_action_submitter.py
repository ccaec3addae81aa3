"""Unit tests for ActionSubmitter."""

import json

import pytest

from vra_resource.application.services.action_submitter import ActionSubmitter
from vra_resource.domain.base.ports import HttpError
from vra_resource.domain.request.exceptions import ActionSubmissionError
from vra_resource.domain.resource.aggregate import Resource


@pytest.mark.unit
class TestActionSubmitter:
    """Test cases for action submission."""

    def setup_method(self):
        self.location = "https://vra.example.com/catalog-service/api/consumer/requests/abc123"

    def test_submit_returns_request_bound_to_location_id(self, mock_client, descriptor, make_response):
        mock_client.http_post.return_value = make_response(status_code=201, headers={"Location": self.location})
        resource = Resource(mock_client, descriptor=descriptor)

        request = ActionSubmitter(mock_client).submit_action_request(resource, "op-poweron")

        assert request.id == "abc123"
        assert request.client is mock_client

    def test_location_header_is_case_insensitive(self, mock_client, descriptor, make_response):
        mock_client.http_post.return_value = make_response(status_code=201, headers={"location": self.location})
        resource = Resource(mock_client, descriptor=descriptor)

        assert ActionSubmitter(mock_client).submit_action_request(resource, "op-poweron").id == "abc123"

    def test_posts_serialized_payload(self, mock_client, descriptor, make_response):
        mock_client.http_post.return_value = make_response(status_code=201, headers={"Location": self.location})
        resource = Resource(mock_client, descriptor=descriptor)

        ActionSubmitter(mock_client).submit_action_request(resource, "op-destroy")

        path, body = mock_client.http_post.call_args.args
        payload = json.loads(body)
        assert path == "/catalog-service/api/consumer/requests"
        assert payload["@type"] == "ResourceActionRequest"
        assert payload["state"] == "SUBMITTED"
        assert payload["requestNumber"] == 0
        assert payload["requestData"] == {"entries": []}
        assert payload["resourceRef"] == {"id": "res-0001"}
        assert payload["resourceActionRef"] == {"id": "op-destroy"}
        assert payload["organization"]["subtenantLabel"] == "Engineering"

    def test_missing_location_raises(self, mock_client, descriptor, make_response):
        mock_client.http_post.return_value = make_response(status_code=201)
        resource = Resource(mock_client, descriptor=descriptor)

        with pytest.raises(ActionSubmissionError):
            ActionSubmitter(mock_client).submit_action_request(resource, "op-destroy")

    def test_http_errors_propagate(self, mock_client, descriptor):
        error = HttpError(400, "POST returned 400")
        mock_client.http_post.side_effect = error
        resource = Resource(mock_client, descriptor=descriptor)

        with pytest.raises(HttpError) as exc_info:
            ActionSubmitter(mock_client).submit_action_request(resource, "op-destroy")

        assert exc_info.value is error
        assert mock_client.http_post.call_count == 1
