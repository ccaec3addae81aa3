"""
vra-resource - resource-action workflow for the vRealize Automation catalog service.

Look up a resource, invoke lifecycle actions against it and follow the
asynchronous requests the platform creates for them.

Usage:
    from vra_resource import Resource, VraHttpClient, load_config

    with VraHttpClient(load_config()) as client:
        resource = Resource.by_name(client, "webserver")
        request = resource.poweron()
        print(request.status)
"""

__version__ = "0.1.0"

from vra_resource.application.services import (
    ActionSubmitter,
    IpAddressPoller,
    PollingPolicy,
    ResourceLookupService,
)
from vra_resource.config import ClientConfig, load_config
from vra_resource.domain.base.exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    InvalidArgumentError,
)
from vra_resource.domain.base.ports import HttpError, HttpNotFoundError, HttpTransportError
from vra_resource.domain.request import ActionRequestPayload, ActionSubmissionError, Request, RequestNotFoundError
from vra_resource.domain.resource import (
    ActionNotFoundError,
    MalformedDescriptorError,
    PollingCancelledError,
    PollingTimeoutError,
    Resource,
    ResourceNotFoundError,
)
from vra_resource.infrastructure.catalog import ResourceCollection
from vra_resource.infrastructure.http import VraHttpClient
from vra_resource.infrastructure.logging import get_logger, setup_logging

__all__: list[str] = [
    "ActionNotFoundError",
    "ActionRequestPayload",
    "ActionSubmissionError",
    "ActionSubmitter",
    "ClientConfig",
    "ConfigurationError",
    "DomainException",
    "EntityNotFoundError",
    "HttpError",
    "HttpNotFoundError",
    "HttpTransportError",
    "InvalidArgumentError",
    "IpAddressPoller",
    "MalformedDescriptorError",
    "PollingCancelledError",
    "PollingPolicy",
    "PollingTimeoutError",
    "Request",
    "RequestNotFoundError",
    "Resource",
    "ResourceCollection",
    "ResourceLookupService",
    "ResourceNotFoundError",
    "VraHttpClient",
    "get_logger",
    "load_config",
    "setup_logging",
]
