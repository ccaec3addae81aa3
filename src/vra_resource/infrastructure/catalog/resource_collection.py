"""Listing of the consumer's resources."""

from typing import Optional

from vra_resource.constants import RESOURCES_API
from vra_resource.domain.base.ports import HttpClientPort, LoggingPort
from vra_resource.domain.resource.aggregate import Resource


class ResourceCollection:
    """
    All resources visible to the consumer.

    Resources are built from the listing's descriptors without a per-resource
    fetch. Listing descriptors carry no operations, so these resources start
    out PARTIAL.
    """

    def __init__(
        self,
        client: HttpClientPort,
        page_size: Optional[int] = None,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        self.client = client
        self.page_size = page_size
        self._logger = logger

    def all(self) -> list[Resource]:
        descriptors = self.client.http_get_paginated(RESOURCES_API, self.page_size)
        return [Resource(self.client, descriptor=descriptor, logger=self._logger) for descriptor in descriptors]
