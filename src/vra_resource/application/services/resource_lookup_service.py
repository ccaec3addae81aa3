"""Lookup of resources by name."""

import re
from typing import TYPE_CHECKING, Optional

from vra_resource.domain.base.exceptions import InvalidArgumentError
from vra_resource.domain.base.ports import HttpClientPort, LoggingPort
from vra_resource.infrastructure.adapters.logging_adapter import LoggingAdapter
from vra_resource.infrastructure.catalog.resource_collection import ResourceCollection

if TYPE_CHECKING:
    from vra_resource.domain.resource.aggregate import Resource


class ResourceLookupService:
    """Finds resources in the consumer's resource collection."""

    def __init__(
        self,
        client: HttpClientPort,
        collection: Optional[ResourceCollection] = None,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        if client is None:
            raise InvalidArgumentError("client cannot be None", argument="client")
        self.client = client
        self._collection = collection or ResourceCollection(client)
        self._logger = logger or LoggingAdapter(__name__)

    def by_name(self, name: str) -> Optional["Resource"]:
        """
        Return the first resource whose lower-cased name matches *name*.

        *name* is lower-cased and used as a regular expression searched
        anywhere in the resource name, so it behaves as a case-insensitive
        substring match for plain names.
        """
        if not name:
            raise InvalidArgumentError("name cannot be empty", argument="name")

        try:
            pattern = re.compile(name.lower())
        except re.error as e:
            raise InvalidArgumentError(f"name is not a valid pattern: {e}", argument="name") from e

        for resource in self._collection.all():
            if isinstance(resource.name, str) and pattern.search(resource.name.lower()):
                self._logger.debug("Resource %s matched name query %r", resource.id, name)
                return resource

        self._logger.debug("No resource matched name query %r", name)
        return None
