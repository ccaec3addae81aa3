"""Resource domain - resource aggregate, descriptor and value objects."""

from .aggregate import Resource
from .descriptor import ResourceDescriptor
from .exceptions import (
    ActionNotFoundError,
    MalformedDescriptorError,
    PollingCancelledError,
    PollingTimeoutError,
    ResourceNotFoundError,
)
from .value_objects import (
    CatalogItemInfo,
    DescriptorCompleteness,
    MachineStatus,
    NetworkInterface,
    OrganizationInfo,
    ResourceAction,
    ResourceDataEntry,
    ResourceOwner,
)

__all__: list[str] = [
    "ActionNotFoundError",
    "CatalogItemInfo",
    "DescriptorCompleteness",
    "MachineStatus",
    "MalformedDescriptorError",
    "NetworkInterface",
    "OrganizationInfo",
    "PollingCancelledError",
    "PollingTimeoutError",
    "Resource",
    "ResourceAction",
    "ResourceDataEntry",
    "ResourceDescriptor",
    "ResourceNotFoundError",
    "ResourceOwner",
]
