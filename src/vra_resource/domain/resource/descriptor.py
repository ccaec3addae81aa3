"""Decoded resource descriptor.

The platform returns a loosely structured JSON document per resource. Each
section the workflow reads is decoded into value objects the first time it is
accessed and cached from then on; a section that cannot be decoded fails only
the accessor reading it. The raw mapping is kept verbatim for callers that
need fields this module does not model.
"""

from functools import cached_property
from typing import Any, Callable, Optional, TypeVar

from pydantic import ValidationError as PydanticValidationError

from vra_resource.domain.resource.exceptions import MalformedDescriptorError
from vra_resource.domain.resource.value_objects import (
    CatalogItemInfo,
    DescriptorCompleteness,
    NetworkInterface,
    OrganizationInfo,
    ResourceAction,
    ResourceDataEntry,
    ResourceOwner,
)

MACHINE_STATUS_KEY = "MachineStatus"
NETWORK_LIST_KEY = "NETWORK_LIST"

T = TypeVar("T")


class ResourceDescriptor:
    """A resource document with its nested sections decoded on first use."""

    def __init__(self, raw: dict[str, Any]) -> None:
        self.raw = raw

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> "ResourceDescriptor":
        """Wrap *raw*, which must be a mapping."""
        if not isinstance(raw, dict):
            raise MalformedDescriptorError(
                None, "descriptor", f"Resource descriptor must be a mapping, got {type(raw).__name__}"
            )
        return cls(raw)

    def _decode(self, field: str, decoder: Callable[[Any], T]) -> Optional[T]:
        value = self.raw.get(field)
        if value is None:
            return None
        try:
            return decoder(value)
        except (PydanticValidationError, AttributeError, TypeError) as e:
            raise MalformedDescriptorError(
                self.id, field, f"Malformed {field} entry for resource {self.id}: {e}"
            ) from e

    @cached_property
    def organization(self) -> Optional[OrganizationInfo]:
        return self._decode("organization", OrganizationInfo.model_validate)

    @cached_property
    def catalog_item(self) -> Optional[CatalogItemInfo]:
        return self._decode("catalogItem", CatalogItemInfo.model_validate)

    @cached_property
    def owners(self) -> Optional[list[ResourceOwner]]:
        return self._decode("owners", lambda owners: [ResourceOwner.model_validate(o) for o in owners])

    @cached_property
    def entries(self) -> Optional[list[ResourceDataEntry]]:
        resource_data = self.raw.get("resourceData") or {}
        if not isinstance(resource_data, dict):
            raise MalformedDescriptorError(self.id, "resourceData")
        entries = resource_data.get("entries")
        if entries is None:
            return None
        try:
            return [ResourceDataEntry.model_validate(e) for e in entries]
        except (PydanticValidationError, TypeError) as e:
            raise MalformedDescriptorError(self.id, "resourceData") from e

    @cached_property
    def operations(self) -> Optional[list[ResourceAction]]:
        return self._decode("operations", lambda ops: [ResourceAction.model_validate(op) for op in ops])

    @property
    def id(self) -> Any:
        return self.raw.get("id")

    @property
    def completeness(self) -> DescriptorCompleteness:
        """Bulk listings omit operations; such descriptors are partial."""
        if self.raw.get("operations") is None:
            return DescriptorCompleteness.PARTIAL
        return DescriptorCompleteness.COMPLETE

    @property
    def resource_type_id(self) -> Optional[str]:
        type_ref = self.raw.get("resourceTypeRef")
        return type_ref.get("id") if isinstance(type_ref, dict) else None

    @property
    def request_id(self) -> Optional[str]:
        return self.raw.get("requestId")

    def find_entry(self, key: str) -> Optional[ResourceDataEntry]:
        """Return the first resource-data entry named *key*."""
        for entry in self.entries or []:
            if entry.key == key:
                return entry
        return None

    @cached_property
    def network_interfaces(self) -> Optional[list[NetworkInterface]]:
        """Decode the NETWORK_LIST entry, or None when the resource has none."""
        network_list = self.find_entry(NETWORK_LIST_KEY)
        if network_list is None:
            return None

        try:
            return [NetworkInterface.from_item(item) for item in network_list.value["items"]]
        except (KeyError, TypeError) as e:
            raise MalformedDescriptorError(
                self.id, NETWORK_LIST_KEY, f"Malformed {NETWORK_LIST_KEY} entry for resource {self.id}"
            ) from e
