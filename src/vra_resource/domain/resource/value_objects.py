"""Resource value objects decoded from the platform descriptor."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class DescriptorValueObject(BaseModel):
    """Base for immutable descriptor sections using the platform's camelCase keys.

    Descriptor values are dynamically typed, so fields are declared loosely
    and stored values pass through without coercion.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class DescriptorCompleteness(str, Enum):
    """Whether a descriptor carries everything the action workflow needs."""

    PARTIAL = "partial"
    COMPLETE = "complete"


class MachineStatus(str, Enum):
    """Known values of the MachineStatus resource-data entry."""

    ON = "On"
    OFF = "Off"
    TURNING_ON = "TurningOn"
    MACHINE_ACTIVATED = "MachineActivated"
    TURNING_OFF = "TurningOff"
    SHUTTING_DOWN = "ShuttingDown"
    MACHINE_PROVISIONED = "MachineProvisioned"


class OrganizationInfo(DescriptorValueObject):
    """Tenant and business group the resource belongs to."""

    tenant_ref: Any = Field(None, alias="tenantRef")
    tenant_label: Any = Field(None, alias="tenantLabel")
    subtenant_ref: Any = Field(None, alias="subtenantRef")
    subtenant_label: Any = Field(None, alias="subtenantLabel")


class CatalogItemInfo(DescriptorValueObject):
    """Catalog item the resource was provisioned from."""

    id: Any = None
    label: Any = None


class ResourceOwner(DescriptorValueObject):
    """One entry of the owners list."""

    ref: Any = None
    value: Any = None


class ResourceAction(DescriptorValueObject):
    """An operation the platform allows against the resource.

    Identifiers are kept exactly as stored; operations without a name are
    kept but never match a lookup by name.
    """

    id: Any = None
    name: Any = None
    description: Any = None


class ResourceDataEntry(DescriptorValueObject):
    """A key/value pair of resourceData.entries."""

    key: Any = None
    value: Any = None

    @property
    def scalar(self) -> Any:
        """Return the literal value wrapped in the entry's value object."""
        if isinstance(self.value, dict):
            return self.value.get("value")
        return None


class NetworkInterface(DescriptorValueObject):
    """One item of the NETWORK_LIST entry, flattened to key/value pairs."""

    entries: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "NetworkInterface":
        """Flatten an item's nested values.entries list."""
        entries: dict[str, Any] = {}
        for entry in item["values"]["entries"]:
            entries[entry["key"]] = entry["value"]["value"]
        return cls(entries=entries)

    @property
    def name(self) -> Optional[str]:
        return self.entries.get("NETWORK_NAME")

    @property
    def address(self) -> Optional[str]:
        return self.entries.get("NETWORK_ADDRESS")

    @property
    def mac_address(self) -> Optional[str]:
        return self.entries.get("NETWORK_MAC_ADDRESS")
