"""Resource aggregate - one virtual machine or catalog item on the platform."""

from typing import TYPE_CHECKING, Any, Optional

from vra_resource.constants import RESOURCE_API, VM_RESOURCE_TYPES
from vra_resource.domain.base.exceptions import InvalidArgumentError
from vra_resource.domain.base.ports import HttpClientPort, HttpNotFoundError, LoggingPort
from vra_resource.domain.request.action_request import ActionRequestPayload
from vra_resource.domain.resource.descriptor import MACHINE_STATUS_KEY, ResourceDescriptor
from vra_resource.domain.resource.exceptions import (
    ActionNotFoundError,
    MalformedDescriptorError,
    ResourceNotFoundError,
)
from vra_resource.domain.resource.value_objects import DescriptorCompleteness, MachineStatus, ResourceOwner

if TYPE_CHECKING:
    from vra_resource.application.services.action_submitter import ActionSubmitter
    from vra_resource.application.services.ip_address_poller import PollingPolicy
    from vra_resource.domain.request.aggregate import Request


class Resource:
    """
    Handle on a single platform resource.

    A resource is built either from its ID, in which case the descriptor is
    fetched immediately, or from a descriptor already obtained elsewhere (for
    example a bulk listing), in which case no network access happens. Exactly
    one of the two must be given.

    Descriptors obtained from bulk listings lack the ``operations`` list. Such
    descriptors are PARTIAL and are completed by a single re-fetch the first
    time actions are read.
    """

    def __init__(
        self,
        client: HttpClientPort,
        resource_id: Optional[str] = None,
        descriptor: Optional[dict[str, Any]] = None,
        logger: Optional[LoggingPort] = None,
        submitter: Optional["ActionSubmitter"] = None,
    ) -> None:
        if resource_id is None and descriptor is None:
            raise InvalidArgumentError("must supply an id or a resource descriptor")
        if resource_id is not None and descriptor is not None:
            raise InvalidArgumentError("must supply an id OR a resource descriptor, not both")

        self.client = client
        self._logger = logger or _default_logger()
        self._submitter = submitter
        self._descriptor: Optional[ResourceDescriptor] = None

        if descriptor is None:
            self.id = resource_id
            self.fetch_descriptor()
        else:
            self._descriptor = ResourceDescriptor.from_raw(descriptor)
            self.id = descriptor.get("id")

    @staticmethod
    def by_name(client: HttpClientPort, name: str) -> Optional["Resource"]:
        """
        Return the first resource whose name contains *name*, ignoring case.

        The query is applied as a regular-expression search, not an exact
        match: "web" finds "webserver01". Returns None when nothing matches.
        """
        if not name:
            raise InvalidArgumentError("name cannot be empty", argument="name")
        if client is None:
            raise InvalidArgumentError("client cannot be None", argument="client")

        from vra_resource.application.services.resource_lookup_service import ResourceLookupService

        return ResourceLookupService(client).by_name(name)

    @staticmethod
    def all(client: HttpClientPort) -> list["Resource"]:
        """Return every resource visible to the consumer."""
        from vra_resource.infrastructure.catalog.resource_collection import ResourceCollection

        return ResourceCollection(client).all()

    def fetch_descriptor(self) -> dict[str, Any]:
        """Fetch the descriptor from the platform, replacing the cached one."""
        self._logger.debug("Fetching descriptor for resource %s", self.id)
        try:
            raw = self.client.get_parsed(RESOURCE_API.format(resource_id=self.id))
        except HttpNotFoundError as e:
            raise ResourceNotFoundError(self.id) from e

        self._descriptor = ResourceDescriptor.from_raw(raw)
        return raw

    refresh = fetch_descriptor

    def ensure_complete(self) -> None:
        """Re-fetch once when the cached descriptor is partial."""
        if self._descriptor.completeness is DescriptorCompleteness.PARTIAL:
            self._logger.info("Descriptor for resource %s has no operations, re-fetching", self.id)
            self.fetch_descriptor()

    @property
    def descriptor(self) -> dict[str, Any]:
        """The raw descriptor document."""
        return self._descriptor.raw

    @property
    def parsed(self) -> ResourceDescriptor:
        return self._descriptor

    @property
    def completeness(self) -> DescriptorCompleteness:
        return self._descriptor.completeness

    # ------------------------------------------------------------------
    # Descriptor fields

    @property
    def name(self) -> Optional[str]:
        return self.descriptor.get("name")

    @property
    def description(self) -> Optional[str]:
        return self.descriptor.get("description")

    @property
    def status(self) -> Optional[str]:
        return self.descriptor.get("status")

    @property
    def is_vm(self) -> bool:
        return self._descriptor.resource_type_id in VM_RESOURCE_TYPES

    @property
    def organization(self) -> dict[str, Any]:
        return self.descriptor.get("organization") or {}

    @property
    def tenant_id(self) -> Optional[str]:
        org = self._descriptor.organization
        return org.tenant_ref if org else None

    @property
    def tenant_name(self) -> Optional[str]:
        org = self._descriptor.organization
        return org.tenant_label if org else None

    @property
    def subtenant_id(self) -> Optional[str]:
        org = self._descriptor.organization
        return org.subtenant_ref if org else None

    @property
    def subtenant_name(self) -> Optional[str]:
        org = self._descriptor.organization
        return org.subtenant_label if org else None

    @property
    def catalog_item(self) -> dict[str, Any]:
        return self.descriptor.get("catalogItem") or {}

    @property
    def catalog_id(self) -> Optional[str]:
        item = self._descriptor.catalog_item
        return item.id if item else None

    @property
    def catalog_name(self) -> Optional[str]:
        item = self._descriptor.catalog_item
        return item.label if item else None

    @property
    def owner_ids(self) -> list[Optional[str]]:
        return [owner.ref for owner in self._owners()]

    @property
    def owner_names(self) -> list[Optional[str]]:
        return [owner.value for owner in self._owners()]

    def _owners(self) -> list[ResourceOwner]:
        if self._descriptor.owners is None:
            raise MalformedDescriptorError(self.id, "owners")
        return self._descriptor.owners

    # ------------------------------------------------------------------
    # Machine state

    @property
    def machine_status(self) -> Any:
        entry = self._descriptor.find_entry(MACHINE_STATUS_KEY)
        if entry is None:
            raise MalformedDescriptorError(self.id, MACHINE_STATUS_KEY)
        return entry.scalar

    @property
    def machine_on(self) -> bool:
        return self.machine_status == MachineStatus.ON.value

    @property
    def machine_off(self) -> bool:
        return self.machine_status == MachineStatus.OFF.value

    @property
    def machine_turning_on(self) -> bool:
        return self.machine_status in (MachineStatus.TURNING_ON.value, MachineStatus.MACHINE_ACTIVATED.value)

    @property
    def machine_turning_off(self) -> bool:
        return self.machine_status in (MachineStatus.TURNING_OFF.value, MachineStatus.SHUTTING_DOWN.value)

    @property
    def machine_in_provisioned_state(self) -> bool:
        return self.machine_status == MachineStatus.MACHINE_PROVISIONED.value

    @property
    def network_interfaces(self) -> Optional[list[dict[str, Any]]]:
        """Flattened NETWORK_LIST items in platform order, or None."""
        if not self.is_vm:
            return None

        nics = self._descriptor.network_interfaces
        if nics is None:
            return None
        return [dict(nic.entries) for nic in nics]

    def ip_addresses(self, policy: Optional["PollingPolicy"] = None) -> Optional[list[str]]:
        """
        Wait until the platform reports IP addresses for this machine.

        Blocks according to *policy*; the default policy polls every 10
        seconds without limit. Returns None for non-VM resources and for
        machines without network interfaces, without touching the network.
        """
        if not self.is_vm or not self.network_interfaces:
            return None

        request_id = self._descriptor.request_id
        if not request_id:
            raise MalformedDescriptorError(self.id, "requestId")

        from vra_resource.application.services.ip_address_poller import IpAddressPoller

        return IpAddressPoller(self.client, logger=self._logger).wait_for_ip_addresses(request_id, policy)

    # ------------------------------------------------------------------
    # Actions

    @property
    def actions(self) -> Optional[list[dict[str, Any]]]:
        self.ensure_complete()
        return self.descriptor.get("operations")

    def action_id_by_name(self, name: str) -> Any:
        """Return the stored id of the first operation named *name*, or None."""
        if self.actions is None:
            return None

        for action in self._descriptor.operations:
            if action.name is not None and action.name == name:
                return action.id
        return None

    def destroy(self) -> "Request":
        return self._invoke_action("Destroy", "destroy")

    def shutdown(self) -> "Request":
        return self._invoke_action("Shutdown", "shutdown")

    def poweroff(self) -> "Request":
        return self._invoke_action("Power Off", "power-off")

    def poweron(self) -> "Request":
        return self._invoke_action("Power On", "power-on")

    def _invoke_action(self, action_name: str, label: str) -> "Request":
        action_id = self.action_id_by_name(action_name)
        if action_id is None:
            raise ActionNotFoundError(self.id, action_name, label)
        return self.submit_action_request(action_id)

    def action_request_payload(self, action_id: str) -> ActionRequestPayload:
        return self.submitter.build_payload(self, action_id)

    def submit_action_request(self, action_id: str) -> "Request":
        return self.submitter.submit_action_request(self, action_id)

    @property
    def submitter(self) -> "ActionSubmitter":
        if self._submitter is None:
            from vra_resource.application.services.action_submitter import ActionSubmitter

            self._submitter = ActionSubmitter(self.client, logger=self._logger)
        return self._submitter

    def __repr__(self) -> str:
        return f"Resource(id={self.id!r}, name={self.name!r})"


def _default_logger() -> LoggingPort:
    from vra_resource.infrastructure.adapters.logging_adapter import LoggingAdapter

    return LoggingAdapter(__name__)
