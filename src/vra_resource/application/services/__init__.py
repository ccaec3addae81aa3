"""Application services."""

from .action_submitter import ActionSubmitter
from .ip_address_poller import IpAddressPoller, PollingPolicy, poll_until
from .resource_lookup_service import ResourceLookupService

__all__: list[str] = [
    "ActionSubmitter",
    "IpAddressPoller",
    "PollingPolicy",
    "ResourceLookupService",
    "poll_until",
]
