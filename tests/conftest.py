"""Global test configuration and fixtures."""

import copy
import sys
from pathlib import Path
from typing import Any, Optional
from unittest.mock import Mock

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from vra_resource.domain.base.ports import HttpClientPort, HttpResponse  # noqa: E402

RESOURCE_ID = "res-0001"
REQUEST_ID = "req-7001"

VM_DESCRIPTOR: dict[str, Any] = {
    "@type": "ConsumerResource",
    "id": RESOURCE_ID,
    "name": "webserver01",
    "description": "Frontend web server",
    "status": "ACTIVE",
    "requestId": REQUEST_ID,
    "resourceTypeRef": {"id": "Infrastructure.Virtual", "label": "Virtual Machine"},
    "organization": {
        "tenantRef": "vsphere.local",
        "tenantLabel": "vsphere.local",
        "subtenantRef": "bg-5f3a",
        "subtenantLabel": "Engineering",
    },
    "catalogItem": {"id": "cat-42", "label": "CentOS 7"},
    "owners": [
        {"tenantName": "vsphere.local", "ref": "alice@corp.local", "type": "USER", "value": "Alice"},
        {"tenantName": "vsphere.local", "ref": "bob@corp.local", "type": "USER", "value": "Bob"},
    ],
    "operations": [
        {"name": "Destroy", "id": "op-destroy", "description": "Destroy a machine."},
        {"name": "Power Off", "id": "op-poweroff", "description": "Power off a machine."},
        {"name": "Power On", "id": "op-poweron", "description": "Power on a machine."},
        {"name": "Shutdown", "id": "op-shutdown", "description": "Shut down a machine."},
    ],
    "resourceData": {
        "entries": [
            {"key": "MachineStatus", "value": {"type": "string", "value": "On"}},
            {
                "key": "NETWORK_LIST",
                "value": {
                    "type": "multiple",
                    "items": [
                        {
                            "type": "complex",
                            "values": {
                                "entries": [
                                    {"key": "NETWORK_NAME", "value": {"type": "string", "value": "VM Network"}},
                                    {"key": "NETWORK_ADDRESS", "value": {"type": "string", "value": "10.0.0.5"}},
                                    {
                                        "key": "NETWORK_MAC_ADDRESS",
                                        "value": {"type": "string", "value": "00:50:56:aa:bb:01"},
                                    },
                                ]
                            },
                        },
                        {
                            "type": "complex",
                            "values": {
                                "entries": [
                                    {"key": "NETWORK_NAME", "value": {"type": "string", "value": "Backup"}},
                                    {
                                        "key": "NETWORK_MAC_ADDRESS",
                                        "value": {"type": "string", "value": "00:50:56:aa:bb:02"},
                                    },
                                ]
                            },
                        },
                    ],
                },
            },
        ]
    },
}


@pytest.fixture
def descriptor() -> dict[str, Any]:
    """A complete descriptor for a powered-on virtual machine."""
    return copy.deepcopy(VM_DESCRIPTOR)


@pytest.fixture
def make_descriptor():
    """Factory building a VM descriptor with top-level keys overridden or removed."""

    def _make(remove: tuple[str, ...] = (), **overrides: Any) -> dict[str, Any]:
        data = copy.deepcopy(VM_DESCRIPTOR)
        for key in remove:
            data.pop(key, None)
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def mock_client() -> Mock:
    """HttpClientPort double; configure return values per test."""
    return Mock(spec=HttpClientPort)


@pytest.fixture
def make_response():
    """Factory for raw transport responses."""

    def _make(body: str = "", status_code: int = 200, headers: Optional[dict[str, str]] = None) -> HttpResponse:
        return HttpResponse(status_code=status_code, body=body, headers=headers or {})

    return _make


@pytest.fixture
def sleeps() -> list[float]:
    """Records the intervals slept by polling tests."""
    return []


@pytest.fixture
def fake_sleep(sleeps):
    """Sleep replacement that records the requested interval instead of blocking."""
    return sleeps.append
