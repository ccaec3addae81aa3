"""Polling for IP addresses assigned to a freshly provisioned machine."""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from vra_resource.constants import DEFAULT_POLL_INTERVAL, REQUEST_RESOURCE_VIEWS_API
from vra_resource.domain.base.ports import HttpClientPort, LoggingPort
from vra_resource.domain.resource.exceptions import PollingCancelledError, PollingTimeoutError
from vra_resource.infrastructure.adapters.logging_adapter import LoggingAdapter

T = TypeVar("T")


@dataclass(frozen=True)
class PollingPolicy:
    """
    How long and how often to poll.

    Attributes:
        interval: Seconds to wait between attempts.
        max_attempts: Give up after this many attempts; None means no limit.
        timeout: Give up once this many seconds have elapsed; None means no limit.
        cancel_event: When set, polling stops with PollingCancelledError. The
            wait between attempts returns early when the event is set.
        sleep: Sleep function used when no cancel event is given.
        clock: Monotonic clock used for the timeout.
    """

    interval: float = DEFAULT_POLL_INTERVAL
    max_attempts: Optional[int] = None
    timeout: Optional[float] = None
    cancel_event: Optional[threading.Event] = None
    sleep: Callable[[float], None] = time.sleep
    clock: Callable[[], float] = time.monotonic

    def __post_init__(self) -> None:
        if self.interval < 0:
            raise ValueError("interval must not be negative")
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.timeout is not None and self.timeout < 0:
            raise ValueError("timeout must not be negative")

    @property
    def bounded(self) -> bool:
        return self.max_attempts is not None or self.timeout is not None

    def cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()

    def wait(self) -> None:
        if self.cancel_event is not None:
            self.cancel_event.wait(self.interval)
        else:
            self.sleep(self.interval)


def poll_until(
    operation: Callable[[], T],
    policy: PollingPolicy,
    description: str,
    logger: Optional[LoggingPort] = None,
) -> T:
    """
    Call *operation* until it returns a truthy value and return that value.

    Raises PollingTimeoutError when the policy's attempt or time limit runs
    out and PollingCancelledError when its cancel event is set.
    """
    started = policy.clock()
    attempts = 0

    while True:
        if policy.cancelled():
            raise PollingCancelledError(description, attempts)

        attempts += 1
        result = operation()
        if result:
            return result

        elapsed = policy.clock() - started
        if policy.max_attempts is not None and attempts >= policy.max_attempts:
            raise PollingTimeoutError(description, attempts, elapsed)
        if policy.timeout is not None and elapsed + policy.interval > policy.timeout:
            raise PollingTimeoutError(description, attempts, elapsed)

        if logger:
            logger.debug(
                "Still waiting for %s (attempt %d), retrying in %ss", description, attempts, policy.interval
            )
        policy.wait()


class IpAddressPoller:
    """Waits for the platform to report IP addresses through a request's resource views."""

    def __init__(self, client: HttpClientPort, logger: Optional[LoggingPort] = None) -> None:
        self.client = client
        self._logger = logger or LoggingAdapter(__name__)

    def collect_ip_addresses(self, request_id: str) -> list[str]:
        """Return every non-empty data.ip_address in the request's resource views."""
        response = self.client.http_get(REQUEST_RESOURCE_VIEWS_API.format(request_id=request_id))
        return self._extract_ip_addresses(response.json())

    @staticmethod
    def _extract_ip_addresses(views: dict[str, Any]) -> list[str]:
        addresses = []
        for content in views.get("content") or []:
            data = content.get("data")
            if not isinstance(data, dict):
                continue
            ip_address = data.get("ip_address")
            if ip_address:
                addresses.append(ip_address)
        return addresses

    def wait_for_ip_addresses(self, request_id: str, policy: Optional[PollingPolicy] = None) -> list[str]:
        """Poll until at least one IP address is reported for *request_id*."""
        policy = policy or PollingPolicy()
        if not policy.bounded:
            self._logger.warning(
                "Waiting for IP addresses of request %s without a timeout or attempt limit", request_id
            )
        else:
            self._logger.info("Waiting for IP addresses of request %s", request_id)

        return poll_until(
            lambda: self.collect_ip_addresses(request_id),
            policy,
            f"IP addresses of request {request_id}",
            logger=self._logger,
        )
