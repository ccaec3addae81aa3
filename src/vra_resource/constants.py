"""Catalog-service REST paths consumed by the resource workflow."""

RESOURCES_API = "/catalog-service/api/consumer/resources"
RESOURCE_API = "/catalog-service/api/consumer/resources/{resource_id}"
REQUESTS_API = "/catalog-service/api/consumer/requests"
REQUEST_API = "/catalog-service/api/consumer/requests/{request_id}"
REQUEST_RESOURCES_API = "/catalog-service/api/consumer/requests/{request_id}/resources"
REQUEST_RESOURCE_VIEWS_API = "/catalog-service/api/consumer/requests/{request_id}/resourceViews"

VM_RESOURCE_TYPES = ("Infrastructure.Virtual", "Infrastructure.Cloud")

DEFAULT_PAGE_SIZE = 20
DEFAULT_POLL_INTERVAL = 10
