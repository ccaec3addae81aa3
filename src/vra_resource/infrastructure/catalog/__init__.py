"""Catalog-service listings."""

from .resource_collection import ResourceCollection

__all__: list[str] = ["ResourceCollection"]
