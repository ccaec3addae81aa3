"""Adapters implementing domain ports."""

from .logging_adapter import LoggingAdapter

__all__: list[str] = ["LoggingAdapter"]
