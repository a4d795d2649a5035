"""Provider executors for the graphics query engine."""

from graphics_api.executors.base import run_provider_with_status

__all__ = [
    "run_provider_with_status",
]
