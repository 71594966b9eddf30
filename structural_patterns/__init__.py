"""Runnable examples of the adapter, bridge, composite and decorator patterns."""

__version__ = "1.0.0"

__all__ = [
    "adapter",
    "boxes",
    "cloud_storage",
    "computershop",
    "pizza",
    "shapes",
    "sharing",
    "sharing_bridge",
    "vehicles",
]