"""channelkit: channel materialization for chat platform clients."""

from channelkit.client import Client, Guild

__all__ = ["Client", "Guild"]
