"""Exceptions raised by channelkit.

Classification outcomes such as an unknown channel type or an uncached guild
are not errors and are reported as ``None``. The exceptions here cover misuse
of the library by its caller.
"""

from __future__ import annotations

from typing import Any


class ChannelError(Exception):
    """Base exception for all channelkit errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        """Initialize channel error.

        Args:
            message: Technical error message for logging
            error_code: Unique error code for categorization
            context: Additional context data for debugging
        """
        super().__init__(message)
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}


class MissingCapabilityError(ChannelError):
    """Exception for collaborators that lack a required capability.

    Raised when a client or guild handed to the library cannot perform the
    lookups the channel factory depends on.
    """

    def __init__(self, capability: str, owner: Any, **kwargs):
        """Initialize missing capability error.

        Args:
            capability: Dotted name of the missing attribute (e.g. "guilds.cache")
            owner: Object that was expected to provide it
            **kwargs: Additional arguments passed to parent
        """
        owner_name = type(owner).__name__
        super().__init__(
            f"{owner_name} does not provide '{capability}'",
            error_code="MISSING_CAPABILITY",
            context={"capability": capability, "owner": owner_name},
            **kwargs
        )
        self.capability = capability
        self.owner = owner
