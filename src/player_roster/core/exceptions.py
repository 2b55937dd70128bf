"""
Player Roster Exception Hierarchy.

Defines the custom exceptions raised by slot backends and configuration
loading. Registry operations never let these escape to command handlers;
they are caught at the load/save boundary and logged.
"""

from typing import Any


class RosterError(Exception):
    """
    Root of the roster error tree.

    Carries a message for the log line and a details mapping (slot key,
    size, env var) that is appended to str() so warnings name the slot
    or setting at fault.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        """
        Initialize a RosterError.

        Args:
            message: Text written to the warning log
            details: Slot or setting context, e.g. {"key": "list"}
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Message followed by key=value details, if any."""
        if not self.details:
            return self.message
        context = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({context})"

    def to_dict(self) -> dict[str, Any]:
        """Error type, message and details as a plain dict."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class SlotError(RosterError):
    """
    Errors raised by a key-value slot backend.

    Raised when the host storage cannot satisfy a request, including:
    - Write failures (I/O errors)
    - Values exceeding the slot size limit
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize a SlotError.

        Args:
            message: Human-readable error message
            key: Slot key involved
            operation: Operation being performed
            details: Optional structured data for debugging
        """
        details = details or {}
        if key:
            details["key"] = key
        if operation:
            details["operation"] = operation

        super().__init__(message, details=details)
        self.key = key
        self.operation = operation


class SlotWriteError(SlotError):
    """Raised when a value cannot be written to a slot."""

    def __init__(
        self,
        message: str = "Slot write failed",
        *,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, key=key, operation="write", details=details)


class SlotCapacityError(SlotWriteError):
    """Raised when a serialized value exceeds the slot size limit."""

    def __init__(
        self,
        message: str = "Slot capacity exceeded",
        *,
        key: str | None = None,
        size: int | None = None,
        limit: int | None = None,
    ):
        super().__init__(message, key=key, details={"size": size, "limit": limit})
        self.size = size
        self.limit = limit


class ConfigurationError(RosterError):
    """
    Errors in configuration loading or validation.

    Raised when:
    - Environment variables hold values of the wrong type
    - Configuration values are outside their allowed range
    """

    def __init__(
        self,
        message: str,
        *,
        env_var: str | None = None,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize a ConfigurationError.

        Args:
            message: Human-readable error message
            env_var: Environment variable name if applicable
            config_key: Configuration key if applicable
            details: Optional structured data for debugging
        """
        details = details or {}
        if env_var:
            details["env_var"] = env_var
        if config_key:
            details["config_key"] = config_key

        super().__init__(message, details=details)
        self.env_var = env_var
        self.config_key = config_key
