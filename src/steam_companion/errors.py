"""
Steam Companion error types.

Everything raised here is reduced to a failure envelope by the dispatcher.
"""

from typing import Any, Optional


class CompanionError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class TransportError(CompanionError):
    """Network failure or non-2xx response from a remote call. Never retried."""

    def __init__(self, message: str, code: str = "transport_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)


class RemoteFetchError(TransportError):
    def __init__(self, status: int, message: str):
        super().__init__(message, code="remote_fetch_error", details={"status": status})
        self.status = status


class IdentityError(CompanionError):
    def __init__(self, message: str = "Could not resolve Steam identity (is the browser session logged in?)"):
        super().__init__("identity_error", message)


class InjectionError(CompanionError):
    def __init__(self, tab_id: int):
        super().__init__(
            "injection_error",
            f"Failed to inject content script into tab {tab_id}",
            {"tab_id": tab_id},
        )
        self.tab_id = tab_id


class PermissionValidationError(CompanionError):
    def __init__(self, message: str):
        super().__init__("permission_validation_error", message)
